"""Shared configuration for scanline rasterization.

This module centralizes the defaults used by:
    - scanline_lib.utils.rasterize
    - applications embedding the package (via configure_logging)

Having these values in one place keeps the raster helpers consistent and
makes it easy to change a default globally.
"""

from __future__ import annotations

import logging
import os

from .domain.fill_rule import FillRule

# Fill rule used when a caller does not pass one explicitly
DEFAULT_FILL_RULE = FillRule.NONZERO

# Offset from a pixel's corner to its sample point (0.5 = pixel centre)
SAMPLE_OFFSET = 0.5

# Default log level, overridable through the environment
LOG_LEVEL = os.environ.get('SCANLINE_LOG_LEVEL', 'WARNING')

LOG_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s] %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Logger shared by every module of the package
PACKAGE_LOGGER = 'scanline_lib'

logger = logging.getLogger(__name__)


def configure_logging(level: str = LOG_LEVEL, log_file: str | None = None) -> logging.Logger:
    """Route the package's log records to stderr and optionally a file.

    Only the ``scanline_lib`` logger is touched; the root logger and any
    handlers the embedding application installed stay as they are. Handlers
    added by an earlier call are replaced, so calling this twice does not
    duplicate output. Records handled here do not propagate to the root
    logger.

    Args:
        level: Log level string ('DEBUG', 'INFO', 'WARNING', 'ERROR').
            Unknown names fall back to INFO.
        log_file: Optional path to log file. If None, logs to stderr only.

    Returns:
        The configured package logger.

    Example:
        Trace scanline loading while debugging a glyph::

            from scanline_lib.config import configure_logging
            configure_logging(level='DEBUG', log_file='raster.log')
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in [h for h in package_logger.handlers if getattr(h, '_scanline_handler', False)]:
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        handler._scanline_handler = True
        package_logger.addHandler(handler)
    package_logger.propagate = False

    logger.info("Logging configured: level=%s, file=%s", level, log_file or 'stderr')
    return package_logger
