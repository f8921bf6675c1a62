"""Fill rules for interpreting winding numbers.

A fill rule maps the winding number accumulated along a scanline to a binary
inside/outside decision.

Example:
    >>> FillRule.NONZERO.decide(-2)
    True
    >>> FillRule.ODD_EVEN.decide(2)
    False
"""

from __future__ import annotations

from enum import Enum


class FillRule(Enum):
    """How a winding number is resolved into a fill value.

    Members:
        NONZERO: Filled wherever the winding number is not zero.
        ODD_EVEN: Filled wherever the winding number is odd.
        POSITIVE: Filled wherever the winding number is positive.
        NEGATIVE: Filled wherever the winding number is negative.

    The string values allow choosing a rule from configuration::

        rule = FillRule('odd_even')
    """
    NONZERO = 'nonzero'
    ODD_EVEN = 'odd_even'
    POSITIVE = 'positive'
    NEGATIVE = 'negative'

    def decide(self, winding: int) -> bool:
        """Resolve a winding number into a fill value."""
        if self is FillRule.NONZERO:
            return winding != 0
        if self is FillRule.ODD_EVEN:
            return winding & 1 != 0
        if self is FillRule.POSITIVE:
            return winding > 0
        return winding < 0
