"""
discounts.py — Discount Rules and DiscountCalculator

A discount rule turns a subtotal into a total via apply_discount(amount).
DiscountCalculator wraps exactly one rule and delegates to it, so new rules
are added as new classes without touching the calculator or the order.
"""

import math
from typing import Protocol

from .errors import InvalidDiscountError
from .logging_config import get_logger

log = get_logger(__name__)


class Discount(Protocol):
    """A rule turning a subtotal into the amount to charge."""

    def apply_discount(self, amount: float) -> float:
        ...


class NoDiscount:
    """Leaves the amount unchanged."""
    variant = "none"

    def apply_discount(self, amount: float) -> float:
        return amount

    def __repr__(self) -> str:
        return "NoDiscount()"


class PercentageDiscount:
    """
    Reduces the amount by a fraction: amount × (1 − fraction).

    Args:
        fraction (float): Share to take off, in [0, 1). 0.1 means 10 %.

    Raises:
        InvalidDiscountError: If fraction lies outside [0, 1).
    """
    variant = "percentage"

    def __init__(self, fraction: float):
        if not 0 <= fraction < 1:
            log.warning(f"Rejected percentage discount: fraction={fraction}")
            raise InvalidDiscountError(f"Discount fraction must be in [0, 1), got {fraction}")
        self.fraction = fraction

    def apply_discount(self, amount: float) -> float:
        return amount * (1 - self.fraction)

    def __repr__(self) -> str:
        return f"PercentageDiscount({self.fraction})"


class FixedAmountDiscount:
    """
    Takes a fixed amount off, never going below zero.

    Raises:
        InvalidDiscountError: If value is negative or not finite.
    """
    variant = "fixed"

    def __init__(self, value: float):
        if not (math.isfinite(value) and value >= 0):
            log.warning(f"Rejected fixed discount: value={value}")
            raise InvalidDiscountError(f"Fixed discount must be a non-negative amount, got {value}")
        self.value = value

    def apply_discount(self, amount: float) -> float:
        return max(0.0, amount - self.value)

    def __repr__(self) -> str:
        return f"FixedAmountDiscount({self.value})"


class DiscountCalculator:
    """
    Applies one injected discount rule.

    Args:
        discount (Discount): Rule the calculator delegates to.
    """

    def __init__(self, discount: Discount):
        self.discount = discount

    def calculate(self, amount: float) -> float:
        """
        Args:
            amount (float): Subtotal before discount.

        Returns:
            float: Exactly what the wrapped rule returns for `amount`.
        """
        return self.discount.apply_discount(amount)
