"""
errors.py — Exception Types for Order Processing

All errors raised by this package derive from OrderServiceError so callers
(CLI, HTTP API) can map them to a single failure path.
"""


class OrderServiceError(Exception):
    """Base class for all order processing errors."""


class InvalidItemError(OrderServiceError, ValueError):
    """An order item was rejected (negative price, non-positive quantity or empty name)."""


class InvalidDiscountError(OrderServiceError, ValueError):
    """A discount rule was configured with an out-of-range value."""


class UnknownStrategyError(OrderServiceError, LookupError):
    """No payment, delivery, notification or discount strategy is registered under the given name."""
