"""
registry.py — Strategy Lookup by Name

Maps the names used by the CLI and the HTTP API to strategy classes.
Registering a new strategy means adding one entry here; Order and the
workflow stay untouched.
"""

from typing import Optional

from .delivery import CourierDelivery, Delivery, PickUpPointDelivery, PostDelivery
from .discounts import Discount, FixedAmountDiscount, NoDiscount, PercentageDiscount
from .errors import UnknownStrategyError
from .notifications import EmailNotification, Notification, SmsNotification
from .payments import BankTransferPayment, CreditCardPayment, Payment, PayPalPayment
from .reporting import ActionReporter

PAYMENT_METHODS = {
    "credit_card": CreditCardPayment,
    "paypal": PayPalPayment,
    "bank_transfer": BankTransferPayment,
}

DELIVERY_METHODS = {
    "courier": CourierDelivery,
    "post": PostDelivery,
    "pickup_point": PickUpPointDelivery,
}

NOTIFIERS = {
    "email": EmailNotification,
    "sms": SmsNotification,
}


def _lookup(table: dict, kind: str, name: str):
    try:
        return table[name]
    except KeyError:
        known = ", ".join(sorted(table))
        raise UnknownStrategyError(f"Unknown {kind} strategy {name!r} (known: {known})") from None


def build_payment(name: str, reporter: Optional[ActionReporter] = None) -> Payment:
    """
    Builds a payment strategy by registry name.

    Args:
        name (str): Key of PAYMENT_METHODS, e.g. 'credit_card'.
        reporter (ActionReporter, optional): Reporter injected into the strategy.

    Returns:
        Payment: A new strategy instance.

    Raises:
        UnknownStrategyError: If name is not registered.
    """
    return _lookup(PAYMENT_METHODS, "payment", name)(reporter)


def build_delivery(name: str, reporter: Optional[ActionReporter] = None) -> Delivery:
    """Builds a delivery strategy by DELIVERY_METHODS name; see build_payment()."""
    return _lookup(DELIVERY_METHODS, "delivery", name)(reporter)


def build_notifier(name: str, reporter: Optional[ActionReporter] = None) -> Notification:
    """Builds a notifier by NOTIFIERS name; see build_payment()."""
    return _lookup(NOTIFIERS, "notification", name)(reporter)


def build_discount(kind: str, value: float = 0.0) -> Discount:
    """
    Builds a discount rule.

    Args:
        kind (str): 'none', 'percentage' or 'fixed'.
        value (float): Fraction for 'percentage', amount for 'fixed'; ignored for 'none'.

    Raises:
        UnknownStrategyError: If kind is not a known discount rule.
        InvalidDiscountError: If value is out of range for the rule.
    """
    if kind == "none":
        return NoDiscount()
    if kind == "percentage":
        return PercentageDiscount(value)
    if kind == "fixed":
        return FixedAmountDiscount(value)
    raise UnknownStrategyError(f"Unknown discount strategy {kind!r} (known: fixed, none, percentage)")
