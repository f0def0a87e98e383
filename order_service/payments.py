"""
payments.py — Payment Strategies

Every payment strategy implements process_payment(amount). Strategies are
interchangeable: none raises for a valid non-negative amount and none needs
anything beyond the amount itself. New payment methods only need a class
with a matching process_payment() and an entry in registry.PAYMENT_METHODS.
"""

from typing import Optional, Protocol

from .reporting import ActionReporter


class Payment(Protocol):
    """Anything that can charge an amount for an order."""

    def process_payment(self, amount: float) -> None:
        ...


class CreditCardPayment:
    """
    Simulated card charge.

    Args:
        reporter (ActionReporter, optional): Receives the payment action.
    """
    variant = "credit_card"

    def __init__(self, reporter: Optional[ActionReporter] = None):
        self.reporter = reporter if reporter is not None else ActionReporter()

    def process_payment(self, amount: float) -> None:
        """
        Charges the amount.

        Args:
            amount (float): Order total to charge, non-negative.
        """
        self.reporter.report("payment", self.variant, f"Card payment: {amount:.2f}", amount=amount)


class PayPalPayment:
    """Simulated PayPal checkout. Reports one payment action per call."""
    variant = "paypal"

    def __init__(self, reporter: Optional[ActionReporter] = None):
        self.reporter = reporter if reporter is not None else ActionReporter()

    def process_payment(self, amount: float) -> None:
        self.reporter.report("payment", self.variant, f"PayPal payment: {amount:.2f}", amount=amount)


class BankTransferPayment:
    """Simulated bank transfer. Reports one payment action per call."""
    variant = "bank_transfer"

    def __init__(self, reporter: Optional[ActionReporter] = None):
        self.reporter = reporter if reporter is not None else ActionReporter()

    def process_payment(self, amount: float) -> None:
        self.reporter.report("payment", self.variant, f"Bank transfer payment: {amount:.2f}", amount=amount)
