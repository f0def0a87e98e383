"""
notifications.py — Customer Notification Strategies

send_notification() accepts any message; notifiers know nothing about
orders, payments or deliveries.
"""

from typing import Optional, Protocol

from .reporting import ActionReporter


class Notification(Protocol):
    """Anything that can deliver a text message to the customer."""

    def send_notification(self, message: str) -> None:
        ...


class EmailNotification:
    """
    Simulated e-mail to the customer.

    Args:
        reporter (ActionReporter, optional): Receives the notification action.
    """
    variant = "email"

    def __init__(self, reporter: Optional[ActionReporter] = None):
        self.reporter = reporter if reporter is not None else ActionReporter()

    def send_notification(self, message: str) -> None:
        """
        Sends the message.

        Args:
            message (str): Any text, including an empty one.
        """
        self.reporter.report("notification", self.variant, f"Sending email: {message}")


class SmsNotification:
    """Simulated SMS to the customer."""
    variant = "sms"

    def __init__(self, reporter: Optional[ActionReporter] = None):
        self.reporter = reporter if reporter is not None else ActionReporter()

    def send_notification(self, message: str) -> None:
        self.reporter.report("notification", self.variant, f"Sending SMS: {message}")
