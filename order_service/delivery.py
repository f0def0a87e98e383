"""
delivery.py — Delivery Strategies

Every delivery strategy implements deliver_order(order). A delivery strategy
accepts any order and never looks at how it was paid or who gets notified.
"""

from typing import TYPE_CHECKING, Optional, Protocol

from .reporting import ActionReporter

if TYPE_CHECKING:
    from .models import Order


class Delivery(Protocol):
    """Anything that can get an order to the customer."""

    def deliver_order(self, order: "Order") -> None:
        ...


class CourierDelivery:
    """
    Simulated hand-over to a courier.

    Args:
        reporter (ActionReporter, optional): Receives the delivery action.
    """
    variant = "courier"

    def __init__(self, reporter: Optional[ActionReporter] = None):
        self.reporter = reporter if reporter is not None else ActionReporter()

    def deliver_order(self, order: "Order") -> None:
        """
        Dispatches the order.

        Args:
            order (Order): Any order; only its id is used in the report.
        """
        self.reporter.report("delivery", self.variant, f"Order {order.order_id} handed to courier")


class PostDelivery:
    """Simulated shipment by post."""
    variant = "post"

    def __init__(self, reporter: Optional[ActionReporter] = None):
        self.reporter = reporter if reporter is not None else ActionReporter()

    def deliver_order(self, order: "Order") -> None:
        self.reporter.report("delivery", self.variant, f"Order {order.order_id} shipped by post")


class PickUpPointDelivery:
    """Simulated delivery to a pick-up point where the customer collects the order."""
    variant = "pickup_point"

    def __init__(self, reporter: Optional[ActionReporter] = None):
        self.reporter = reporter if reporter is not None else ActionReporter()

    def deliver_order(self, order: "Order") -> None:
        self.reporter.report(
            "delivery", self.variant, f"Order {order.order_id} ready for collection at the pick-up point"
        )
