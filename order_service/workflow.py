"""
workflow.py — Core Orchestration Logic for Order Processing

This module runs an order through its fixed processing sequence.

Workflow Overview:
1. Sum price × quantity over all items (subtotal)
2. Apply the selected discount rule (total)
3. Charge the total through the order's payment strategy
4. Hand the order to its delivery strategy
5. Notify the customer through the order's notifier
"""

from typing import Optional

from .config import DEFAULT_NOTIFICATION_MESSAGE
from .discounts import Discount, DiscountCalculator, NoDiscount, PercentageDiscount
from .errors import OrderServiceError
from .logging_config import get_logger
from .models import Order, OrderResult, calculate_subtotal
from .registry import build_delivery, build_notifier, build_payment
from .reporting import ActionReporter

log = get_logger(__name__)

SAMPLE_ITEMS = (
    ("Laptop", 300000, 1),
    ("Mouse", 5000, 2),
)
SAMPLE_DISCOUNT_FRACTION = 0.1


def process_order(
        order: Order,
        discount: Optional[Discount] = None,
        message: str = DEFAULT_NOTIFICATION_MESSAGE,
        reporter: Optional[ActionReporter] = None,
) -> OrderResult:
    """
    Executes the complete processing sequence for a single order.

    Args:
        order (Order): Order with payment, delivery and notification strategies set.
        discount (Discount, optional): Discount rule; NoDiscount when omitted.
        message (str): Text passed to the notifier.
        reporter (ActionReporter, optional): Receives the subtotal and total
            actions. Build the order's strategies with the same reporter to
            collect their actions in the result as well.

    Returns:
        OrderResult: Subtotal, total and every action recorded on `reporter`
        during this call, in emission order.

    Raises:
        OrderServiceError: If a strategy slot of the order is not set.

    Workflow Steps:
        Step 1 – Pricing:
            - Subtotal over all items, discount applied via DiscountCalculator.
        Step 2 – Payment:
            - process_payment(total).
        Step 3 – Delivery:
            - deliver_order(order).
        Step 4 – Notification:
            - send_notification(message).
    """
    log_prefix = f"[Order: {order.order_id}]"
    reporter = reporter if reporter is not None else ActionReporter()
    discount = discount if discount is not None else NoDiscount()
    first_action = len(reporter.actions)

    missing = [
        slot for slot in ("payment_method", "delivery_method", "notifier")
        if getattr(order, slot) is None
    ]
    if missing:
        log.error(f"{log_prefix} Cannot process order, missing strategies: {', '.join(missing)}")
        raise OrderServiceError(f"Order {order.order_id} has no {', '.join(missing)}")

    log.info(f"{log_prefix} Processing started ({len(order)} items).")

    # --- 1. Pricing ---
    subtotal = calculate_subtotal(order.items)
    total = DiscountCalculator(discount).calculate(subtotal)
    reporter.report("subtotal", "order", f"Order subtotal: {subtotal:.2f}", amount=subtotal)
    reporter.report(
        "total", getattr(discount, "variant", type(discount).__name__),
        f"Total after discount: {total:.2f}", amount=total,
    )

    # --- 2. Payment ---
    order.payment_method.process_payment(total)

    # --- 3. Delivery ---
    order.delivery_method.deliver_order(order)

    # --- 4. Notification ---
    order.notifier.send_notification(message)

    log.info(f"{log_prefix} Processing finished. Subtotal {subtotal:.2f}, total {total:.2f}.")
    return OrderResult(
        order_id=order.order_id,
        subtotal=subtotal,
        total=total,
        actions=list(reporter.actions[first_action:]),
    )


def run_sample(
        reporter: Optional[ActionReporter] = None,
        payment: str = "credit_card",
        delivery: str = "courier",
        notification: str = "email",
        discount: Optional[Discount] = None,
        message: str = DEFAULT_NOTIFICATION_MESSAGE,
) -> OrderResult:
    """
    Builds and processes the demo order: a laptop and two mice, paid by card,
    sent by courier, confirmed by email, with a 10 % discount.

    Strategy names and the discount can be overridden; see registry for the names.
    """
    reporter = reporter if reporter is not None else ActionReporter()
    order = Order(
        payment_method=build_payment(payment, reporter),
        delivery_method=build_delivery(delivery, reporter),
        notifier=build_notifier(notification, reporter),
    )
    for name, price, quantity in SAMPLE_ITEMS:
        order.add_item(name, price, quantity)

    if discount is None:
        discount = PercentageDiscount(SAMPLE_DISCOUNT_FRACTION)
    return process_order(order, discount, message=message, reporter=reporter)
