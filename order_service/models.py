"""
models.py — Data Models for Order Processing

This module defines the order aggregate, its line items and the payloads
exchanged through the HTTP API. Pydantic models are used wherever a value
must be validated or serialized.

Models:
    - OrderItem: A single line item (name, unit price, quantity).
    - Order: Items plus the payment, delivery and notification strategies.
    - ReportedAction: One simulated action emitted while processing an order.
    - OrderResult: Subtotal, total and reported actions of a processed order.
    - DiscountSpec / NewOrderRequest: Request payload for POST /v1/orders.
"""

import math
import uuid
from typing import TYPE_CHECKING, Iterable, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidItemError
from .logging_config import get_logger

if TYPE_CHECKING:
    from .delivery import Delivery
    from .notifications import Notification
    from .payments import Payment

log = get_logger(__name__)

PaymentName = Literal["credit_card", "paypal", "bank_transfer"]
DeliveryName = Literal["courier", "post", "pickup_point"]
NotificationName = Literal["email", "sms"]
DiscountKind = Literal["none", "percentage", "fixed"]


class OrderItem(BaseModel):
    """
    Represents a single product line in an order.

    Attributes:
        name (str): Product name. Must not be empty.
        price (float): Unit price. Must be finite and not negative.
        quantity (int): Number of units. Must be greater than zero.
    """
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    quantity: int = Field(..., gt=0)  # gt=0 means "greater than 0"

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


def calculate_subtotal(items: Iterable[OrderItem]) -> float:
    """Sum of price × quantity; 0.0 for no items."""
    return sum((item.line_total for item in items), 0.0)


class Order:
    """
    Order aggregate: an ordered list of items plus the strategies used to pay,
    deliver and notify.

    The order owns its items. Strategies are only referenced; the same
    instance may be shared between several orders, and any combination of
    payment, delivery and notification strategy is valid.
    """

    def __init__(
            self,
            payment_method: Optional["Payment"] = None,
            delivery_method: Optional["Delivery"] = None,
            notifier: Optional["Notification"] = None,
            order_id: Optional[str] = None,
    ):
        self.order_id = order_id or f"ord-{uuid.uuid4().hex[:12]}"
        self.payment_method = payment_method
        self.delivery_method = delivery_method
        self.notifier = notifier
        self._items: List[OrderItem] = []

    @property
    def items(self) -> Tuple[OrderItem, ...]:
        """Items in insertion order (read-only view)."""
        return tuple(self._items)

    def add_item(self, name: str, price: float, quantity: int) -> OrderItem:
        """
        Appends a new line item to the order.

        Args:
            name (str): Product name.
            price (float): Unit price, must be finite and >= 0.
            quantity (int): Number of units, must be > 0.

        Returns:
            OrderItem: The item that was appended.

        Raises:
            InvalidItemError: If the item fails validation or would push the
                order subtotal beyond a finite amount.
        """
        try:
            item = OrderItem(name=name, price=price, quantity=quantity)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            log.warning(f"[Order: {self.order_id}] Item '{name}' rejected: {problems}")
            raise InvalidItemError(f"Invalid item {name!r}: {problems}") from e

        # Order subtotal must stay a finite amount
        if not math.isfinite(self.subtotal() + item.line_total):
            log.warning(f"[Order: {self.order_id}] Item '{name}' rejected: amount overflows")
            raise InvalidItemError(f"Invalid item {name!r}: price x quantity is not a finite amount")

        self._items.append(item)
        log.debug(f"[Order: {self.order_id}] Item added: {item.name} x{item.quantity} @ {item.price}")
        return item

    def subtotal(self) -> float:
        """Sum of price × quantity over all items, before any discount."""
        return calculate_subtotal(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Order(order_id={self.order_id!r}, items={len(self._items)})"


class ReportedAction(BaseModel):
    """
    One simulated side effect reported while processing an order.

    Attributes:
        kind (str): Step that produced the action: 'subtotal', 'total',
            'payment', 'delivery' or 'notification'.
        variant (str): Registry name of the strategy (e.g. 'credit_card').
        message (str): Human-readable description of the action.
        amount (float, optional): Amount involved, where the step has one.
    """
    model_config = ConfigDict(frozen=True)

    kind: str
    variant: str
    message: str
    amount: Optional[float] = None


class OrderResult(BaseModel):
    """
    Structured outcome of process_order().

    Attributes:
        order_id (str): Identifier of the processed order.
        subtotal (float): Sum of all line totals.
        total (float): Subtotal after the discount was applied.
        actions (List[ReportedAction]): Reported actions in emission order.
    """
    order_id: str
    subtotal: float
    total: float
    actions: List[ReportedAction]


class DiscountSpec(BaseModel):
    """
    Discount selection in an order request.

    Attributes:
        kind (str): 'none', 'percentage' (value is a fraction in [0, 1)) or
            'fixed' (value is an absolute amount).
        value (float): Parameter of the discount rule.
    """
    kind: DiscountKind = "none"
    value: float = 0.0


class NewOrderRequest(BaseModel):
    """
    Represents a new order submitted through the HTTP API.

    Attributes:
        items (List[OrderItem]): Items to add to the order.
        payment (str): Payment strategy name.
        delivery (str): Delivery strategy name.
        notification (str): Notification strategy name.
        discount (DiscountSpec): Discount rule to apply to the subtotal.
        message (str, optional): Notification text; the configured default is used when omitted.
    """
    items: List[OrderItem] = Field(default_factory=list)
    payment: PaymentName
    delivery: DeliveryName
    notification: NotificationName
    discount: DiscountSpec = Field(default_factory=DiscountSpec)
    message: Optional[str] = None
