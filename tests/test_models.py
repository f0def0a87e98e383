import math

import pytest
from pydantic import ValidationError
from order_service.delivery import CourierDelivery
from order_service.errors import InvalidItemError, OrderServiceError
from order_service.models import Order, OrderItem, calculate_subtotal
from order_service.notifications import EmailNotification
from order_service.payments import CreditCardPayment, PayPalPayment

# ----------------------------
# OrderItem
# ----------------------------


def test_order_item_is_frozen():
    item = OrderItem(name="Mouse", price=5000, quantity=2)
    with pytest.raises(ValidationError):
        item.quantity = 3
    assert item.line_total == 10000


# ----------------------------
# Order.add_item
# ----------------------------


def test_add_item_keeps_insertion_order_and_duplicates():
    order = Order()
    order.add_item("Laptop", 300000, 1)
    order.add_item("Mouse", 5000, 2)
    order.add_item("Laptop", 300000, 1)

    assert [i.name for i in order.items] == ["Laptop", "Mouse", "Laptop"]
    assert len(order) == 3


def test_add_item_returns_item():
    item = Order().add_item("Cable", 10.5, 4)
    assert item == OrderItem(name="Cable", price=10.5, quantity=4)


def test_items_view_is_read_only():
    order = Order()
    order.add_item("Mouse", 5000, 2)
    items = order.items
    assert isinstance(items, tuple)
    with pytest.raises(AttributeError):
        items.append(OrderItem(name="X", price=1, quantity=1))  # type: ignore[attr-defined]
    assert len(order.items) == 1


@pytest.mark.parametrize(
    "name,price,quantity",
    [
        ("Mouse", -1, 1),
        ("Mouse", 10, 0),
        ("Mouse", 10, -3),
        ("", 10, 1),
    ],
)
def test_add_item_rejects_invalid_values(name, price, quantity):
    order = Order()
    with pytest.raises(InvalidItemError) as exc:
        order.add_item(name, price, quantity)
    assert isinstance(exc.value, OrderServiceError)
    assert isinstance(exc.value, ValueError)
    assert order.items == ()


def test_zero_price_is_allowed():
    order = Order()
    order.add_item("Gift wrap", 0, 1)
    assert order.subtotal() == 0


@pytest.mark.parametrize("price", [math.inf, math.nan])
def test_add_item_rejects_non_finite_price(price):
    order = Order()
    with pytest.raises(InvalidItemError):
        order.add_item("Laptop", price, 1)
    assert order.items == ()


def test_add_item_rejects_line_total_overflow():
    order = Order()
    with pytest.raises(InvalidItemError, match="finite"):
        order.add_item("Yacht", 1e308, 10)
    assert order.subtotal() == 0


def test_add_item_rejects_subtotal_overflow():
    order = Order()
    order.add_item("Yacht", 1e308, 1)
    with pytest.raises(InvalidItemError):
        order.add_item("Yacht", 1e308, 1)
    assert len(order) == 1
    assert math.isfinite(order.subtotal())


# ----------------------------
# Subtotal
# ----------------------------


def test_subtotal_sums_price_times_quantity():
    order = Order()
    order.add_item("Laptop", 300000, 1)
    order.add_item("Mouse", 5000, 2)
    assert order.subtotal() == 310000
    assert calculate_subtotal(order.items) == 310000


def test_subtotal_of_empty_order_is_zero():
    assert Order().subtotal() == 0
    assert calculate_subtotal([]) == 0


def test_subtotal_does_not_depend_on_item_order():
    items = [("A", 12, 3), ("B", 7, 1), ("C", 100, 2), ("D", 0, 5)]
    forward, backward = Order(), Order()
    for name, price, qty in items:
        forward.add_item(name, price, qty)
    for name, price, qty in reversed(items):
        backward.add_item(name, price, qty)

    assert forward.subtotal() == backward.subtotal() == 36 + 7 + 200


# ----------------------------
# Strategy slots
# ----------------------------


def test_strategy_slots_are_independent_of_items():
    order = Order(CreditCardPayment(), CourierDelivery(), EmailNotification())
    order.add_item("Laptop", 300000, 1)
    before = (order.items, order.subtotal())

    order.payment_method = PayPalPayment()

    assert (order.items, order.subtotal()) == before


def test_order_ids_are_unique_unless_given():
    assert Order().order_id != Order().order_id
    assert Order(order_id="ord-1").order_id == "ord-1"
