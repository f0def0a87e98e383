import pytest
from order_service.delivery import CourierDelivery, PickUpPointDelivery, PostDelivery
from order_service.discounts import FixedAmountDiscount, NoDiscount, PercentageDiscount
from order_service.errors import UnknownStrategyError
from order_service.models import Order
from order_service.notifications import EmailNotification, SmsNotification
from order_service.payments import BankTransferPayment, CreditCardPayment, PayPalPayment
from order_service.registry import (
    DELIVERY_METHODS,
    NOTIFIERS,
    PAYMENT_METHODS,
    build_delivery,
    build_discount,
    build_notifier,
    build_payment,
)
from order_service.reporting import ActionReporter

PAYMENTS = [CreditCardPayment, PayPalPayment, BankTransferPayment]
DELIVERIES = [CourierDelivery, PostDelivery, PickUpPointDelivery]
NOTIFICATIONS = [EmailNotification, SmsNotification]


# ----------------------------
# Each variant reports exactly one action
# ----------------------------


@pytest.mark.parametrize("cls", PAYMENTS)
@pytest.mark.parametrize("amount", [0, 0.01, 279000])
def test_payment_reports_one_action(cls, amount):
    reporter = ActionReporter()
    cls(reporter).process_payment(amount)

    assert len(reporter) == 1
    action = reporter.actions[0]
    assert action.kind == "payment"
    assert action.variant == cls.variant
    assert action.amount == amount


@pytest.mark.parametrize("cls", DELIVERIES)
def test_delivery_accepts_any_order(cls):
    reporter = ActionReporter()
    bare = Order(order_id="ord-bare")
    full = Order(PayPalPayment(), PostDelivery(), SmsNotification(), order_id="ord-full")
    full.add_item("Book", 12, 1)

    delivery = cls(reporter)
    delivery.deliver_order(bare)
    delivery.deliver_order(full)

    assert [a.kind for a in reporter.actions] == ["delivery", "delivery"]
    assert "ord-bare" in reporter.actions[0].message
    assert "ord-full" in reporter.actions[1].message


@pytest.mark.parametrize("cls", NOTIFICATIONS)
@pytest.mark.parametrize("message", ["Your order has been placed!", "", "Ваш заказ оформлен!"])
def test_notification_accepts_any_message(cls, message):
    reporter = ActionReporter()
    cls(reporter).send_notification(message)

    assert len(reporter) == 1
    assert reporter.actions[0].kind == "notification"
    assert reporter.actions[0].message.endswith(message)


def test_strategies_without_reporter_get_their_own():
    a, b = CreditCardPayment(), CreditCardPayment()
    a.process_payment(10)
    assert len(a.reporter) == 1
    assert len(b.reporter) == 0


def test_shared_strategy_reports_for_each_order():
    reporter = ActionReporter()
    courier = CourierDelivery(reporter)
    courier.deliver_order(Order(order_id="ord-1"))
    courier.deliver_order(Order(order_id="ord-2"))
    assert [a.kind for a in reporter.actions] == ["delivery", "delivery"]


# ----------------------------
# Registry
# ----------------------------


def test_registry_covers_every_variant():
    assert set(PAYMENT_METHODS.values()) == set(PAYMENTS)
    assert set(DELIVERY_METHODS.values()) == set(DELIVERIES)
    assert set(NOTIFIERS.values()) == set(NOTIFICATIONS)
    for name, cls in {**PAYMENT_METHODS, **DELIVERY_METHODS, **NOTIFIERS}.items():
        assert cls.variant == name


def test_build_functions_inject_reporter():
    reporter = ActionReporter()
    build_payment("paypal", reporter).process_payment(5)
    build_delivery("post", reporter).deliver_order(Order())
    build_notifier("sms", reporter).send_notification("hi")
    assert [a.variant for a in reporter.actions] == ["paypal", "post", "sms"]


@pytest.mark.parametrize(
    "builder,name",
    [(build_payment, "cash"), (build_delivery, "drone"), (build_notifier, "pigeon")],
)
def test_unknown_strategy_name(builder, name):
    with pytest.raises(UnknownStrategyError, match=name):
        builder(name)


def test_build_discount():
    assert isinstance(build_discount("none"), NoDiscount)
    assert build_discount("percentage", 0.2).fraction == 0.2
    assert isinstance(build_discount("fixed", 3), FixedAmountDiscount)
    assert isinstance(build_discount("percentage", 0), PercentageDiscount)
    with pytest.raises(UnknownStrategyError):
        build_discount("coupon", 1)


# ----------------------------
# Reporter
# ----------------------------


def test_reporter_echoes_messages():
    seen = []
    reporter = ActionReporter(echo=seen.append)
    reporter.report("payment", "paypal", "paid", amount=1.0)
    reporter.report("notification", "sms", "sent")

    assert seen == ["paid", "sent"]
    assert len(reporter) == 2
