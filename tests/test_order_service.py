import re
from datetime import datetime, timezone

import pytest

from coffee_bot.services.menu_catalog import default_catalog
from coffee_bot.services.order_interpreter import OrderInterpreterService
from coffee_bot.services.order_interpreter.models import Customer, ErrorKind
from coffee_bot.services.order_service import OrderFactory, OrderService

FIXED_NOW = datetime(2024, 3, 5, 13, 20, tzinfo=timezone.utc)
CUSTOMER = Customer(id="123456789", name="Ana", username="ana")


def make_service(**factory_kwargs):
    factory_kwargs.setdefault("clock", lambda: FIXED_NOW)
    return OrderService(OrderInterpreterService(default_catalog()), OrderFactory(**factory_kwargs))


@pytest.mark.parametrize(
    "text,subtotal,tax,total",
    [
        ("1 large cappuccino with oat milk", 4.50, 0.38, 4.88),
        ("2 medium lattes, 1 small cappuccino", 11.00, 0.94, 11.94),
        ("1 large cap with oat milk", 4.50, 0.38, 4.88),
        ("1 cappuccino", 3.50, 0.30, 3.80),
    ],
)
def test_priced_scenarios(text, subtotal, tax, total):
    result = make_service().handle_text(text, CUSTOMER)
    assert result.success
    order = result.order
    assert order.subtotal == subtotal
    assert order.tax == tax
    assert order.total == total
    assert order.customer_id == "123456789"
    assert order.customer_name == "Ana"


def test_error_is_returned_not_raised():
    result = make_service().handle_text("1 espresso", CUSTOMER)
    assert not result.success
    assert result.error.kind == ErrorKind.ITEM_NOT_FOUND
    assert result.to_dict()["error"] == "item_not_found"


def test_ready_time_uses_clock_and_timezone():
    order = make_service().handle_text("1 latte", CUSTOMER).order
    assert order.estimated_ready == "1:30 PM"

    order = make_service(tz="America/New_York", prep_minutes=15).handle_text("1 latte", CUSTOMER).order
    assert order.estimated_ready == "8:35 AM"


def test_custom_tax_rate():
    order = make_service(tax_rate=0.1).handle_text("1 latte", CUSTOMER).order
    assert order.tax == 0.40
    assert order.total == 4.40


def test_order_ids_are_unique_for_same_instant():
    factory = OrderFactory(clock=lambda: FIXED_NOW)
    items = make_service().interpreter.parse_order("1 latte").items
    ids = {factory.create_order(items, CUSTOMER).id for _ in range(200)}
    assert len(ids) == 200
    assert all(re.match(r"^ORD-\d{9,}-789$", order_id) for order_id in ids)


def test_create_order_without_items_raises():
    with pytest.raises(ValueError):
        OrderFactory(clock=lambda: FIXED_NOW).create_order([], CUSTOMER)


def test_order_to_dict():
    data = make_service().handle_text("1 large cap with oat milk", CUSTOMER).to_dict()
    assert data["success"] is True
    assert data["order"]["items"] == [
        {"quantity": 1, "item": "Cappuccino", "size": "Large", "milk": "Oat Milk", "line_total": 4.5}
    ]
    assert data["order"]["total"] == 4.88
