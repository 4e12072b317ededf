from coffee_bot.services import pricing
from coffee_bot.services.menu_catalog import LARGE, MEDIUM, OAT_MILK, SMALL, WHOLE_MILK, DEFAULT_MENU
from coffee_bot.services.order_interpreter.models import ResolvedItem

CAPPUCCINO, LATTE = DEFAULT_MENU


def _item(quantity, entry, size, milk):
    return ResolvedItem(quantity, entry, size, milk, pricing.line_total(quantity, entry, size, milk))


def test_round_currency_half_away_from_zero():
    assert pricing.round_currency(0.935) == 0.94
    assert pricing.round_currency(0.2975) == 0.30
    assert pricing.round_currency(0.3825) == 0.38
    assert pricing.round_currency(2.675) == 2.68
    assert pricing.round_currency(-0.005) == -0.01


def test_format_currency():
    assert pricing.format_currency(4.5) == "4.50"
    assert pricing.format_currency(11.935) == "11.94"


def test_unit_price_and_line_total():
    assert pricing.unit_price(CAPPUCCINO, LARGE, OAT_MILK) == 4.50
    assert pricing.line_total(2, LATTE, MEDIUM, WHOLE_MILK) == 8.00
    assert pricing.line_total(3, LATTE, SMALL, OAT_MILK) == 12.00


def test_subtotal_tax_total():
    items = [_item(2, LATTE, MEDIUM, WHOLE_MILK), _item(1, CAPPUCCINO, SMALL, WHOLE_MILK)]
    subtotal = pricing.calculate_subtotal(items)
    assert subtotal == 11.00
    tax = pricing.calculate_tax(subtotal)
    assert tax == 0.94
    assert pricing.calculate_total(subtotal, tax) == 11.94


def test_tax_examples():
    assert pricing.calculate_tax(4.50) == 0.38
    assert pricing.calculate_tax(3.50) == 0.30
    assert pricing.calculate_tax(10.00, tax_rate=0.0) == 0.0


def test_subtotal_has_no_float_drift():
    items = [_item(1, CAPPUCCINO, SMALL, WHOLE_MILK)] * 7
    assert pricing.calculate_subtotal(items) == 21.00
    assert pricing.calculate_subtotal([]) == 0.0
