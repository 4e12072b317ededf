"""
Currency arithmetic for orders.

Every intermediate currency value (unit price, line total, running subtotal,
tax) is rounded to cents, half away from zero.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from coffee_bot.services.order_interpreter.models import MenuEntry, Modifier, ResolvedItem

DEFAULT_TAX_RATE = 0.085
CENT = Decimal("0.01")


def round_currency(amount: float) -> float:
    """Round to 2 decimal places, half away from zero."""
    # str() keeps the shortest repr, so 0.935 rounds as 0.935 and not 0.93499...
    return float(Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP))


def format_currency(amount: float) -> str:
    return f"{round_currency(amount):.2f}"


def unit_price(entry: MenuEntry, size: Modifier, milk: Modifier) -> float:
    return round_currency(entry.base_price + size.price_delta + milk.price_delta)


def line_total(quantity: int, entry: MenuEntry, size: Modifier, milk: Modifier) -> float:
    return round_currency(quantity * unit_price(entry, size, milk))


def calculate_subtotal(items: Iterable[ResolvedItem]) -> float:
    subtotal = 0.0
    for item in items:
        subtotal = round_currency(subtotal + item.line_total)
    return subtotal


def calculate_tax(subtotal: float, tax_rate: float = DEFAULT_TAX_RATE) -> float:
    return round_currency(subtotal * tax_rate)


def calculate_total(subtotal: float, tax: float) -> float:
    # both operands are already cent-precise; rounding only strips float noise
    return round_currency(subtotal + tax)
