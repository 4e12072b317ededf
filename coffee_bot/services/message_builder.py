"""HTML replies sent back to the customer over Telegram."""

from __future__ import annotations

from html import escape
from typing import List, Optional

from coffee_bot.services.menu_catalog import Catalog
from coffee_bot.services.order_interpreter.models import ErrorKind, Modifier, Order, OrderError
from coffee_bot.services.pricing import format_currency

GENERIC_ERROR = "❌ Something went wrong. Please try again later."

EXAMPLE_ORDERS = ("1 large cappuccino with oat milk", "2 medium lattes")


def _signed_delta(modifier: Modifier, zero_label: str) -> str:
    if modifier.price_delta > 0:
        return f"(+${format_currency(modifier.price_delta)})"
    if modifier.price_delta < 0:
        return f"(-${format_currency(-modifier.price_delta)})"
    return f"({zero_label})"


def _unique_modifiers(modifiers: List[Modifier]) -> List[Modifier]:
    seen = []
    for mod in modifiers:
        if mod not in seen:
            seen.append(mod)
    return seen


def _menu_lines(catalog: Catalog) -> List[str]:
    return [f"• {escape(entry.name)} - ${format_currency(entry.base_price)}" for entry in catalog.menu.values()]


def order_confirmation(order: Order) -> str:
    items_list = "\n".join(
        f"• {item.quantity}x {escape(item.size.name)} {escape(item.menu_entry.name)} with {escape(item.milk.name)} - ${format_currency(item.line_total)}"
        for item in order.items
    )
    return (
        "✅ <b>Order Confirmed!</b>\n\n"
        "📋 <b>Your Order:</b>\n"
        f"{items_list}\n\n"
        "💰 <b>Order Summary:</b>\n"
        f"Subtotal: ${format_currency(order.subtotal)}\n"
        f"Tax: ${format_currency(order.tax)}\n"
        f"Total: ${format_currency(order.total)}\n\n"
        f"⏰ <b>Ready by:</b> {order.estimated_ready}\n"
        "📍 <b>Show this message when picking up</b>\n"
        f"🆔 <b>Order #:</b> {escape(order.id)}"
    )


def error_message(error: Optional[OrderError], catalog: Catalog) -> str:
    if error is None:
        return GENERIC_ERROR

    if error.kind == ErrorKind.ITEM_NOT_FOUND:
        return (
            f"❌ {escape(error.message)}\n\n"
            "📋 <b>Available items:</b>\n"
            + "\n".join(_menu_lines(catalog))
            + "\n\nPlease try again with a valid menu item."
        )

    return (
        "🤔 I didn't understand your order. Please try something like:\n"
        f"'{EXAMPLE_ORDERS[0]}'\n"
        f"or '{EXAMPLE_ORDERS[1]}'\n\n"
        "Type /menu to see all available options."
    )


def welcome_message(shop_name: str) -> str:
    return (
        f"👋 <b>Welcome to {escape(shop_name)} Bot!</b>\n\n"
        "I can help you order coffee for pickup. Just send me your order in natural language like:\n"
        f"\"{EXAMPLE_ORDERS[0]}\" or \"{EXAMPLE_ORDERS[1]}\"\n\n"
        "Type /menu to see our available options."
    )


def menu_message(catalog: Catalog) -> str:
    sizes = _unique_modifiers(catalog.sizes.values())
    milks = _unique_modifiers(catalog.milks.values())
    return (
        "📋 <b>Our Menu:</b>\n\n"
        "<b>Coffee Options:</b>\n"
        + "\n".join(_menu_lines(catalog))
        + "\n\n<b>Sizes:</b>\n"
        + "\n".join(f"• {escape(s.name)} {_signed_delta(s, 'standard price')}" for s in sizes)
        + "\n\n<b>Milk Options:</b>\n"
        + "\n".join(f"• {escape(m.name)} {_signed_delta(m, 'included')}" for m in milks)
        + "\n\n<b>How to Order:</b>\n"
        "Just type your order like:\n"
        f"\"{EXAMPLE_ORDERS[0]}\" or \"2 medium lattes with whole milk\""
    )


def help_message(support_phone: str) -> str:
    return (
        "❓ <b>Need Help?</b>\n\n"
        "<b>Ordering:</b>\n"
        "Just type your order in natural language like:\n"
        f"\"{EXAMPLE_ORDERS[0]}\" or \"{EXAMPLE_ORDERS[1]}\"\n\n"
        "<b>Commands:</b>\n"
        "/start - Welcome message\n"
        "/menu - See our menu options\n"
        "/help - Show this help message\n\n"
        "<b>Examples:</b>\n"
        f"• \"{EXAMPLE_ORDERS[0]}\"\n"
        f"• \"{EXAMPLE_ORDERS[1]}\"\n"
        "• \"1 small cappuccino, 1 large latte with almond milk\"\n\n"
        f"If you need further assistance, please contact us at {escape(support_phone)}."
    )
