"""FastAPI dependencies."""

from __future__ import annotations

from functools import lru_cache

from coffee_bot.services.menu_catalog import Catalog, default_catalog, load_catalog
from coffee_bot.services.order_interpreter import OrderInterpreterService
from coffee_bot.services.order_service import OrderFactory, OrderService
from coffee_bot.services.telegram_client import TelegramClient
from coffee_bot.settings import settings


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Catalog loaded once per process (MENU_FILE or the built-in menu)."""
    if settings.menu_file:
        return load_catalog(settings.menu_file)
    return default_catalog()


@lru_cache(maxsize=1)
def get_order_factory() -> OrderFactory:
    # one factory per process so order ids share a sequence
    return OrderFactory(
        tax_rate=settings.tax_rate,
        prep_minutes=settings.prep_time_minutes,
        tz=settings.timezone,
    )


def get_order_service() -> OrderService:
    interpreter = OrderInterpreterService(get_catalog(), threshold=settings.fuzzy_threshold)
    return OrderService(interpreter, get_order_factory())


def get_telegram_client() -> TelegramClient:
    return TelegramClient(settings.telegram_bot_token, settings.telegram_api_base_url)
