from __future__ import annotations

import argparse
import json
import sys

from coffee_bot.logging_config import init_logging
from coffee_bot.services.menu_catalog import default_catalog, load_catalog
from coffee_bot.services.order_interpreter import OrderInterpreterService
from coffee_bot.services.order_interpreter.models import Customer
from coffee_bot.services.order_service import OrderFactory, OrderService
from coffee_bot.settings import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Parse and price a free-text coffee order.")
    parser.add_argument("text", help='Order text, e.g. "1 large cap with oat milk".')
    parser.add_argument("--customer-id", default="cli-000", help="Customer identifier.")
    parser.add_argument("--customer-name", default="CLI", help="Customer display name.")
    parser.add_argument("--menu-file", default=None, help="JSON menu file (defaults to MENU_FILE or the built-in menu).")
    parser.add_argument("--log-level", default="WARNING", help="Log level for the run.")

    args = parser.parse_args()
    init_logging(args.log_level)

    menu_file = args.menu_file or settings.menu_file
    catalog = load_catalog(menu_file) if menu_file else default_catalog()

    service = OrderService(
        OrderInterpreterService(catalog, threshold=settings.fuzzy_threshold),
        OrderFactory(tax_rate=settings.tax_rate, prep_minutes=settings.prep_time_minutes, tz=settings.timezone),
    )
    result = service.handle_text(args.text, Customer(id=args.customer_id, name=args.customer_name))

    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    if not result.success:
        sys.exit(1)


if __name__ == "__main__":
    main()
