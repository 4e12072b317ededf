from __future__ import annotations

import itertools
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

from coffee_bot.services import pricing
from coffee_bot.services.order_interpreter import OrderInterpreterService
from coffee_bot.services.order_interpreter.models import Customer, Order, OrderResult, ResolvedItem
from coffee_bot.utils.time import format_ready_time

logger = logging.getLogger(__name__)

DEFAULT_PREP_MINUTES = 10


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class OrderFactory:
    def __init__(
        self,
        tax_rate: float = pricing.DEFAULT_TAX_RATE,
        prep_minutes: int = DEFAULT_PREP_MINUTES,
        tz: str = "UTC",
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.tax_rate = tax_rate
        self.prep_minutes = prep_minutes
        self.tz = tz
        self.clock = clock or _utc_now
        self._sequence = itertools.count(1)

    def generate_order_id(self, customer_id: str, now: datetime) -> str:
        # ORD-<last 6 digits of epoch ms><process sequence>-<customer suffix>
        stamp = int(now.timestamp() * 1000) % 1_000_000
        return f"ORD-{stamp:06d}{next(self._sequence):03d}-{customer_id[-3:]}"

    def ready_time(self, now: datetime) -> str:
        return format_ready_time(now + timedelta(minutes=self.prep_minutes), self.tz)

    def create_order(self, items: List[ResolvedItem], customer: Customer) -> Order:
        logger.info("creating_order", extra={"customer_id": customer.id, "items": len(items)})
        try:
            if not items:
                raise ValueError("Cannot create an order without items")

            subtotal = pricing.calculate_subtotal(items)
            tax = pricing.calculate_tax(subtotal, self.tax_rate)
            total = pricing.calculate_total(subtotal, tax)

            now = self.clock()
            order = Order(
                id=self.generate_order_id(customer.id, now),
                customer_id=customer.id,
                customer_name=customer.name,
                items=list(items),
                subtotal=subtotal,
                tax=tax,
                total=total,
                estimated_ready=self.ready_time(now),
            )
        except Exception:
            logger.exception("order_create_failed", extra={"customer_id": customer.id})
            raise

        logger.info(
            "order_created",
            extra={
                "order_id": order.id,
                "customer_id": customer.id,
                "items": len(order.items),
                "total": pricing.format_currency(order.total),
            },
        )
        return order


class OrderService:
    def __init__(self, interpreter: OrderInterpreterService, factory: OrderFactory) -> None:
        self.interpreter = interpreter
        self.factory = factory

    def handle_text(self, text: str, customer: Customer) -> OrderResult:
        outcome = self.interpreter.parse_order(text)
        if not outcome.success:
            logger.warning(
                "order_parse_rejected",
                extra={"customer_id": customer.id, "error": outcome.error.message if outcome.error else ""},
            )
            return OrderResult(error=outcome.error)

        return OrderResult(order=self.factory.create_order(outcome.items, customer))
