"""Order parsing service: full message to resolved items."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from coffee_bot.services.order_interpreter.lexicon import DEFAULT_THRESHOLD
from coffee_bot.services.order_interpreter.models import (
    ErrorKind,
    OrderError,
    ParseOutcome,
    ResolvedItem,
)
from coffee_bot.services.order_interpreter.parser import ItemInterpreter
from coffee_bot.utils.text_splitter import split_order_items

if TYPE_CHECKING:
    from coffee_bot.services.menu_catalog import Catalog

logger = logging.getLogger(__name__)

EMPTY_ORDER_MESSAGE = "Please specify at least one item to order."
GENERIC_FAILURE_MESSAGE = "Failed to parse your order. Please try again with a simpler format."


class OrderInterpreterService:
    """
    Main entry point for interpreting an order message.

    Orchestrates:
    1. split_order_items: one substring per requested item
    2. ItemInterpreter: resolves each substring against the catalog
    3. Aggregates successes and errors into a ParseOutcome
    """

    def __init__(self, catalog: Catalog, threshold: float = DEFAULT_THRESHOLD):
        """
        Args:
            catalog: Menu, size and milk lexicons (shared, never mutated)
            threshold: Minimum fuzzy score, exclusive
        """
        self.catalog = catalog
        self.interpreter = ItemInterpreter(catalog, threshold)

    def _aggregate_errors(self, errors: List[OrderError]) -> ParseOutcome:
        if not errors:
            return ParseOutcome.failed(ErrorKind.PARSE_FAILURE, GENERIC_FAILURE_MESSAGE)

        message = f"Failed to parse order: {'; '.join(e.message for e in errors)}"
        if any(e.kind == ErrorKind.ITEM_NOT_FOUND for e in errors):
            return ParseOutcome.failed(ErrorKind.ITEM_NOT_FOUND, message, self.catalog.item_names)
        return ParseOutcome.failed(ErrorKind.PARSE_FAILURE, message)

    def parse_order(self, text: str) -> ParseOutcome:
        """
        Interpret a full order message.

        Items that fail while others succeed are dropped from the result;
        their errors are logged and listed in ``ParseOutcome.skipped``.

        Args:
            text: Raw order text from the customer

        Returns:
            ParseOutcome: resolved items or a typed error
        """
        logger.info("parsing_order", extra={"text": (text or "")[:100]})

        try:
            item_texts = split_order_items(text)
            if not item_texts:
                return ParseOutcome.failed(ErrorKind.PARSE_FAILURE, EMPTY_ORDER_MESSAGE)

            items: List[ResolvedItem] = []
            errors: List[OrderError] = []
            for item_text in item_texts:
                result = self.interpreter.interpret(item_text)
                if result.item is not None:
                    items.append(result.item)
                elif result.error is not None:
                    errors.append(result.error)

            if not items:
                return self._aggregate_errors(errors)

            # TODO: surface skipped items to the customer once product confirms partial orders
            if errors:
                logger.warning(
                    "order_items_skipped",
                    extra={"skipped": [e.message for e in errors], "resolved": len(items)},
                )

            return ParseOutcome(items=items, skipped=[e.message for e in errors])

        except Exception:
            logger.exception("order_parse_failed")
            return ParseOutcome.failed(ErrorKind.PARSE_FAILURE, GENERIC_FAILURE_MESSAGE)
