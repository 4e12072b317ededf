"""Interpreter for a single requested item ("2 large lattes with oat milk")."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, List, Optional, Tuple

from coffee_bot.services import pricing
from coffee_bot.services.order_interpreter.lexicon import DEFAULT_THRESHOLD, find_best_match
from coffee_bot.services.order_interpreter.models import (
    ErrorKind,
    ItemResult,
    MenuEntry,
    Modifier,
    OrderError,
    ResolvedItem,
)

if TYPE_CHECKING:
    from coffee_bot.services.menu_catalog import Catalog

logger = logging.getLogger(__name__)

# Tokens shorter than this never resolve a menu item ("of", "a", ...)
MIN_ITEM_TOKEN_LENGTH = 3

ITEM_FAILED_MESSAGE = "Failed to parse this item. Please try a simpler format."


def _extract_quantity(text: str) -> Optional[int]:
    """Leading digits of the text, if any."""
    match = re.match(r"^(\d+)", text)
    if match:
        return int(match.group(1))
    return None


def _tokenize(text: str) -> List[str]:
    return text.split()


class ItemInterpreter:
    """Resolves one item substring into quantity, drink, size and milk."""

    def __init__(self, catalog: Catalog, threshold: float = DEFAULT_THRESHOLD):
        self.catalog = catalog
        self.threshold = threshold

    def _not_found(self) -> OrderError:
        names = self.catalog.item_names
        return OrderError(
            kind=ErrorKind.ITEM_NOT_FOUND,
            message=f"Menu item not found. Available items: {', '.join(names)}",
            available_items=names,
        )

    def _failure(self, message: str = ITEM_FAILED_MESSAGE) -> OrderError:
        return OrderError(kind=ErrorKind.PARSE_FAILURE, message=message)

    def _match_menu_entry(self, text: str, tokens: List[str]) -> Optional[MenuEntry]:
        for token in tokens:
            if len(token) < MIN_ITEM_TOKEN_LENGTH:
                continue
            match = find_best_match(token, self.catalog.menu, self.threshold)
            if match:
                return match.value

        # Fallback: canonical name somewhere in the whole text
        for entry in self.catalog.menu:
            if entry.key in text:
                return entry.value
        return None

    def _match_size(self, tokens: List[str]) -> Optional[Modifier]:
        for token in tokens:
            match = find_best_match(token, self.catalog.sizes, self.threshold)
            if match:
                return match.value
        return None

    def _match_milk(self, text: str, tokens: List[str]) -> Optional[Modifier]:
        # Phrases first so "oat milk" wins over per-token guesses
        for entry in self.catalog.milks:
            if entry.key in text:
                return entry.value
        for token in tokens:
            match = find_best_match(token, self.catalog.milks, self.threshold)
            if match:
                return match.value
        return None

    def _resolve_modifiers(
        self, entry: MenuEntry, size: Modifier, milk: Modifier
    ) -> Tuple[Optional[Modifier], Optional[Modifier]]:
        """Maps lexicon modifiers onto the entry's own priced modifiers."""
        entry_size = entry.size_named(size.name) if entry.sizes else size
        entry_milk = entry.milk_named(milk.name) if entry.milks else milk
        return entry_size, entry_milk

    def _interpret(self, item_text: str) -> ItemResult:
        text = item_text.lower()
        tokens = _tokenize(text)

        quantity = _extract_quantity(text)
        if quantity is not None and quantity < 1:
            return ItemResult(error=self._failure(f"Invalid quantity: {quantity}"))

        size = self._match_size(tokens)
        milk = self._match_milk(text, tokens)

        entry = self._match_menu_entry(text, tokens)
        if entry is None:
            # A lone word ("espresso") still reads as a drink request
            named_drink = len(tokens) == 1 and len(tokens[0]) >= MIN_ITEM_TOKEN_LENGTH
            if quantity is None and size is None and milk is None and not named_drink:
                return ItemResult(error=self._failure(f"Could not understand '{item_text}'"))
            return ItemResult(error=self._not_found())

        size = size or self.catalog.default_size
        milk = milk or self.catalog.default_milk
        entry_size, entry_milk = self._resolve_modifiers(entry, size, milk)
        if entry_size is None:
            return ItemResult(error=self._failure(f"{entry.name} is not available in size {size.name}"))
        if entry_milk is None:
            return ItemResult(error=self._failure(f"{entry.name} is not available with {milk.name}"))

        qty = quantity or 1
        return ItemResult(
            item=ResolvedItem(
                quantity=qty,
                menu_entry=entry,
                size=entry_size,
                milk=entry_milk,
                line_total=pricing.line_total(qty, entry, entry_size, entry_milk),
            )
        )

    def interpret(self, item_text: str) -> ItemResult:
        """
        Interpret one item substring.

        Never raises: unexpected errors become a parse failure.

        Args:
            item_text: One item substring, e.g. "1 large cap with oat milk"

        Returns:
            ItemResult: resolved item or typed error
        """
        try:
            return self._interpret(item_text)
        except Exception:
            logger.exception("item_parse_failed", extra={"item_text": item_text[:100]})
            return ItemResult(error=self._failure())
