"""Menu and modifier lexicons used to interpret orders."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from pydantic import BaseModel, Field

from coffee_bot.services.order_interpreter.lexicon import Lexicon
from coffee_bot.services.order_interpreter.models import LexiconEntry, MenuEntry, Modifier

logger = logging.getLogger(__name__)

SMALL = Modifier("Small", -0.50)
MEDIUM = Modifier("Medium", 0.0)
LARGE = Modifier("Large", 0.50)

WHOLE_MILK = Modifier("Whole Milk", 0.0)
OAT_MILK = Modifier("Oat Milk", 0.50)
ALMOND_MILK = Modifier("Almond Milk", 0.50)

DEFAULT_SIZES: Tuple[Modifier, ...] = (SMALL, MEDIUM, LARGE)
DEFAULT_MILKS: Tuple[Modifier, ...] = (WHOLE_MILK, OAT_MILK, ALMOND_MILK)

DEFAULT_MENU: Tuple[MenuEntry, ...] = (
    MenuEntry(
        name="Cappuccino",
        base_price=3.50,
        sizes=DEFAULT_SIZES,
        milks=DEFAULT_MILKS,
        aliases=("cap", "capp", "cappucino", "capuccino"),
    ),
    MenuEntry(
        name="Latte",
        base_price=4.00,
        sizes=DEFAULT_SIZES,
        milks=DEFAULT_MILKS,
        aliases=("lat", "cafe latte", "coffee latte"),
    ),
)

# Single-letter abbreviations ("s", "m", "l") are left out: with the
# containment shortcut they would match any token holding that letter.
DEFAULT_SIZE_KEYS: Tuple[Tuple[str, Modifier], ...] = (
    ("small", SMALL),
    ("medium", MEDIUM),
    ("large", LARGE),
    ("regular", MEDIUM),
    ("big", LARGE),
    ("standard", MEDIUM),
)

DEFAULT_MILK_KEYS: Tuple[Tuple[str, Modifier], ...] = (
    ("whole milk", WHOLE_MILK),
    ("oat milk", OAT_MILK),
    ("almond milk", ALMOND_MILK),
    ("whole", WHOLE_MILK),
    ("oat", OAT_MILK),
    ("almond", ALMOND_MILK),
    ("regular milk", WHOLE_MILK),
    ("regular", WHOLE_MILK),
    ("normal milk", WHOLE_MILK),
    ("normal", WHOLE_MILK),
)


@dataclass(frozen=True)
class Catalog:
    """Immutable menu, size and milk lexicons plus the default modifiers."""

    menu: Lexicon[MenuEntry]
    sizes: Lexicon[Modifier]
    milks: Lexicon[Modifier]
    default_size: Modifier
    default_milk: Modifier

    @property
    def item_names(self) -> Tuple[str, ...]:
        return tuple(entry.name for entry in self.menu.values())


def build_catalog(
    entries: Tuple[MenuEntry, ...],
    size_keys: Tuple[Tuple[str, Modifier], ...],
    milk_keys: Tuple[Tuple[str, Modifier], ...],
    default_size_key: str = "medium",
    default_milk_key: str = "whole milk",
) -> Catalog:
    menu = Lexicon([LexiconEntry(e.name.lower(), e, tuple(a.lower() for a in e.aliases)) for e in entries])
    sizes = Lexicon([LexiconEntry(key.lower(), mod) for key, mod in size_keys])
    milks = Lexicon([LexiconEntry(key.lower(), mod) for key, mod in milk_keys])

    default_size = sizes.get(default_size_key.lower())
    if default_size is None:
        raise ValueError(f"Default size '{default_size_key}' is not a size key")
    default_milk = milks.get(default_milk_key.lower())
    if default_milk is None:
        raise ValueError(f"Default milk '{default_milk_key}' is not a milk key")

    return Catalog(menu=menu, sizes=sizes, milks=milks, default_size=default_size, default_milk=default_milk)


def default_catalog() -> Catalog:
    return build_catalog(DEFAULT_MENU, DEFAULT_SIZE_KEYS, DEFAULT_MILK_KEYS)


class ModifierSchema(BaseModel):
    name: str
    price_delta: float = 0.0

    def to_modifier(self) -> Modifier:
        return Modifier(self.name, self.price_delta)


class MenuItemSchema(BaseModel):
    name: str
    base_price: float = Field(ge=0)
    aliases: List[str] = Field(default_factory=list)
    sizes: List[ModifierSchema] = Field(default_factory=list)
    milks: List[ModifierSchema] = Field(default_factory=list)


class MenuFileSchema(BaseModel):
    items: List[MenuItemSchema] = Field(min_length=1)
    sizes: Dict[str, ModifierSchema]
    milks: Dict[str, ModifierSchema]
    default_size: str = "medium"
    default_milk: str = "whole milk"


def load_catalog(path: str | Path) -> Catalog:
    """
    Load a catalog from a JSON menu file.

    Args:
        path: Path to the JSON file (see MenuFileSchema for its layout)

    Returns:
        Catalog
    """
    with open(path, "r", encoding="utf-8") as handle:
        data = MenuFileSchema.model_validate(json.load(handle))

    entries = tuple(
        MenuEntry(
            name=item.name,
            base_price=item.base_price,
            sizes=tuple(s.to_modifier() for s in item.sizes),
            milks=tuple(m.to_modifier() for m in item.milks),
            aliases=tuple(item.aliases),
        )
        for item in data.items
    )
    # dicts keep file order, which is the lexicon tie-break order
    size_keys = tuple((key, mod.to_modifier()) for key, mod in data.sizes.items())
    milk_keys = tuple((key, mod.to_modifier()) for key, mod in data.milks.items())

    catalog = build_catalog(entries, size_keys, milk_keys, data.default_size, data.default_milk)
    logger.info("menu_loaded", extra={"path": str(path), "items": len(entries)})
    return catalog
