"""Data models for the order interpreter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Modifier:
    """Named price delta applied on top of a base price (size or milk)."""

    name: str
    price_delta: float

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "price_delta": self.price_delta}


@dataclass(frozen=True)
class MenuEntry:
    """Purchasable drink with its allowed sizes and milks."""

    name: str
    base_price: float
    sizes: Tuple[Modifier, ...] = ()
    milks: Tuple[Modifier, ...] = ()
    aliases: Tuple[str, ...] = ()

    def size_named(self, name: str) -> Optional[Modifier]:
        return next((s for s in self.sizes if s.name == name), None)

    def milk_named(self, name: str) -> Optional[Modifier]:
        return next((m for m in self.milks if m.name == name), None)


@dataclass(frozen=True)
class LexiconEntry(Generic[T]):
    """One searchable key of a lexicon, with optional aliases."""

    key: str
    value: T
    aliases: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LexiconMatch(Generic[T]):
    """Best lexicon entry for a term."""

    key: str
    value: T
    score: float


@dataclass(frozen=True)
class ResolvedItem:
    """Fully disambiguated (quantity, drink, size, milk) with its line total."""

    quantity: int
    menu_entry: MenuEntry
    size: Modifier
    milk: Modifier
    line_total: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "quantity": self.quantity,
            "item": self.menu_entry.name,
            "size": self.size.name,
            "milk": self.milk.name,
            "line_total": self.line_total,
        }


class ErrorKind(str, Enum):
    ITEM_NOT_FOUND = "item_not_found"
    PARSE_FAILURE = "parse_failure"


@dataclass(frozen=True)
class OrderError:
    """Typed, user-describable failure of an order or of one of its items."""

    kind: ErrorKind
    message: str
    available_items: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.kind.value,
            "message": self.message,
            "available_items": list(self.available_items),
        }


@dataclass(frozen=True)
class ItemResult:
    """Outcome of interpreting a single item substring."""

    item: Optional[ResolvedItem] = None
    error: Optional[OrderError] = None

    @property
    def success(self) -> bool:
        return self.item is not None


@dataclass
class ParseOutcome:
    """Outcome of interpreting a full order message.

    Either ``items`` is non-empty and ``error`` is None, or ``error`` is set
    and ``items`` is empty. ``skipped`` holds the errors of items dropped
    from a partially successful parse.
    """

    items: List[ResolvedItem] = field(default_factory=list)
    error: Optional[OrderError] = None
    skipped: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.error is None and len(self.items) > 0

    @classmethod
    def failed(cls, kind: ErrorKind, message: str, available_items: Tuple[str, ...] = ()) -> "ParseOutcome":
        return cls(error=OrderError(kind=kind, message=message, available_items=available_items))


@dataclass(frozen=True)
class Customer:
    id: str
    name: str
    username: Optional[str] = None


@dataclass
class Order:
    """Priced order ready to be rendered for the customer."""

    id: str
    customer_id: str
    customer_name: str
    items: List[ResolvedItem]
    subtotal: float
    tax: float
    total: float
    estimated_ready: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "customer_name": self.customer_name,
            "items": [i.to_dict() for i in self.items],
            "subtotal": self.subtotal,
            "tax": self.tax,
            "total": self.total,
            "estimated_ready": self.estimated_ready,
        }


@dataclass(frozen=True)
class OrderResult:
    """Priced order or the error explaining why none could be built."""

    order: Optional[Order] = None
    error: Optional[OrderError] = None

    @property
    def success(self) -> bool:
        return self.order is not None

    def to_dict(self) -> Dict[str, Any]:
        if self.order is not None:
            return {"success": True, "order": self.order.to_dict()}
        return {"success": False, **(self.error.to_dict() if self.error else {})}
