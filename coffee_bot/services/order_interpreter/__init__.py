"""Order Interpreter - turns free-text coffee orders into resolved items."""

from coffee_bot.services.order_interpreter.service import OrderInterpreterService
from coffee_bot.services.order_interpreter.models import (
    ErrorKind,
    OrderError,
    ParseOutcome,
    ResolvedItem,
)

__all__ = [
    "OrderInterpreterService",
    "ErrorKind",
    "OrderError",
    "ParseOutcome",
    "ResolvedItem",
]
