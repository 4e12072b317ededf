from __future__ import annotations

import json
import logging
import sys
from typing import Any

STRUCTURED_KEYS = (
    "update_id",
    "chat_id",
    "customer_id",
    "order_id",
    "items",
    "total",
    "text",
    "item_text",
    "skipped",
    "resolved",
    "error",
    "reason",
    "status_code",
    "method",
    "path",
)


def _json_default(obj: Any) -> str:
    try:
        return str(obj)
    except Exception:
        return "<unserializable>"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for key in STRUCTURED_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload, default=_json_default)


def init_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    root.handlers = [handler]

    logging.getLogger("httpx").setLevel(logging.WARNING)
