from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, BackgroundTasks, Depends, Request

from coffee_bot.api.dependencies import get_catalog, get_order_service, get_telegram_client
from coffee_bot.services import message_builder
from coffee_bot.services.menu_catalog import Catalog
from coffee_bot.services.order_interpreter.models import Customer
from coffee_bot.services.order_service import OrderService
from coffee_bot.services.telegram_client import TelegramClient
from coffee_bot.settings import settings

router = APIRouter()

SECRET_HEADER = "X-Telegram-Bot-Api-Secret-Token"
COMMANDS = {"/start", "/menu", "/help"}

logger = logging.getLogger(__name__)


def _is_supported_update(payload: Dict[str, Any]) -> tuple[bool, str | None]:
    if not isinstance(payload, dict) or "update_id" not in payload:
        return False, "unsupported_payload"
    message = payload.get("message")
    if not isinstance(message, dict):
        return False, "unsupported_update"
    if not isinstance(message.get("text"), str):
        return False, "unsupported_message_type"
    if not isinstance(message.get("from"), dict) or not isinstance(message.get("chat"), dict):
        return False, "missing_sender"
    return True, None


def _missing_envs() -> list[str]:
    missing = []
    if not settings.telegram_bot_token:
        missing.append("TELEGRAM_BOT_TOKEN")
    return missing


def _command_name(text: str) -> str:
    # "/menu@DowntownCoffeeBot extra" -> "/menu"
    return text.split()[0].split("@")[0].lower()


def parse_telegram_update(payload: Dict[str, Any]) -> Dict[str, Any]:
    message = payload.get("message") or {}
    sender = message.get("from") or {}
    chat = message.get("chat") or {}
    text = (message.get("text") or "").strip()

    return {
        "update_id": payload.get("update_id"),
        "message_id": message.get("message_id"),
        "chat_id": chat.get("id"),
        "chat_type": chat.get("type") or "",
        "text": text,
        "is_command": text.startswith("/"),
        "customer": Customer(
            id=str(sender.get("id") or ""),
            name=sender.get("first_name") or "",
            username=sender.get("username"),
        ),
    }


def build_reply(info: Dict[str, Any], order_service: OrderService, catalog: Catalog) -> str:
    text = info["text"]
    if info["is_command"]:
        command = _command_name(text)
        if command == "/start":
            return message_builder.welcome_message(settings.shop_name)
        if command == "/menu":
            return message_builder.menu_message(catalog)
        return message_builder.help_message(settings.support_phone)

    result = order_service.handle_text(text, info["customer"])
    if result.order is not None:
        return message_builder.order_confirmation(result.order)
    return message_builder.error_message(result.error, catalog)


def _process_message(
    info: Dict[str, Any], order_service: OrderService, catalog: Catalog, telegram: TelegramClient
) -> None:
    try:
        reply = build_reply(info, order_service, catalog)
    except Exception:
        logger.exception("order_processing_failed", extra={"update_id": info.get("update_id")})
        reply = message_builder.GENERIC_ERROR

    try:
        telegram.send_message(info["chat_id"], reply)
    except Exception:
        logger.exception("reply_send_failed", extra={"chat_id": info.get("chat_id")})


@router.post("/webhooks/telegram")
async def telegram_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
    order_service: OrderService = Depends(get_order_service),
    catalog: Catalog = Depends(get_catalog),
    telegram: TelegramClient = Depends(get_telegram_client),
):
    if settings.telegram_webhook_secret and request.headers.get(SECRET_HEADER) != settings.telegram_webhook_secret:
        return {"status": "ignored", "reason": "invalid_secret"}

    try:
        payload = await request.json()
    except Exception:
        return {"status": "ignored", "reason": "invalid_json"}

    supported, reason = _is_supported_update(payload)
    if not supported:
        return {"status": "ignored", "reason": reason or "unsupported_payload"}

    missing = _missing_envs()
    if missing:
        logger.warning("missing_env", extra={"reason": ",".join(missing)})
        return {"status": "degraded", "reason": "missing_env", "missing": missing}

    info = parse_telegram_update(payload)
    logger.info(
        "message_received",
        extra={"update_id": info["update_id"], "chat_id": info["chat_id"], "customer_id": info["customer"].id},
    )

    if info["chat_type"] != "private":
        return {"status": "ignored", "reason": "non_private_chat"}
    if not info["text"]:
        return {"status": "ignored", "reason": "empty_text"}
    if info["is_command"] and _command_name(info["text"]) not in COMMANDS:
        return {"status": "ignored", "reason": "unknown_command"}

    background_tasks.add_task(_process_message, info, order_service, catalog, telegram)
    return {"status": "queued"}
