from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from coffee_bot.api.dependencies import get_catalog, get_telegram_client
from coffee_bot.api.routes_health import router as health_router
from coffee_bot.api.routes_webhooks import router as webhooks_router
from coffee_bot.logging_config import init_logging
from coffee_bot.settings import settings

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)
app.include_router(health_router)
app.include_router(webhooks_router)


@app.on_event("startup")
def startup() -> None:
    init_logging(settings.log_level)

    # fail fast on a broken MENU_FILE
    get_catalog()

    if settings.webhook_url and settings.telegram_bot_token:
        try:
            get_telegram_client().set_webhook(settings.webhook_url, settings.telegram_webhook_secret or None)
            logger.info("webhook_registered")
        except Exception:
            logger.exception("webhook_register_failed")


def run() -> None:
    uvicorn.run("coffee_bot.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
