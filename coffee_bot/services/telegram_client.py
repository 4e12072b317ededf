from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)


class TelegramClient:
    def __init__(self, token: str, base_url: str = "https://api.telegram.org", client: httpx.Client | None = None) -> None:
        self.token = token
        self.base_url = base_url.rstrip("/")
        self._client = client

    def _url(self, method: str) -> str:
        return f"{self.base_url}/bot{self.token}/{method}"

    def _post(self, url: str, payload: dict, timeout: int) -> httpx.Response:
        if self._client is not None:
            return self._client.post(url, json=payload)
        with httpx.Client(timeout=timeout) as client:
            return client.post(url, json=payload)

    def _call(self, method: str, payload: dict, timeout: int = 30) -> dict:
        resp = self._post(self._url(method), payload, timeout=timeout)
        body = {}
        try:
            body = resp.json()
        except ValueError:
            pass
        if not isinstance(body, dict):
            body = {}
        if resp.status_code >= 400 or not body.get("ok", False):
            logger.error(
                "telegram_call_failed",
                extra={
                    "method": method,
                    "status_code": resp.status_code,
                    "chat_id": payload.get("chat_id"),
                    "error": resp.text[:500],
                },
            )
            raise RuntimeError(f"Telegram {method} failed: {resp.status_code} {resp.text[:500]}")
        return body

    def send_message(self, chat_id: int | str, text: str, parse_mode: str | None = "HTML") -> dict:
        payload = {"chat_id": chat_id, "text": text}
        if parse_mode:
            payload["parse_mode"] = parse_mode
        return self._call("sendMessage", payload)

    def set_webhook(self, url: str, secret_token: str | None = None) -> dict:
        payload = {"url": url}
        if secret_token:
            payload["secret_token"] = secret_token
        return self._call("setWebhook", payload)
