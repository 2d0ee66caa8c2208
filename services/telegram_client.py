"""Minimal client for the Telegram Bot API.

Only the handful of methods used for village notifications are exposed:
plain text messages, files (photo, document, ...) and locations. Each call
is a single ``POST`` to ``{api_base_uri}/bot{token}/{endpoint}``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping

import httpx

from analytics_tracker import emit_counter

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URI = "https://api.telegram.org"
DEFAULT_TIMEOUT = 30.0

# Error codes carried by CouldNotSendNotification
TOKEN_NOT_PROVIDED = "TOKEN_NOT_PROVIDED"
TELEGRAM_ERROR = "TELEGRAM_ERROR"
COMMUNICATION_ERROR = "COMMUNICATION_ERROR"


@dataclass(frozen=True)
class TelegramConfig:
    """Settings required to talk to the bot API."""

    token: str | None = None
    api_base_uri: str = DEFAULT_API_BASE_URI
    timeout: float = DEFAULT_TIMEOUT


@dataclass
class CouldNotSendNotification(Exception):
    code: str
    message: str
    status_code: int | None = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def token_not_provided(cls, message: str) -> "CouldNotSendNotification":
        return cls(TOKEN_NOT_PROVIDED, message)

    @classmethod
    def telegram_responded_with_error(
        cls, exc: httpx.HTTPStatusError
    ) -> "CouldNotSendNotification":
        response = exc.response
        description = _error_description(response)
        return cls(
            TELEGRAM_ERROR,
            f"Telegram responded with an error `{response.status_code} - {description}`",
            status_code=response.status_code,
        )

    @classmethod
    def could_not_communicate(cls, exc: Exception) -> "CouldNotSendNotification":
        return cls(
            COMMUNICATION_ERROR,
            f"The communication with Telegram failed. `{exc}`",
        )


def _error_description(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.reason_phrase or "no description"
    if isinstance(payload, Mapping) and payload.get("description"):
        return str(payload["description"])
    return response.reason_phrase or "no description"


def studly(value: str) -> str:
    """Return ``value`` in StudlyCaps: ``video_note`` -> ``VideoNote``."""

    words = re.split(r"[-_\s]+", value.strip())
    return "".join(w[:1].upper() + w[1:] for w in words if w)


class TelegramClient:
    """Thin wrapper around :mod:`httpx` for the Telegram Bot API."""

    def __init__(self, config: TelegramConfig, http_client: httpx.Client | None = None):
        self._token = config.token
        self._api_base_uri = config.api_base_uri.rstrip("/")
        self._timeout = config.timeout
        self._http = http_client
        self._owns_http = False

    # --- accessors ----------------------------------------------------------
    @property
    def token(self) -> str | None:
        return self._token

    def set_token(self, token: str) -> "TelegramClient":
        self._token = token
        return self

    @property
    def api_base_uri(self) -> str:
        return self._api_base_uri

    def set_api_base_uri(self, api_base_uri: str) -> "TelegramClient":
        self._api_base_uri = api_base_uri.rstrip("/")
        return self

    def http_client(self) -> httpx.Client:
        if self._http is None:
            self._http = httpx.Client(timeout=self._timeout)
            self._owns_http = True
        return self._http

    def set_http_client(self, http_client: httpx.Client) -> "TelegramClient":
        self.close()
        self._http = http_client
        self._owns_http = False
        return self

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""

        if self._http is not None and self._owns_http:
            self._http.close()
            self._http = None
            self._owns_http = False

    # --- API methods --------------------------------------------------------
    def send_message(self, params: Mapping[str, Any]) -> httpx.Response:
        """Send a text message (``chat_id``, ``text``, ``parse_mode``, ...)."""

        return self._send_request("sendMessage", params)

    def send_file(
        self,
        params: Mapping[str, Any],
        file_type: str,
        multipart: bool = False,
        files: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        """Send a file as ``file_type`` (photo, document, video_note, ...)."""

        return self._send_request("send" + studly(file_type), params, multipart, files)

    def send_location(self, params: Mapping[str, Any]) -> httpx.Response:
        return self._send_request("sendLocation", params)

    def _send_request(
        self,
        endpoint: str,
        params: Mapping[str, Any],
        multipart: bool = False,
        files: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        if not self._token:
            raise CouldNotSendNotification.token_not_provided(
                "You must provide your telegram bot token to make any API requests."
            )

        url = f"{self._api_base_uri}/bot{self._token}/{endpoint}"
        data = {k: v for k, v in params.items() if v is not None}
        try:
            if multipart:
                response = self.http_client().post(url, data=data, files=dict(files or {}))
            else:
                response = self.http_client().post(url, data=data)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            emit_counter("telegram.send.error")
            raise CouldNotSendNotification.telegram_responded_with_error(exc) from exc
        except httpx.HTTPError as exc:
            emit_counter("telegram.send.error")
            raise CouldNotSendNotification.could_not_communicate(exc) from exc

        emit_counter("telegram.send.success")
        logger.debug("telegram %s -> %s", endpoint, response.status_code)
        return response


def build_telegram_client(config: TelegramConfig) -> TelegramClient:
    """Return a :class:`TelegramClient` instance from ``config``."""

    return TelegramClient(config)


__all__ = [
    "TelegramConfig",
    "TelegramClient",
    "CouldNotSendNotification",
    "build_telegram_client",
    "studly",
    "TOKEN_NOT_PROVIDED",
    "TELEGRAM_ERROR",
    "COMMUNICATION_ERROR",
]
