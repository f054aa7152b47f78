"""TfL unified API client."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Any

import requests

TFL_API_BASE = "https://api.tfl.gov.uk"

APP_KEY_PATTERN = re.compile(r"(app_key=)([^&\s'\")]+)", re.IGNORECASE)
REDACTED = "[REDACTED]"


def redact_app_key(message: str, app_key: str = "") -> str:
    """Mask app_key query values, and the literal key if given, in a message."""
    message = APP_KEY_PATTERN.sub(lambda m: f"{m.group(1)}{REDACTED}", message)
    if app_key:
        message = message.replace(app_key, REDACTED)
    return message


class TfLClientError(Exception):
    """Raised when a TfL API request fails or returns a non-200 response."""


class MalformedResponseError(TfLClientError):
    """Raised when a TfL response body does not have the expected shape."""


@dataclass(frozen=True)
class StatusResponse:
    """Decoded line status payload and the response's Cache-Control header."""

    lines: Any
    cache_control: str | None


class TfLClient:
    """Thin wrapper around the TfL line status endpoint using requests."""

    def __init__(self, app_key: str = "", timeout_seconds: float = 10) -> None:
        self._app_key = app_key
        self._timeout_seconds = timeout_seconds

    def status_url(self, modes: str) -> str:
        # Modes are interpolated verbatim; the API reports unknown modes itself.
        return f"{TFL_API_BASE}/Line/Mode/{modes}/Status"

    def get_line_statuses(self, modes: str) -> StatusResponse:
        """Fetch line statuses for a comma-joined list of transport modes."""
        params = {"app_key": self._app_key} if self._app_key else None
        url = self.status_url(modes)
        try:
            response = requests.get(url, params=params, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            raise TfLClientError(redact_app_key(f"TfL API request failed: {exc}", self._app_key)) from exc

        if response.status_code != 200:
            body_text = response.text.strip()
            detail = f"Status {response.status_code}"
            if body_text:
                detail = f"{detail}, Body: {body_text}"
            raise TfLClientError(redact_app_key(f"TfL API request failed: {detail}", self._app_key))

        try:
            lines = response.json()
        except ValueError as exc:
            raise MalformedResponseError("TfL API response was not valid JSON") from exc

        return StatusResponse(lines=lines, cache_control=response.headers.get("Cache-Control"))


__all__ = [
    "APP_KEY_PATTERN",
    "REDACTED",
    "TFL_API_BASE",
    "MalformedResponseError",
    "StatusResponse",
    "TfLClient",
    "TfLClientError",
    "redact_app_key",
]
