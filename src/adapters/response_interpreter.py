"""Tolerant decoding of donation webhook replies.

Field rules:
- `success`: only a real JSON boolean counts; anything else is False.
- `message` / `error`: strings only, otherwise None.
- id: `donation_id` takes precedence over `donationId`; numeric ids are
  stringified.

Error text for rejections: `error` -> `message` -> "Server returned status N".
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from core.domain.models import DonationResponse
from core.exceptions import ResponseFormatError

_ID_KEYS = ("donation_id", "donationId")


def _opt_str(value: object) -> str | None:
    if isinstance(value, str):
        return value
    return None


def _opt_id(value: object) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value or None
    if isinstance(value, int):
        return str(value)
    return None


def parse_donation_response(data: Mapping[str, Any]) -> DonationResponse:
    success = data.get("success")

    donation_id = None
    for key in _ID_KEYS:
        donation_id = _opt_id(data.get(key))
        if donation_id is not None:
            break

    return DonationResponse(
        success=success if isinstance(success, bool) else False,
        message=_opt_str(data.get("message")),
        donation_id=donation_id,
        error=_opt_str(data.get("error")),
    )


def _load_json(text: str) -> Any:
    # Oversized integers raise a plain ValueError, deep nesting a RecursionError.
    try:
        return json.loads(text)
    except (ValueError, TypeError, RecursionError) as exc:
        raise ResponseFormatError(f"response body is not valid JSON ({exc})") from exc


def decode_success_body(text: str) -> DonationResponse:
    """Decode a 2xx body.

    Raises:
        ResponseFormatError: body is empty, not JSON, or not a JSON object.
    """

    if not text or not text.strip():
        raise ResponseFormatError("response body is empty")

    data = _load_json(text)
    if not isinstance(data, dict):
        raise ResponseFormatError(f"expected a JSON object, got {type(data).__name__}")
    return parse_donation_response(data)


def status_message(status_code: int) -> str:
    return f"Server returned status {status_code}"


def extract_error_message(text: str | None, status_code: int) -> str:
    """Best-effort human-readable error for a non-2xx body."""

    if text:
        try:
            data = json.loads(text)
        except (ValueError, TypeError, RecursionError):
            data = None
        if isinstance(data, dict):
            for key in ("error", "message"):
                value = data.get(key)
                if isinstance(value, str) and value.strip():
                    return value.strip()
    return status_message(status_code)


def rejection_message(response: DonationResponse) -> str:
    """Error text for a 2xx reply that carries `success: false`."""

    for value in (response.error, response.message):
        if value and value.strip():
            return value.strip()
    return "Donation request failed"
