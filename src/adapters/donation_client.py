"""Donation submission client.

Responsibility:
- Send one JSON `POST` per donation attempt to the configured webhook.
- Classify the result into `Success`, `RemoteRejection` or `TransportFailure`.

Failures never escape as exceptions: every path ends in an outcome value.
There are no retries and no deduplication; two calls mean two requests.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Iterable
from typing import Any

import httpx

from adapters.http_client import build_async_client, merge_headers
from adapters.response_interpreter import (
    decode_success_body,
    extract_error_message,
    rejection_message,
)
from core.config import AppSettings, ensure_http_url
from core.domain.models import (
    DonationRequest,
    Organization,
    Outcome,
    RemoteRejection,
    Success,
    TransportFailure,
)
from core.exceptions import ResponseFormatError
from core.services.donation_builder import build_donation_request

logger = logging.getLogger(__name__)

_SENSITIVE_HEADERS = {"authorization", "x-api-key", "cookie"}


def redact_headers(headers: dict[str, str], extra: Iterable[str] = ()) -> dict[str, str]:
    """Mask secret header values. `extra` adds names such as a custom API-key header."""

    sensitive = _SENSITIVE_HEADERS | {name.lower() for name in extra}
    return {k: ("***" if k.lower() in sensitive else v) for k, v in headers.items()}


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code <= 299


def _describe(exc: BaseException) -> str:
    text = str(exc).strip()
    return text or type(exc).__name__


def transport_failure_from(exc: Exception) -> TransportFailure:
    """Map an exception raised around the HTTP call to a sanitized failure."""

    if isinstance(exc, httpx.TimeoutException):
        return TransportFailure(message=f"Network error: request timed out ({_describe(exc)})")
    if isinstance(exc, httpx.TransportError):
        return TransportFailure(message=f"Network error: {_describe(exc)}")
    if isinstance(exc, httpx.InvalidURL):
        return TransportFailure(message=f"Invalid endpoint URL: {_describe(exc)}")
    return TransportFailure(message=f"Unexpected error: {type(exc).__name__}")


async def post_json(
    url: str,
    payload: dict[str, Any],
    *,
    headers: dict[str, str],
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> httpx.Response:
    """Single JSON POST. Uses `client` when given, else a short-lived one."""

    body = json.dumps(payload)
    secret_headers = (settings.api_key_header,) if settings is not None else ()
    logger.debug("POST %s headers=%s body=%s", url, redact_headers(headers, secret_headers), body)

    started = time.perf_counter()
    if client is not None:
        response = await client.post(url, content=body, headers=headers)
    else:
        async with build_async_client(settings) as own_client:
            response = await own_client.post(url, content=body, headers=headers)
    elapsed_ms = (time.perf_counter() - started) * 1000

    logger.debug(
        "Response %s from %s in %.0fms body=%s",
        response.status_code,
        url,
        elapsed_ms,
        response.text,
    )
    return response


def interpret_response(response: httpx.Response) -> Outcome:
    """Classify a received HTTP response."""

    status = response.status_code
    if not is_success_status(status):
        message = extract_error_message(response.text, status)
        logger.warning("Donation rejected with status %s: %s", status, message)
        return RemoteRejection(message=message, status_code=status)

    try:
        decoded = decode_success_body(response.text)
    except ResponseFormatError as exc:
        logger.warning("Undecodable %s response: %s", status, exc.message)
        return TransportFailure(message=f"Invalid response format: {exc.message}")

    if not decoded.success:
        message = rejection_message(decoded)
        logger.warning("Donation not accepted (status %s): %s", status, message)
        return RemoteRejection(message=message, status_code=status)

    logger.info("Donation accepted, id=%s", decoded.donation_id)
    return Success(response=decoded)


async def submit_donation(
    url: str,
    request: DonationRequest,
    *,
    extra_headers: dict[str, str] | None = None,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> Outcome:
    """Submit a donation and return its outcome.

    Example:
        outcome = await submit_donation(url, request)
        if outcome.is_success:
            print(outcome.response.donation_id)
    """

    headers = merge_headers(extra_headers)
    try:
        response = await post_json(
            url,
            request.to_payload(),
            headers=headers,
            settings=settings,
            client=client,
        )
        return interpret_response(response)
    except Exception as exc:
        failure = transport_failure_from(exc)
        logger.warning("Donation submission to %s failed: %s", url, failure.message)
        logger.debug("Submission failure detail", exc_info=exc)
        return failure


class DonationSubmitter:
    """Settings-bound entry point used by the UI layer.

    Resolves the endpoint URL and API-key header from `AppSettings`, builds
    the request and submits it.

    Raises:
        ConfigurationError: the endpoint URL is not http(s).
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        if url:
            self._url = ensure_http_url(url)
        else:
            self._url = self._settings.resolved_donation_url()
        self._client = client

    @property
    def url(self) -> str:
        return self._url

    async def submit(
        self,
        organization: Organization,
        amount: object,
        email: str,
        *,
        extra_headers: dict[str, str] | None = None,
    ) -> Outcome:
        """Build and submit a donation.

        Raises:
            DonationValidationError: amount/email do not pass the input gate.
        """

        request = build_donation_request(organization, amount, email)
        headers = {**self._settings.auth_headers(), **(extra_headers or {})}
        return await submit_donation(
            self._url,
            request,
            extra_headers=headers,
            settings=self._settings,
            client=self._client,
        )
