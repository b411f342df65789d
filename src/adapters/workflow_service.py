"""Workflow webhook triggers.

Sends user events (donations, button clicks) to a workflow instance as
``POST <base>/webhook/<path>`` with an envelope:

    {"event": ..., "userId": ..., "timestamp": <UTC ISO-8601>, "data": {...}}

Same status and exception policy as the donation client, except that a 2xx
body does not need to be JSON: the workflow only has to accept the event.

The `donate` command calls `trigger_donation_workflow` after a successful
donation when `GIVEONE_DONATION_EVENT_WEBHOOK_PATH` is set.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

import httpx

from adapters.donation_client import (
    is_success_status,
    post_json,
    transport_failure_from,
)
from adapters.http_client import merge_headers
from adapters.response_interpreter import extract_error_message
from core.config import AppSettings
from core.domain.models import DonationResponse, Outcome, RemoteRejection, Success

logger = logging.getLogger(__name__)

DONATION_EVENT = "user_donated"
BUTTON_CLICK_EVENT = "button_clicked"


def build_event_payload(
    event: str,
    *,
    user_id: str | None = None,
    data: dict[str, Any] | None = None,
    now: datetime | None = None,
) -> dict[str, Any]:
    moment = now or datetime.now(timezone.utc)
    return {
        "event": event,
        "userId": user_id,
        "timestamp": moment.astimezone(timezone.utc).isoformat(),
        "data": dict(data or {}),
    }


async def trigger_workflow(
    webhook_path: str,
    event_name: str,
    *,
    user_id: str | None = None,
    extra_data: dict[str, Any] | None = None,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
    now: datetime | None = None,
) -> Outcome:
    settings = settings or AppSettings()
    url = settings.webhook_url(f"webhook/{webhook_path.strip('/')}")
    payload = build_event_payload(event_name, user_id=user_id, data=extra_data, now=now)
    headers = merge_headers(settings.auth_headers())

    try:
        response = await post_json(url, payload, headers=headers, settings=settings, client=client)
        if not is_success_status(response.status_code):
            message = extract_error_message(response.text, response.status_code)
            logger.warning("Workflow %r rejected: %s", event_name, message)
            return RemoteRejection(message=message, status_code=response.status_code)
    except Exception as exc:
        failure = transport_failure_from(exc)
        logger.warning("Workflow %r trigger failed: %s", event_name, failure.message)
        return failure

    return Success(response=DonationResponse(success=True, message=f"Workflow triggered: {event_name}"))


async def trigger_donation_workflow(
    webhook_path: str,
    *,
    organization_id: str,
    organization_name: str,
    amount: Decimal | float,
    email: str,
    user_id: str | None = None,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> Outcome:
    return await trigger_workflow(
        webhook_path,
        DONATION_EVENT,
        user_id=user_id,
        extra_data={
            "organization_id": organization_id,
            "organization_name": organization_name,
            "amount_usd": float(amount),
            "email": email,
            "currency": "USD",
        },
        settings=settings,
        client=client,
    )


async def trigger_button_click_workflow(
    webhook_path: str,
    *,
    button_name: str,
    screen_name: str,
    user_id: str | None = None,
    extra_data: dict[str, Any] | None = None,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> Outcome:
    data: dict[str, Any] = {"button_name": button_name, "screen_name": screen_name}
    if extra_data:
        data.update(extra_data)
    return await trigger_workflow(
        webhook_path,
        BUTTON_CLICK_EVENT,
        user_id=user_id,
        extra_data=data,
        settings=settings,
        client=client,
    )
