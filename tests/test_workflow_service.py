"""Tests for workflow webhook triggers."""

from datetime import datetime, timezone

import httpx
import pytest

from adapters.workflow_service import (
    build_event_payload,
    trigger_button_click_workflow,
    trigger_donation_workflow,
    trigger_workflow,
)
from core.domain.models import RemoteRejection, Success, TransportFailure
from helpers import DEEPLY_NESTED_BODY, RecordingTransport, json_response, raising, text_response

FIXED_NOW = datetime(2024, 10, 5, 14, 30, tzinfo=timezone.utc)


class TestBuildEventPayload:

    def test_envelope(self):
        payload = build_event_payload("user_donated", user_id="user_sam", data={"a": 1}, now=FIXED_NOW)
        assert payload == {
            "event": "user_donated",
            "userId": "user_sam",
            "timestamp": "2024-10-05T14:30:00+00:00",
            "data": {"a": 1},
        }

    def test_anonymous_event_has_empty_data(self):
        payload = build_event_payload("button_clicked", now=FIXED_NOW)
        assert payload["userId"] is None
        assert payload["data"] == {}


class TestTriggerWorkflow:

    @pytest.mark.asyncio
    async def test_posts_to_webhook_path(self, settings):
        recorder = RecordingTransport(text_response(200, "Workflow was started"))
        async with recorder.client() as client:
            outcome = await trigger_workflow(
                "flutter-event",
                "app_opened",
                settings=settings,
                client=client,
                now=FIXED_NOW,
            )

        assert isinstance(outcome, Success)
        assert str(recorder.requests[0].url) == "https://hooks.test/webhook/flutter-event"
        assert recorder.last_json["event"] == "app_opened"

    @pytest.mark.asyncio
    async def test_sends_api_key_when_configured(self, settings):
        settings = settings.model_copy(update={"api_key": "k3y"})
        recorder = RecordingTransport(text_response(204, ""))
        async with recorder.client() as client:
            await trigger_workflow("x", "evt", settings=settings, client=client)

        assert recorder.requests[0].headers["X-API-Key"] == "k3y"

    @pytest.mark.asyncio
    async def test_omits_api_key_when_unset(self, settings):
        recorder = RecordingTransport(text_response(204, ""))
        async with recorder.client() as client:
            await trigger_workflow("x", "evt", settings=settings, client=client)

        assert "X-API-Key" not in recorder.requests[0].headers

    @pytest.mark.asyncio
    async def test_rejection(self, settings):
        recorder = RecordingTransport(json_response(404, {"message": "webhook not registered"}))
        async with recorder.client() as client:
            outcome = await trigger_workflow("missing", "evt", settings=settings, client=client)

        assert outcome == RemoteRejection(message="webhook not registered", status_code=404)

    @pytest.mark.asyncio
    async def test_rejection_with_undecodable_body(self, settings):
        recorder = RecordingTransport(text_response(500, DEEPLY_NESTED_BODY))
        async with recorder.client() as client:
            outcome = await trigger_workflow("x", "evt", settings=settings, client=client)

        assert outcome == RemoteRejection(message="Server returned status 500", status_code=500)

    @pytest.mark.asyncio
    async def test_network_error(self, settings):
        recorder = RecordingTransport(raising(lambda request: httpx.ConnectError("unreachable", request=request)))
        async with recorder.client() as client:
            outcome = await trigger_workflow("x", "evt", settings=settings, client=client)

        assert outcome == TransportFailure(message="Network error: unreachable")


class TestConvenienceTriggers:

    @pytest.mark.asyncio
    async def test_donation_event_data(self, settings):
        recorder = RecordingTransport(text_response(200, ""))
        async with recorder.client() as client:
            await trigger_donation_workflow(
                "donation",
                organization_id="org_clean_water",
                organization_name="Clean Water Now",
                amount=25,
                email="donor@example.com",
                user_id="user_sam",
                settings=settings,
                client=client,
            )

        sent = recorder.last_json
        assert sent["event"] == "user_donated"
        assert sent["userId"] == "user_sam"
        assert sent["data"] == {
            "organization_id": "org_clean_water",
            "organization_name": "Clean Water Now",
            "amount_usd": 25.0,
            "email": "donor@example.com",
            "currency": "USD",
        }

    @pytest.mark.asyncio
    async def test_button_click_merges_extra_data(self, settings):
        recorder = RecordingTransport(text_response(200, ""))
        async with recorder.client() as client:
            await trigger_button_click_workflow(
                "ui-events",
                button_name="donate_now",
                screen_name="organization_profile",
                extra_data={"organization_id": "org_coding_kids"},
                settings=settings,
                client=client,
            )

        sent = recorder.last_json
        assert sent["event"] == "button_clicked"
        assert sent["data"] == {
            "button_name": "donate_now",
            "screen_name": "organization_profile",
            "organization_id": "org_coding_kids",
        }
