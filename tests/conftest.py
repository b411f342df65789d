"""Shared fixtures: organizations, requests and isolated settings."""

from __future__ import annotations

import pytest

from core.config import AppSettings
from core.domain.models import DonationRequest, Organization


@pytest.fixture
def organization() -> Organization:
    return Organization(id="org_clean_water", name="Clean Water Now", category="Health")


@pytest.fixture
def donation_request(organization: Organization) -> DonationRequest:
    return DonationRequest(organization=organization, amount="25", email="donor@example.com")


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> AppSettings:
    for key in (
        "GIVEONE_API_KEY",
        "GIVEONE_API_KEY_HEADER",
        "GIVEONE_DONATION_URL",
        "GIVEONE_WEBHOOK_BASE_URL",
        "GIVEONE_DONATION_WEBHOOK_PATH",
        "GIVEONE_DONATION_EVENT_WEBHOOK_PATH",
    ):
        monkeypatch.delenv(key, raising=False)
    return AppSettings(_env_file=None, webhook_base_url="https://hooks.test")
