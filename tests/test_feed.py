"""Tests for the activity feed and demo catalogue."""

from datetime import datetime
from decimal import Decimal

from core.demo_data import DEMO_DONATIONS, DEMO_ORGANIZATIONS, find_organization
from core.domain.models import Donation
from core.services.feed import DonationFeed


def _donation(donation_id, created_at, *, org_id="org_a", is_public=True):
    return Donation(
        id=donation_id,
        donor_name="Donor",
        donor_handle="@donor",
        organization_id=org_id,
        amount_usd=Decimal("5"),
        created_at=created_at,
        is_public=is_public,
    )


class TestDonationFeed:

    def test_newest_first(self):
        feed = DonationFeed(
            [_donation("old", datetime(2024, 1, 1)), _donation("new", datetime(2024, 2, 1))]
        )
        assert [d.id for d in feed.donations] == ["new", "old"]

    def test_private_donations_are_hidden(self):
        feed = DonationFeed(
            [_donation("pub", datetime(2024, 1, 1)), _donation("priv", datetime(2024, 1, 2), is_public=False)]
        )
        assert [d.id for d in feed.donations] == ["pub"]

    def test_for_organization(self):
        feed = DonationFeed(
            [
                _donation("a1", datetime(2024, 1, 1), org_id="org_a"),
                _donation("b1", datetime(2024, 1, 2), org_id="org_b"),
            ]
        )
        assert [d.id for d in feed.for_organization("org_b")] == ["b1"]

    def test_toggle_like(self):
        feed = DonationFeed()
        assert feed.is_liked("don_001") is False
        assert feed.toggle_like("don_001") is True
        assert feed.is_liked("don_001") is True
        assert feed.toggle_like("don_001") is False
        assert feed.is_liked("don_001") is False

    def test_likes_are_per_instance(self):
        first, second = DonationFeed(), DonationFeed()
        first.toggle_like("don_002")
        assert second.is_liked("don_002") is False

    def test_defaults_to_demo_data(self):
        feed = DonationFeed()
        assert len(feed.donations) == len([d for d in DEMO_DONATIONS if d.is_public])


class TestDemoCatalogue:

    def test_donations_reference_known_organizations(self):
        ids = {org.id for org in DEMO_ORGANIZATIONS}
        assert all(d.organization_id in ids for d in DEMO_DONATIONS)

    def test_find_organization(self):
        assert find_organization("org_coding_kids").name == "Code For Kids"
        assert find_organization("org_missing") is None
