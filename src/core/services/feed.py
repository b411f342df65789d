"""Activity feed state.

An explicit object passed to the views that need it (no module singleton):
holds the donations to display and which ones the user has liked. Likes are
local UI state and reset with the process.
"""

from __future__ import annotations

from collections.abc import Iterable

from core.demo_data import DEMO_DONATIONS
from core.domain.models import Donation


class DonationFeed:
    def __init__(self, donations: Iterable[Donation] | None = None) -> None:
        source = DEMO_DONATIONS if donations is None else donations
        self._donations: tuple[Donation, ...] = tuple(
            sorted(source, key=lambda d: d.created_at, reverse=True)
        )
        self._liked: set[str] = set()

    @property
    def donations(self) -> tuple[Donation, ...]:
        """Public donations, newest first."""

        return tuple(d for d in self._donations if d.is_public)

    def for_organization(self, org_id: str) -> tuple[Donation, ...]:
        return tuple(d for d in self.donations if d.organization_id == org_id)

    def is_liked(self, donation_id: str) -> bool:
        return donation_id in self._liked

    def toggle_like(self, donation_id: str) -> bool:
        """Flip the liked state and return the new value."""

        if donation_id in self._liked:
            self._liked.remove(donation_id)
            return False
        self._liked.add(donation_id)
        return True
