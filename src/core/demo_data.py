"""In-memory demo catalogue (organizations and past donations).

Stands in for a backend while the app has none. Nothing here is mutated at
runtime; mutable UI state lives in `core.services.feed.DonationFeed`.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from core.domain.models import Donation, Organization

DEMO_ORGANIZATIONS: tuple[Organization, ...] = (
    Organization(
        id="org_clean_water",
        name="Clean Water Now",
        category="Health",
        tagline="Bringing safe drinking water to every village.",
        description=(
            "Clean Water Now builds and maintains community-owned wells in rural areas "
            "with limited access to safe drinking water, and trains local teams to "
            "maintain the infrastructure long term."
        ),
        city="Kampala",
        country="Uganda",
        website="https://example.org/clean-water",
        logo_url="https://images.pexels.com/photos/4618245/pexels-photo-4618245.jpeg",
        ein="12-3456789",
        total_received_usd=Decimal("128500.00"),
        supporters_count=2143,
        is_verified=True,
        tags=("water", "sanitation", "africa", "health"),
    ),
    Organization(
        id="org_coding_kids",
        name="Code For Kids",
        category="Education",
        tagline="Teaching the next generation to code.",
        description=(
            "Code For Kids runs after-school coding clubs in under-resourced schools, "
            "providing laptops, mentors, and project-based curricula."
        ),
        city="Oakland",
        country="United States",
        website="https://example.org/code-for-kids",
        logo_url="https://images.pexels.com/photos/1181675/pexels-photo-1181675.jpeg",
        ein="98-7654321",
        total_received_usd=Decimal("245230.50"),
        supporters_count=3891,
        is_verified=True,
        tags=("education", "youth", "technology", "coding"),
    ),
    Organization(
        id="org_tree_alliance",
        name="Urban Tree Alliance",
        category="Environment",
        tagline="Greening cities one tree at a time.",
        description=(
            "Urban Tree Alliance plants and cares for trees in low-canopy neighborhoods, "
            "helping reduce heat islands and improve air quality."
        ),
        city="São Paulo",
        country="Brazil",
        website="https://example.org/urban-tree-alliance",
        logo_url="https://images.pexels.com/photos/1131407/pexels-photo-1131407.jpeg",
        # International, no US EIN.
        ein=None,
        total_received_usd=Decimal("76910.75"),
        supporters_count=1540,
        is_verified=False,
        tags=("trees", "climate", "urban", "latam"),
    ),
    Organization(
        id="org_emergency_relief",
        name="Rapid Relief Fund",
        category="Emergency Relief",
        tagline="Fast support when disasters strike.",
        description=(
            "Rapid Relief Fund coordinates emergency food, shelter, and cash assistance "
            "for families affected by natural disasters around the world."
        ),
        city="Geneva",
        country="Switzerland",
        website="https://example.org/rapid-relief",
        logo_url="https://images.pexels.com/photos/6646912/pexels-photo-6646912.jpeg",
        ein="55-0011223",
        total_received_usd=Decimal("512340.10"),
        supporters_count=8023,
        is_verified=True,
        tags=("disaster response", "food", "cash assistance", "global"),
    ),
)

DEMO_DONATIONS: tuple[Donation, ...] = (
    Donation(
        id="don_001",
        donor_name="Sam Patel",
        donor_handle="@sam_donates",
        organization_id="org_clean_water",
        amount_usd=Decimal("25.00"),
        created_at=datetime(2024, 10, 5, 14, 30),
        message="For new wells in rural villages",
        emoji="💧",
    ),
    Donation(
        id="don_002",
        donor_name="Amy Chen",
        donor_handle="@amy_helps",
        organization_id="org_coding_kids",
        amount_usd=Decimal("50.00"),
        created_at=datetime(2024, 10, 6, 9, 15),
        message="For more laptops in Oakland schools",
        emoji="💻",
    ),
    Donation(
        id="don_003",
        donor_name="Luis García",
        donor_handle="@luis_gives",
        organization_id="org_emergency_relief",
        amount_usd=Decimal("75.50"),
        created_at=datetime(2024, 10, 7, 18, 45),
        message="Sending support after the recent floods.",
        emoji="🤝",
    ),
    Donation(
        id="don_004",
        donor_name="Amy Chen",
        donor_handle="@amy_helps",
        organization_id="org_tree_alliance",
        amount_usd=Decimal("10.00"),
        created_at=datetime(2024, 10, 8, 8, 5),
        message="A little something for more trees in the city",
        emoji="🌳",
        is_public=False,
    ),
    Donation(
        id="don_005",
        donor_name="Sam Patel",
        donor_handle="@sam_donates",
        organization_id="org_coding_kids",
        amount_usd=Decimal("5.00"),
        created_at=datetime(2024, 10, 8, 20, 10),
        message="Keep inspiring the next generation!",
        emoji="🚀",
    ),
)


def find_organization(org_id: str) -> Organization | None:
    for org in DEMO_ORGANIZATIONS:
        if org.id == org_id:
            return org
    return None
