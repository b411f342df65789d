"""Domain models (Pydantic v2).

These models describe *what* a donation is, not *how* it is sent:
- `Organization`: the recipient, supplied by the catalogue.
- `DonationRequest` / `DonationResponse`: the webhook contract.
- `Success` / `RemoteRejection` / `TransportFailure`: the outcome of one
  submission attempt (`Outcome`).
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict

from core.domain.validation import validate_amount, validate_email


class Organization(BaseModel):
    """A nonprofit that can receive donations.

    Only `id`, `name` and `category` are sent with a donation; the rest is
    catalogue/presentation data.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable identifier (e.g. 'org_clean_water').")
    name: str = Field(..., min_length=1, description="Display name.")
    category: str = Field(..., min_length=1, description="High-level category (Health, Education...).")

    tagline: str = Field(default="", description="One-line summary.")
    description: str = Field(default="", description="Mission statement.")
    city: str | None = None
    country: str | None = None
    website: str | None = None
    logo_url: str | None = None
    ein: str | None = Field(default=None, description="US tax id, when registered.")
    total_received_usd: Decimal = Field(default=Decimal("0"), ge=0)
    supporters_count: int = Field(default=0, ge=0)
    is_verified: bool = False
    tags: tuple[str, ...] = ()


class DonationRequest(BaseModel):
    """One donation attempt. Built fresh per submission, never persisted."""

    model_config = ConfigDict(frozen=True)

    organization: Organization
    amount: Decimal = Field(..., description="Amount in USD (> 0, max two decimals).")
    email: str = Field(..., description="Receipt email.")

    @field_validator("amount", mode="before")
    @classmethod
    def _check_amount(cls, value: Any) -> Decimal:
        amount = validate_amount(value)
        if amount is None:
            raise ValueError("amount must be a positive number with at most two decimals")
        return amount

    @field_validator("email", mode="before")
    @classmethod
    def _check_email(cls, value: Any) -> str:
        if not validate_email(value):
            raise ValueError("email is not a valid address")
        return value.strip()

    def to_payload(self) -> dict[str, Any]:
        """Wire payload for the donation webhook."""

        return {
            "organization_id": self.organization.id,
            "organization_name": self.organization.name,
            "amount_usd": float(self.amount),
            "email": self.email,
            "organization_category": self.organization.category,
        }


class DonationResponse(BaseModel):
    """Decoded webhook reply. See `adapters.response_interpreter`."""

    model_config = ConfigDict(frozen=True)

    success: bool = False
    message: str | None = None
    donation_id: str | None = None
    error: str | None = None


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    response: DonationResponse

    @model_validator(mode="after")
    def _require_accepted(self) -> "Success":
        if self.response.success is not True:
            raise ValueError("a successful outcome needs a response with success=True")
        return self

    @property
    def is_success(self) -> bool:
        return True

    @property
    def display_message(self) -> str:
        return self.response.message or "Donation received"


class RemoteRejection(BaseModel):
    """Server reachable, request rejected (non-2xx or `success: false`)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["remote_rejection"] = "remote_rejection"
    message: str
    status_code: int | None = None

    @property
    def is_success(self) -> bool:
        return False

    @property
    def display_message(self) -> str:
        return self.message


class TransportFailure(BaseModel):
    """Network unreachable, response undecodable, or unexpected error."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["transport_failure"] = "transport_failure"
    message: str

    @property
    def is_success(self) -> bool:
        return False

    @property
    def display_message(self) -> str:
        return self.message


Outcome = Annotated[
    Union[Success, RemoteRejection, TransportFailure],
    Field(discriminator="kind"),
]


class Donation(BaseModel):
    """A past donation shown in the activity feed (demo data)."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    donor_name: str = Field(..., min_length=1)
    donor_handle: str = Field(..., min_length=1)
    organization_id: str = Field(..., min_length=1)
    amount_usd: Decimal = Field(..., gt=0)
    created_at: datetime
    message: str = ""
    emoji: str | None = None
    is_public: bool = Field(default=True, description="Private donations stay out of the feed.")
