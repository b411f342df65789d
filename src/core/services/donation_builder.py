"""Donation request builder.

Maps validated UI input (amount, email) plus the selected organization into a
`DonationRequest`. Pure and deterministic.
"""

from __future__ import annotations

from pydantic import ValidationError

from core.domain.models import DonationRequest, Organization
from core.domain.validation import validate_amount, validate_email
from core.exceptions import DonationValidationError


def build_donation_request(
    organization: Organization,
    amount: object,
    email: str,
) -> DonationRequest:
    """Build a `DonationRequest`.

    Raises:
        DonationValidationError: if amount or email would not pass the input
            gate. Callers are expected to check `can_submit` first, so this is
            a contract bug rather than a user-facing error.
    """

    checked_amount = validate_amount(amount)
    if checked_amount is None:
        raise DonationValidationError(
            "Invalid donation amount",
            details={"field": "amount", "value": str(amount)},
        )
    if not validate_email(email):
        raise DonationValidationError("Invalid email address", details={"field": "email"})

    try:
        return DonationRequest(organization=organization, amount=checked_amount, email=email)
    except ValidationError as exc:
        raise DonationValidationError(str(exc)) from exc
