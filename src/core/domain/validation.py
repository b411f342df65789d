"""Input gate for candidate donations.

Pure functions: no I/O, no network. The UI re-evaluates `can_submit` on
every keystroke and keeps its confirm action disabled while it is False.

Fractional digits: custom amounts with more than two decimals are rejected,
never truncated (``"25.999"`` is invalid).
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

PRESET_AMOUNTS: tuple[Decimal, ...] = tuple(Decimal(v) for v in (5, 10, 25, 50, 100))

EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

# "25", "25.5", "25.50" and "25." (trailing dot while typing).
_CUSTOM_AMOUNT_RE = re.compile(r"^\d+(?:\.\d{0,2})?$")

_CENT = Decimal("0.01")


def _parse_custom_amount(text: str) -> Decimal | None:
    candidate = text.strip()
    if not candidate or not _CUSTOM_AMOUNT_RE.match(candidate):
        return None
    try:
        value = Decimal(candidate.rstrip("."))
    except InvalidOperation:
        return None
    return value


def validate_amount(raw: object) -> Decimal | None:
    """Return the donation amount as a positive `Decimal`, or None if invalid.

    Accepts a number (a preset from `PRESET_AMOUNTS`, typically) or free-form
    text. Numbers follow the same two-decimal rule as text. Booleans are
    rejected even though they are ints.
    """

    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, str):
        value = _parse_custom_amount(raw)
    elif isinstance(raw, (int, float, Decimal)):
        try:
            value = Decimal(str(raw))
        except (InvalidOperation, ValueError):
            return None
        if not value.is_finite():
            return None
    else:
        return None

    if value is None or value <= 0:
        return None
    # Amounts too large to carry cents in the default 28-digit context are invalid.
    try:
        cents = value.quantize(_CENT)
    except InvalidOperation:
        return None
    if cents != value:
        return None
    return cents


def validate_email(raw: object) -> bool:
    if not isinstance(raw, str):
        return False
    email = raw.strip()
    if not email:
        return False
    return EMAIL_RE.match(email) is not None


def can_submit(amount: object, email: object) -> bool:
    """Single gate enabling the submit action."""

    return validate_amount(amount) is not None and validate_email(email)


class AmountSelection:
    """Amount picker state: a preset OR custom text, never both.

    Starts in preset mode with nothing selected (no amount yet).
    """

    def __init__(self, presets: tuple[Decimal, ...] = PRESET_AMOUNTS) -> None:
        self.presets = presets
        self._preset: Decimal | None = None
        self._custom_text = ""
        self._custom_mode = False

    @property
    def is_custom(self) -> bool:
        return self._custom_mode

    @property
    def preset(self) -> Decimal | None:
        return self._preset

    @property
    def custom_text(self) -> str:
        return self._custom_text

    def select_preset(self, value: object) -> None:
        amount = validate_amount(value)
        if amount is None or amount not in self.presets:
            raise ValueError(f"{value!r} is not one of the preset amounts")
        self._preset = amount
        self._custom_text = ""
        self._custom_mode = False

    def switch_to_custom(self) -> None:
        self._preset = None
        self._custom_mode = True

    def enter_custom(self, text: str) -> None:
        self.switch_to_custom()
        self._custom_text = text

    @property
    def amount(self) -> Decimal | None:
        if self._custom_mode:
            return validate_amount(self._custom_text)
        return self._preset
