"""GiveOne CLI (Typer + Rich).

Commands:
- `orgs`: list organizations, or show one profile with `--id`.
- `feed`: recent public donations; `--like` marks entries.
- `donate`: amount/email dialog and webhook submission, then an optional
  workflow notification.
- `doctor`: diagnostics and configuration.
"""

from __future__ import annotations

import asyncio
import json
from decimal import Decimal

import typer
from rich.console import Console

from adapters.donation_client import DonationSubmitter
from adapters.workflow_service import trigger_donation_workflow
from cli.doctor import app as doctor_app
from cli.ui_components import (
    build_amount_menu,
    build_feed_table,
    build_organization_panel,
    build_organizations_table,
    build_outcome_panel,
    format_usd,
    print_banner,
)
from core.config import AppSettings
from core.demo_data import DEMO_ORGANIZATIONS, find_organization
from core.domain.models import Organization, Outcome
from core.domain.validation import AmountSelection, can_submit, validate_amount, validate_email
from core.exceptions import ConfigurationError, DonationValidationError
from core.logging_setup import configure_logging
from core.services.feed import DonationFeed

app = typer.Typer(no_args_is_help=True, help="GiveOne: donate to causes from your terminal.")
app.add_typer(doctor_app, name="doctor")

_console = Console()


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override GIVEONE_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    settings = AppSettings()
    configure_logging(log_level or settings.log_level)


def _require_organization(org_id: str) -> Organization:
    org = find_organization(org_id)
    if org is None:
        known = ", ".join(o.id for o in DEMO_ORGANIZATIONS)
        raise typer.BadParameter(f"unknown organization {org_id!r} (known: {known})")
    return org


def parse_header_options(values: list[str] | None) -> dict[str, str]:
    """Parse repeated `--header 'Name: value'` options."""

    headers: dict[str, str] = {}
    for raw in values or []:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            raise typer.BadParameter(f"header must look like 'Name: value', got {raw!r}")
        headers[name.strip()] = value.strip()
    return headers


@app.command()
def orgs(
    org_id: str | None = typer.Option(None, "--id", help="Show a single organization profile."),
) -> None:
    """List organizations that can receive donations."""

    if org_id is None:
        _console.print(build_organizations_table(DEMO_ORGANIZATIONS))
        return

    org = _require_organization(org_id)
    feed = DonationFeed()
    _console.print(build_organization_panel(org, feed.for_organization(org.id)))


@app.command()
def feed(
    org_id: str | None = typer.Option(None, "--org", help="Only donations to this organization."),
    like: list[str] | None = typer.Option(None, "--like", help="Toggle the like on a donation id (repeatable)."),
) -> None:
    """Show recent public donations."""

    donation_feed = DonationFeed()
    known = {d.id for d in donation_feed.donations}
    for donation_id in like or []:
        if donation_id not in known:
            raise typer.BadParameter(f"unknown donation {donation_id!r}", param_hint="--like")
        donation_feed.toggle_like(donation_id)

    if org_id is not None:
        donations = donation_feed.for_organization(_require_organization(org_id).id)
    else:
        donations = donation_feed.donations
    by_id = {o.id: o for o in DEMO_ORGANIZATIONS}
    liked = {d.id for d in donations if donation_feed.is_liked(d.id)}
    _console.print(build_feed_table(donations, by_id, liked=liked))


def _prompt_amount() -> Decimal:
    selection = AmountSelection()
    _console.print(build_amount_menu(selection.presets))
    while True:
        choice = typer.prompt("Amount").strip()
        if choice.lower() in ("c", "custom"):
            selection.enter_custom(typer.prompt("Custom amount (USD)"))
        else:
            value = validate_amount(choice.lstrip("$"))
            if value is not None and value in selection.presets:
                selection.select_preset(value)
            else:
                selection.enter_custom(choice)

        if selection.amount is not None:
            return selection.amount
        _console.print("[red]Enter a positive amount with at most two decimals.[/red]")


def _notify_workflow(
    settings: AppSettings,
    org: Organization,
    amount: Decimal,
    email: str,
    *,
    quiet: bool,
) -> None:
    """Send the `user_donated` event when a workflow path is configured.

    A failed notification never turns a received donation into a failure.
    """

    if not settings.donation_event_webhook_path:
        return
    event = asyncio.run(
        trigger_donation_workflow(
            settings.donation_event_webhook_path,
            organization_id=org.id,
            organization_name=org.name,
            amount=amount,
            email=email,
            settings=settings,
        )
    )
    if not event.is_success and not quiet:
        _console.print(f"[yellow]Workflow notification failed: {event.display_message}[/yellow]")


def _prompt_email(default: str | None = None) -> str:
    while True:
        email = typer.prompt("Email for receipt", default=default or "").strip()
        if validate_email(email):
            return email
        _console.print("[red]Enter a valid email address.[/red]")


@app.command()
def donate(
    org_id: str = typer.Argument(..., help="Organization id (see `giveone orgs`)."),
    amount: str | None = typer.Option(None, "--amount", "-a", help="Amount in USD."),
    email: str | None = typer.Option(None, "--email", "-e", help="Receipt email."),
    url: str | None = typer.Option(None, "--url", help="Override the donation endpoint URL."),
    header: list[str] | None = typer.Option(
        None,
        "--header",
        "-H",
        help="Extra request header 'Name: value' (repeatable).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the outcome as JSON."),
) -> None:
    """Donate to an organization."""

    org = _require_organization(org_id)
    extra_headers = parse_header_options(header)
    settings = AppSettings()
    try:
        submitter = DonationSubmitter(settings, url=url)
    except ConfigurationError as exc:
        raise typer.BadParameter(exc.message, param_hint="--url" if url else None) from exc
    interactive = amount is None or email is None

    if amount is not None and validate_amount(amount) is None:
        raise typer.BadParameter("amount must be positive with at most two decimals", param_hint="--amount")
    if email is not None and not validate_email(email):
        raise typer.BadParameter("not a valid email address", param_hint="--email")

    if interactive and not as_json:
        print_banner(_console)
        _console.print(f"Donating to [bold]{org.name}[/bold] ({org.category})")

    chosen_amount = validate_amount(amount) if amount is not None else _prompt_amount()
    chosen_email = email.strip() if email is not None else _prompt_email()

    while True:
        if not can_submit(chosen_amount, chosen_email):
            raise typer.BadParameter("donation is not submittable")
        try:
            outcome: Outcome = asyncio.run(
                submitter.submit(org, chosen_amount, chosen_email, extra_headers=extra_headers)
            )
        except DonationValidationError as exc:
            raise typer.BadParameter(exc.message) from exc

        if as_json:
            typer.echo(json.dumps(outcome.model_dump(mode="json"), sort_keys=True))
        else:
            _console.print(build_outcome_panel(outcome, organization=org))

        if outcome.is_success:
            _notify_workflow(settings, org, chosen_amount, chosen_email, quiet=as_json)
            return
        if not interactive or not typer.confirm("Try again?", default=False):
            raise typer.Exit(code=1)
        chosen_email = _prompt_email(default=chosen_email)
        _console.print(f"Retrying {format_usd(chosen_amount)} to {org.name}...")


def run() -> None:
    app()
