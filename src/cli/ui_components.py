"""CLI UI components (Rich).

Keeps command logic apart from visual details so tables/panels can be
reused across commands.
"""

from __future__ import annotations

from decimal import Decimal

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Donation, Organization, Outcome, RemoteRejection, Success


def format_usd(amount: Decimal | float) -> str:
    return f"${Decimal(str(amount)):,.2f}"


def print_banner(console: Console) -> None:
    """Welcome banner. Skipped in non-interactive modes (JSON output)."""

    title = Text("GiveOne", style="bold cyan")
    subtitle = Text("Donate • Follow causes • Share", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_organizations_table(organizations: tuple[Organization, ...] | list[Organization]) -> Table:
    table = Table(title="Organizations")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Category", style="magenta")
    table.add_column("Location", style="dim")
    table.add_column("Raised", justify="right", style="green")
    table.add_column("Verified", justify="center")
    for org in organizations:
        location = ", ".join(part for part in (org.city, org.country) if part)
        table.add_row(
            org.id,
            org.name,
            org.category,
            location,
            format_usd(org.total_received_usd),
            "✓" if org.is_verified else "",
        )
    return table


def build_organization_panel(org: Organization, recent: tuple[Donation, ...] = ()) -> Panel:
    """Organization profile: mission, stats and recent supporters."""

    body = Text()
    if org.tagline:
        body.append(org.tagline + "\n\n", style="italic")
    if org.description:
        body.append(org.description.strip() + "\n\n")
    body.append(f"Raised: {format_usd(org.total_received_usd)}", style="green")
    body.append(f"   Supporters: {org.supporters_count:,}\n")
    if org.website:
        body.append(f"{org.website}\n", style="dim")
    if recent:
        body.append("\nRecent supporters:\n", style="bold")
        for donation in recent:
            body.append(f"- {donation.donor_handle} gave {format_usd(donation.amount_usd)}\n")

    title = Text(org.name, style="bold cyan")
    if org.is_verified:
        title.append(" ✓", style="green")
    return Panel(body, title=title, subtitle=org.category, border_style="cyan")


def build_feed_table(
    donations: tuple[Donation, ...],
    organizations: dict[str, Organization],
    liked: set[str] | None = None,
) -> Table:
    liked = liked or set()
    table = Table(title="Recent activity")
    table.add_column("When", style="dim", no_wrap=True)
    table.add_column("Donor", style="cyan")
    table.add_column("Organization", style="white")
    table.add_column("Amount", justify="right", style="green")
    table.add_column("Message")
    table.add_column("♥", justify="center", style="red")
    for donation in donations:
        org = organizations.get(donation.organization_id)
        message = f"{donation.emoji} {donation.message}" if donation.emoji else donation.message
        table.add_row(
            donation.created_at.strftime("%Y-%m-%d %H:%M"),
            donation.donor_handle,
            org.name if org else donation.organization_id,
            format_usd(donation.amount_usd),
            message,
            "♥" if donation.id in liked else "",
        )
    return table


def build_amount_menu(presets: tuple[Decimal, ...]) -> Text:
    text = Text("Quick amounts: ", style="bold")
    text.append("  ".join(format_usd(value) for value in presets))
    text.append("  or type any amount (c for custom)", style="yellow")
    return text


def build_outcome_panel(outcome: Outcome, *, organization: Organization | None = None) -> Panel:
    """Success/error panel for a submission outcome."""

    if isinstance(outcome, Success):
        body = Text(outcome.display_message, style="bold")
        if organization is not None:
            body.append(f"\nThank you for supporting {organization.name}.")
        if outcome.response.donation_id:
            body.append(f"\nDonation ID: {outcome.response.donation_id}", style="dim")
        return Panel(body, title="Donation received", border_style="green")

    body = Text(f"Error processing donation: {outcome.display_message}")
    if isinstance(outcome, RemoteRejection) and outcome.status_code is not None:
        body.append(f"\nHTTP status: {outcome.status_code}", style="dim")
    body.append("\nYou can correct your details and try again.", style="dim")
    return Panel(body, title="Donation failed", border_style="red")
