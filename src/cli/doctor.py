"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, ensure_http_url, get_user_env_file, write_user_env_vars
from core.exceptions import ConfigurationError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run(
    offline: bool = typer.Option(False, "--offline", help="Skip the connectivity check."),
) -> None:
    """Show the effective configuration and check the webhook host is reachable."""

    settings = AppSettings()

    table = Table(title="GiveOne Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    try:
        table.add_row("Donation URL", "OK", settings.resolved_donation_url())
    except ConfigurationError as exc:
        table.add_row("Donation URL", "FAIL", exc.message)
    if settings.api_key:
        table.add_row("API key", "OK", f"Sent as {settings.api_key_header}")
    else:
        table.add_row("API key", "OPTIONAL", "No key set -> unauthenticated webhook calls")
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "MISSING", str(get_user_env_file()))

    if not offline:
        # Best-effort: any HTTP status means the host answered.
        ok_http, detail_http = asyncio.run(_check_http(settings.webhook_base_url, settings))
        table.add_row("Webhook host", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="setup")
def setup() -> None:
    """Interactive webhook setup (stored in the user config .env)."""

    settings = AppSettings()

    base_url = typer.prompt("Webhook base URL", default=settings.webhook_base_url, show_default=True).strip()
    path = typer.prompt(
        "Donation webhook path",
        default=settings.donation_webhook_path,
        show_default=True,
    ).strip()
    api_key = typer.prompt("API key (empty for none)", default="", hide_input=True, show_default=False).strip()

    try:
        ensure_http_url(base_url, setting="base URL")
    except ConfigurationError as exc:
        raise typer.BadParameter(exc.message) from exc
    if not path:
        raise typer.BadParameter("webhook path is required")

    values = {
        "GIVEONE_WEBHOOK_BASE_URL": base_url,
        "GIVEONE_DONATION_WEBHOOK_PATH": path,
    }
    if api_key:
        values["GIVEONE_API_KEY"] = api_key

    env_path = write_user_env_vars(values)
    _console.print(f"[green]Saved webhook config to:[/green] {env_path}")
