"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from cli.ui_components import build_settings_table
from core.config import AppSettings, get_user_env_file
from core.services.request_catalog import HEALTHCHECK_PATH

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

# The runner never times out; the probe does, so doctor always returns.
_PROBE_TIMEOUT_SECONDS = 5.0


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(HEALTHCHECK_PATH, timeout=_PROBE_TIMEOUT_SECONDS)
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__
    return response.is_success, f"HTTP {response.status_code}"


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics against the configured API."""

    # Global options (--base-url, --delay) live on the parent context.
    state = ctx.obj
    settings = getattr(state, "settings", None) or AppSettings()

    _console.print(build_settings_table(settings))

    table = Table(title="READCLUB Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    if settings.display_delay_seconds > 0:
        table.add_row(
            "Display delay",
            "WARN",
            f"{settings.display_delay_seconds:g}s before each result (use --no-delay to skip)",
        )
    else:
        table.add_row("Display delay", "OK", "disabled")

    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("API healthcheck", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            f"\n[yellow]Note:[/yellow] Is the API running at {settings.api_base_url}? "
            "Set READCLUB_API_BASE_URL or pass --base-url."
        )
        raise typer.Exit(code=1)
