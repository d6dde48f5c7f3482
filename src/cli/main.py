"""CLI principal (Typer).

Por qué Typer:
- Un comando por caso de uso, sin parsing manual.
- Opciones globales (base URL, delay, display) en un único callback.

La CLI no contiene lógica de red: arma `AppSettings`, elige el display y
delega en `RequestRunner`.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.display import ConsoleDisplay, LiveDisplay
from cli import doctor
from cli.ui_components import print_banner
from core.config import AppSettings
from core.domain.operations import Operation
from core.interfaces.display import DisplayTarget
from core.services.request_runner import RequestRunner

app = typer.Typer(
    no_args_is_help=True,
    help="Fire the Reading Community account requests and show the raw responses.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


class DisplayMode(str, Enum):
    LIVE = "live"
    PRINT = "print"


@dataclass
class CliState:
    settings: AppSettings
    display_mode: DisplayMode = DisplayMode.LIVE
    banner: bool = True


_SUBMITTERS: dict[Operation, Callable[[RequestRunner], asyncio.Task[str]]] = {
    Operation.REGISTER: RequestRunner.submit_registration,
    Operation.ACTIVATE: RequestRunner.submit_activation,
    Operation.PASSWORD_RESET_REQUEST: RequestRunner.submit_password_reset_request,
    Operation.PASSWORD_RESET: RequestRunner.submit_password_reset,
    Operation.AUTHENTICATE: RequestRunner.submit_authentication,
    Operation.HEALTHCHECK: RequestRunner.submit_healthcheck,
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@contextmanager
def _open_display(mode: DisplayMode) -> Iterator[DisplayTarget]:
    if mode is DisplayMode.LIVE:
        with LiveDisplay(_console) as display:
            yield display
    else:
        yield ConsoleDisplay(_console)


async def _run_operation(state: CliState, operation: Operation, repeat: int) -> None:
    with _open_display(state.display_mode) as display:
        runner = RequestRunner(display, state.settings)
        submit = _SUBMITTERS[operation]
        for _ in range(repeat):
            submit(runner)
        await runner.drain()


def _fire(ctx: typer.Context, operation: Operation, repeat: int) -> None:
    state: CliState = ctx.obj
    if state.banner:
        print_banner(_console)
    asyncio.run(_run_operation(state, operation, repeat))


_REPEAT_HELP = "Fire N overlapping invocations; the last result to land wins."


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(None, "--base-url", help="API base URL (default http://localhost:4000)."),
    delay: Optional[float] = typer.Option(None, "--delay", min=0, help="Seconds to wait before showing a result."),
    no_delay: bool = typer.Option(False, "--no-delay", help="Show results as soon as the request settles."),
    display: DisplayMode = typer.Option(DisplayMode.LIVE, "--display", help="live: overwrite one region; print: one panel per result."),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the welcome banner."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests and settle events."),
) -> None:
    _configure_logging(verbose)

    overrides: dict[str, object] = {}
    if base_url:
        overrides["api_base_url"] = base_url
    if no_delay:
        overrides["display_delay_seconds"] = 0.0
    elif delay is not None:
        overrides["display_delay_seconds"] = delay

    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    ctx.obj = CliState(settings=settings, display_mode=display, banner=banner)


@app.command()
def register(ctx: typer.Context, repeat: int = typer.Option(1, "--repeat", "-n", min=1, help=_REPEAT_HELP)) -> None:
    """POST /api/v1/register/user with the literal username/email/password."""

    _fire(ctx, Operation.REGISTER, repeat)


@app.command()
def activate(ctx: typer.Context, repeat: int = typer.Option(1, "--repeat", "-n", min=1, help=_REPEAT_HELP)) -> None:
    """PUT /api/v1/users/activated with the literal activation token."""

    _fire(ctx, Operation.ACTIVATE, repeat)


@app.command(name="reset-request")
def reset_request(ctx: typer.Context, repeat: int = typer.Option(1, "--repeat", "-n", min=1, help=_REPEAT_HELP)) -> None:
    """POST /api/v1/tokens/password-reset with the literal email."""

    _fire(ctx, Operation.PASSWORD_RESET_REQUEST, repeat)


@app.command()
def reset(ctx: typer.Context, repeat: int = typer.Option(1, "--repeat", "-n", min=1, help=_REPEAT_HELP)) -> None:
    """PUT /api/v1/tokens/password-reset with the literal token and new password."""

    _fire(ctx, Operation.PASSWORD_RESET, repeat)


@app.command()
def login(ctx: typer.Context, repeat: int = typer.Option(1, "--repeat", "-n", min=1, help=_REPEAT_HELP)) -> None:
    """POST /api/v1/tokens/authentication (the token is shown, never stored)."""

    _fire(ctx, Operation.AUTHENTICATE, repeat)


@app.command()
def health(ctx: typer.Context, repeat: int = typer.Option(1, "--repeat", "-n", min=1, help=_REPEAT_HELP)) -> None:
    """GET /api/v1/healthcheck."""

    _fire(ctx, Operation.HEALTHCHECK, repeat)


def run() -> None:
    app()
