"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos.
    """

    title = Text("READCLUB", style="bold cyan")
    subtitle = Text("Reading Community API • account flows", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_settings_table(settings: AppSettings) -> Table:
    """Tabla con la configuración efectiva (sin mostrar passwords)."""

    table = Table(title="Effective configuration")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    timeout = settings.http_timeout_seconds
    table.add_row("api_base_url", settings.api_base_url)
    table.add_row("display_delay_seconds", f"{settings.display_delay_seconds:g}")
    table.add_row("http_timeout_seconds", "none" if timeout is None else f"{timeout:g}")
    table.add_row("register_username", settings.register_username)
    table.add_row("register_email", settings.register_email)
    table.add_row("reset_email", settings.reset_email)
    return table
