"""Superficies de salida concretas (implementan `DisplayTarget`).

- `BufferDisplay`: en memoria, guarda el último contenido y el historial.
- `ConsoleDisplay`: imprime cada escritura como un panel de Rich.
- `LiveDisplay`: región `Live` de Rich que se reemplaza en cada escritura
  (equivalente en terminal a sobreescribir el contenido de un elemento).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from core.domain.operations import Operation

logger = logging.getLogger(__name__)


def build_result_panel(text: str, *, operation: Operation | None = None) -> Panel:
    """Panel con el texto crudo de la respuesta (o del error)."""

    title = Text(operation.label() if operation else "fetch-result", style="bold cyan")
    # Text() evita que Rich interprete markup dentro de la respuesta.
    return Panel(Text(text), title=title, border_style="cyan")


class BufferDisplay:
    """Display en memoria."""

    def __init__(self) -> None:
        self.content: str = ""
        self.history: list[tuple[Operation | None, str]] = []

    def write(self, text: str, *, operation: Operation | None = None) -> None:
        self.content = text
        self.history.append((operation, text))


class ConsoleDisplay:
    """Imprime cada resultado en la consola (no borra lo anterior en pantalla)."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def write(self, text: str, *, operation: Operation | None = None) -> None:
        self._console.print(build_result_panel(text, operation=operation))


class LiveDisplay:
    """Región única que se sobreescribe.

    Uso:
        with LiveDisplay() as display:
            ...
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()
        self._live: Live | None = None

    def __enter__(self) -> "LiveDisplay":
        self._live = Live(
            build_result_panel("", operation=None),
            console=self._console,
            auto_refresh=False,
            transient=False,
        )
        self._live.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None

    def write(self, text: str, *, operation: Operation | None = None) -> None:
        panel = build_result_panel(text, operation=operation)
        if self._live is None:
            # Fuera del context manager: degradar a print simple.
            logger.debug("LiveDisplay not started, printing instead")
            self._console.print(panel)
            return
        self._live.update(panel, refresh=True)
