"""Contrato de la superficie de salida.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- El runner no sabe si escribe en un buffer, en la terminal o en un Live de Rich.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.operations import Operation


@runtime_checkable
class DisplayTarget(Protocol):
    """Superficie única donde se renderiza el resultado.

    Reglas de diseño:
    - Cada `write` sobreescribe el contenido anterior (gana la última escritura).
    - Sin locking: llamadas solapadas pueden intercalarse.
    """

    def write(self, text: str, *, operation: Operation | None = None) -> None:
        """Reemplaza el contenido visible por `text`."""

        ...
