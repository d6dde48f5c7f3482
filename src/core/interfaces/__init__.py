"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el runner depende de abstracciones.
"""

from core.interfaces.display import DisplayTarget

__all__ = ["DisplayTarget"]
