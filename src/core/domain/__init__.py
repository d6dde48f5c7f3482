"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2 + enums).
- El dominio no conoce HTTP, CLI, ni terminal: solo conceptos del problema.
"""
