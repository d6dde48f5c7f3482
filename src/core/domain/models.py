"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y documentación autocontenida (Field) sin acoplar el
  Core a httpx.
- `RequestSpec` es inmutable: se construye en cada llamada y no se comparte.

Nota:
- Estos modelos describen *qué* se envía, no *cómo* se envía.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.operations import HttpMethod, Operation


class RequestSpec(BaseModel):
    """Descripción literal de una llamada a la API.

    Por qué existe:
    - Separa el armado del payload (catálogo) de la ejecución (runner).
    - Permite testear método/path/body sin red.
    """

    model_config = ConfigDict(frozen=True)

    operation: Operation = Field(
        ...,
        description="Caso de uso al que pertenece la petición.",
    )
    method: HttpMethod = Field(
        ...,
        description="Verbo HTTP (POST/PUT; GET solo para healthcheck).",
    )
    path: str = Field(
        ...,
        min_length=1,
        pattern=r"^/",
        description="Path absoluto del endpoint (p.ej. '/api/v1/register/user').",
    )
    body: dict[str, str] = Field(
        default_factory=dict,
        description="Cuerpo JSON (clave -> valor literal). Vacío = sin cuerpo.",
    )

    def url(self, base_url: str) -> str:
        return base_url.rstrip("/") + self.path

    @property
    def has_body(self) -> bool:
        return self.method is not HttpMethod.GET
