"""Catálogo de peticiones literales.

Cada builder arma un `RequestSpec` nuevo a partir de los valores por defecto
de `AppSettings`. No hay validación de input: los valores se envían tal cual.
"""

from __future__ import annotations

from typing import Callable

from core.config import AppSettings
from core.domain.models import RequestSpec
from core.domain.operations import HttpMethod, Operation

REGISTER_PATH = "/api/v1/register/user"
ACTIVATE_PATH = "/api/v1/users/activated"
PASSWORD_RESET_PATH = "/api/v1/tokens/password-reset"
AUTHENTICATION_PATH = "/api/v1/tokens/authentication"
HEALTHCHECK_PATH = "/api/v1/healthcheck"


def registration_spec(settings: AppSettings) -> RequestSpec:
    return RequestSpec(
        operation=Operation.REGISTER,
        method=HttpMethod.POST,
        path=REGISTER_PATH,
        body={
            "username": settings.register_username,
            "email": settings.register_email,
            "password": settings.register_password,
        },
    )


def activation_spec(settings: AppSettings) -> RequestSpec:
    return RequestSpec(
        operation=Operation.ACTIVATE,
        method=HttpMethod.PUT,
        path=ACTIVATE_PATH,
        body={"token": settings.activation_token},
    )


def password_reset_request_spec(settings: AppSettings) -> RequestSpec:
    return RequestSpec(
        operation=Operation.PASSWORD_RESET_REQUEST,
        method=HttpMethod.POST,
        path=PASSWORD_RESET_PATH,
        body={"email": settings.reset_email},
    )


def password_reset_spec(settings: AppSettings) -> RequestSpec:
    # La API espera `newPassword` en camelCase.
    return RequestSpec(
        operation=Operation.PASSWORD_RESET,
        method=HttpMethod.PUT,
        path=PASSWORD_RESET_PATH,
        body={
            "token": settings.reset_token,
            "newPassword": settings.new_password,
        },
    )


def authentication_spec(settings: AppSettings) -> RequestSpec:
    return RequestSpec(
        operation=Operation.AUTHENTICATE,
        method=HttpMethod.POST,
        path=AUTHENTICATION_PATH,
        body={
            "email": settings.register_email,
            "password": settings.register_password,
        },
    )


def healthcheck_spec(settings: AppSettings) -> RequestSpec:
    return RequestSpec(
        operation=Operation.HEALTHCHECK,
        method=HttpMethod.GET,
        path=HEALTHCHECK_PATH,
    )


_BUILDERS: dict[Operation, Callable[[AppSettings], RequestSpec]] = {
    Operation.REGISTER: registration_spec,
    Operation.ACTIVATE: activation_spec,
    Operation.PASSWORD_RESET_REQUEST: password_reset_request_spec,
    Operation.PASSWORD_RESET: password_reset_spec,
    Operation.AUTHENTICATE: authentication_spec,
    Operation.HEALTHCHECK: healthcheck_spec,
}


def build_spec(operation: Operation, settings: AppSettings | None = None) -> RequestSpec:
    """Devuelve el `RequestSpec` literal de `operation`."""

    settings = settings or AppSettings()
    return _BUILDERS[operation](settings)
