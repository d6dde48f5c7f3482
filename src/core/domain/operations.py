"""Operations and HTTP methods known to the runner.

Kept in the domain layer so the CLI, the request catalog and the runner
share one source of truth for names and labels.
"""

from __future__ import annotations

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verbs used against the API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"


class Operation(str, Enum):
    """One value per fire-and-forget use case."""

    REGISTER = "register"
    ACTIVATE = "activate"
    PASSWORD_RESET_REQUEST = "password-reset-request"
    PASSWORD_RESET = "password-reset"
    AUTHENTICATE = "authenticate"
    HEALTHCHECK = "healthcheck"

    def label(self) -> str:
        """Human readable label for panels and logging."""

        return _LABELS[self]


_LABELS: dict[Operation, str] = {
    Operation.REGISTER: "Register user",
    Operation.ACTIVATE: "Activate account",
    Operation.PASSWORD_RESET_REQUEST: "Request password reset",
    Operation.PASSWORD_RESET: "Perform password reset",
    Operation.AUTHENTICATE: "Request authentication token",
    Operation.HEALTHCHECK: "Healthcheck",
}
