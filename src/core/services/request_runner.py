"""Fire-and-forget request runner.

Every operation follows the same two-step flow:

1. send the literal request and wait for it to settle (response or
   transport failure);
2. wait a fixed delay, then overwrite the display with the response text
   or the stringified error.

There is no status-code inspection, no retry, no cancellation and no
deduplication: two overlapping calls schedule two independent writes and
whichever lands last wins. Only the display is delayed, never the request.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

import httpx

from adapters.http_client import JSON_HEADERS, build_async_client
from core.config import AppSettings
from core.domain.models import RequestSpec
from core.interfaces.display import DisplayTarget
from core.services.request_catalog import (
    activation_spec,
    authentication_spec,
    healthcheck_spec,
    password_reset_request_spec,
    password_reset_spec,
    registration_spec,
)

logger = logging.getLogger(__name__)

SleepFn = Callable[[float], Awaitable[object]]


def describe_error(exc: BaseException) -> str:
    """String form shown to the viewer for a transport-level failure."""

    message = str(exc) or repr(exc)
    return f"{exc.__class__.__name__}: {message}"


class RequestRunner:
    """Runs the account use cases against the API and renders the raw result.

    The `submit_*` methods must be called while an event loop is running.
    They return the scheduled task; callers are free to ignore it.
    """

    def __init__(
        self,
        display: DisplayTarget,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        self._display = display
        self._settings = settings or AppSettings()
        self._transport = transport
        self._sleep = sleep
        # Strong refs so pending tasks are not garbage collected mid-flight.
        self._pending: set[asyncio.Task[str]] = set()

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def pending(self) -> int:
        return len(self._pending)

    def submit_registration(self) -> asyncio.Task[str]:
        return self.dispatch(registration_spec(self._settings))

    def submit_activation(self) -> asyncio.Task[str]:
        return self.dispatch(activation_spec(self._settings))

    def submit_password_reset_request(self) -> asyncio.Task[str]:
        return self.dispatch(password_reset_request_spec(self._settings))

    def submit_password_reset(self) -> asyncio.Task[str]:
        return self.dispatch(password_reset_spec(self._settings))

    def submit_authentication(self) -> asyncio.Task[str]:
        return self.dispatch(authentication_spec(self._settings))

    def submit_healthcheck(self) -> asyncio.Task[str]:
        return self.dispatch(healthcheck_spec(self._settings))

    def dispatch(self, spec: RequestSpec) -> asyncio.Task[str]:
        """Schedule `spec` and return its task without awaiting it."""

        task = asyncio.create_task(self._execute(spec), name=f"readclub:{spec.operation.value}")
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        logger.info("Dispatched %s %s", spec.method.value, spec.url(self._settings.api_base_url))
        return task

    async def drain(self) -> None:
        """Wait for every pending call, including ones scheduled meanwhile.

        A failing call does not stop the others from writing; the first
        failure is re-raised once nothing is pending.
        """

        first_error: BaseException | None = None
        while self._pending:
            results = await asyncio.gather(*list(self._pending), return_exceptions=True)
            for result in results:
                if isinstance(result, BaseException) and first_error is None:
                    first_error = result
        if first_error is not None:
            raise first_error

    async def _execute(self, spec: RequestSpec) -> str:
        extra_headers = JSON_HEADERS if spec.has_body else None
        try:
            async with build_async_client(
                self._settings,
                extra_headers=extra_headers,
                transport=self._transport,
            ) as client:
                if spec.has_body:
                    response = await client.request(spec.method.value, spec.path, json=spec.body)
                else:
                    response = await client.request(spec.method.value, spec.path)
        except httpx.RequestError as exc:
            text = describe_error(exc)
            logger.warning("%s %s failed: %s", spec.method.value, spec.path, text)
        else:
            text = response.text
            logger.info(
                "%s %s settled with HTTP %s",
                spec.method.value,
                spec.path,
                response.status_code,
            )

        await self._sleep(self._settings.display_delay_seconds)
        self._display.write(text, operation=spec.operation)
        logger.debug("Displayed result of %s (%d chars)", spec.operation.value, len(text))
        return text
