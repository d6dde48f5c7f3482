"""
Tests for the typer application (src/cli/main.py and src/cli/doctor.py).

The network is replaced by patching the client factory used by the runner
and by doctor with one that mounts an httpx.MockTransport.
"""

import json

import httpx
import pytest
from typer.testing import CliRunner

from cli.main import app

cli_runner = CliRunner()


def _patch_client_factory(monkeypatch, target, handler):
    transport = httpx.MockTransport(handler)

    def fake_factory(settings, **_kwargs):
        return httpx.AsyncClient(base_url=settings.api_base_url, transport=transport)

    monkeypatch.setattr(target, fake_factory)


@pytest.fixture
def api(monkeypatch):
    """Mock API: records requests and answers with a short text body."""
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, text=f"handled {request.method} {request.url.path}")

    _patch_client_factory(monkeypatch, "core.services.request_runner.build_async_client", handler)
    return seen


BASE_ARGS = ["--no-delay", "--display", "print", "--no-banner"]


class TestRequestCommands:
    """One command per operation."""

    @pytest.mark.parametrize(
        "command,method,path",
        [
            ("register", "POST", "/api/v1/register/user"),
            ("activate", "PUT", "/api/v1/users/activated"),
            ("reset-request", "POST", "/api/v1/tokens/password-reset"),
            ("reset", "PUT", "/api/v1/tokens/password-reset"),
            ("login", "POST", "/api/v1/tokens/authentication"),
            ("health", "GET", "/api/v1/healthcheck"),
        ],
    )
    def test_command_issues_request_and_prints_text(self, api, command, method, path):
        result = cli_runner.invoke(app, [*BASE_ARGS, command])

        assert result.exit_code == 0, result.output
        assert len(api) == 1
        assert api[0].method == method
        assert api[0].url.path == path
        assert f"handled {method} {path}" in result.output

    def test_base_url_option(self, api):
        result = cli_runner.invoke(app, [*BASE_ARGS, "--base-url", "http://other.test:9999", "activate"])

        assert result.exit_code == 0, result.output
        assert api[0].url.host == "other.test"
        assert api[0].url.port == 9999

    def test_repeat_fires_overlapping_calls(self, api):
        """--repeat should issue independent requests, none deduplicated."""
        result = cli_runner.invoke(app, [*BASE_ARGS, "register", "--repeat", "3"])

        assert result.exit_code == 0, result.output
        assert len(api) == 3
        assert all(json.loads(r.content)["username"] == "abner" for r in api)

    def test_live_display(self, api):
        result = cli_runner.invoke(app, ["--no-delay", "--no-banner", "reset"])

        assert result.exit_code == 0, result.output
        assert "handled PUT /api/v1/tokens/password-reset" in result.output

    def test_banner(self, api):
        result = cli_runner.invoke(app, ["--no-delay", "--display", "print", "health"])

        assert result.exit_code == 0, result.output
        assert "READCLUB" in result.output

    def test_transport_failure_printed(self, monkeypatch):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        _patch_client_factory(monkeypatch, "core.services.request_runner.build_async_client", handler)
        result = cli_runner.invoke(app, [*BASE_ARGS, "activate"])

        assert result.exit_code == 0, result.output
        assert "ConnectError: connection refused" in result.output

    def test_unusable_base_url_rejected(self, api):
        """A malformed --base-url should fail before any request is sent."""
        result = cli_runner.invoke(app, [*BASE_ARGS, "--base-url", "http://exa mple.com:99999", "register"])

        assert result.exit_code != 0
        assert api == []

    def test_negative_delay_rejected(self, api):
        result = cli_runner.invoke(app, ["--delay", "-1", "register"])

        assert result.exit_code != 0
        assert api == []


class TestDoctor:
    """Tests for `doctor run`."""

    def test_healthy_api(self, monkeypatch):
        def handler(request):
            assert request.url.path == "/api/v1/healthcheck"
            return httpx.Response(200, json={"status": "available"})

        _patch_client_factory(monkeypatch, "cli.doctor.build_async_client", handler)
        result = cli_runner.invoke(app, ["doctor", "run"])

        assert result.exit_code == 0, result.output
        assert "HTTP 200" in result.output
        assert "api_base_url" in result.output

    def test_unreachable_api(self, monkeypatch):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        _patch_client_factory(monkeypatch, "cli.doctor.build_async_client", handler)
        result = cli_runner.invoke(app, ["--base-url", "http://down.test:1", "doctor", "run"])

        assert result.exit_code == 1
        assert "FAIL" in result.output
        assert "http://down.test:1" in result.output
