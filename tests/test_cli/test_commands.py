"""Tests for the get/post CLI commands."""

from __future__ import annotations

import json

import httpx
import pytest
from typer.testing import CliRunner

from adapters import http_client
from cli.main import app
from core import __version__

runner = CliRunner()


@pytest.fixture
def use_transport(monkeypatch: pytest.MonkeyPatch, mock_transport):
    """Route the CLI's client through a mock transport built from `handler`."""

    def _install(handler) -> None:
        transport = mock_transport(handler)

        def _build(settings=None, **kwargs):
            return http_client.build_async_client(settings, transport=transport, **kwargs)

        monkeypatch.setattr("cli.main.build_async_client", _build)

    return _install


class TestVersion:
    def test_version_option(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"httpeek {__version__}" in result.output


class TestGet:
    """Tests for the get command."""

    def test_prints_status_headers_and_json(self, use_transport, recorded_requests) -> None:
        use_transport(lambda request: httpx.Response(200, json={"x": 1}))

        result = runner.invoke(app, ["get", "http://example.com/data"])

        assert result.exit_code == 0, result.output
        lines = result.stdout.splitlines()
        assert lines[0] == "HTTP/1.1 200 OK"
        assert "content-type: application/json" in lines
        assert '  "x": 1' in lines
        assert recorded_requests[0].method == "GET"

    def test_plain_text_verbatim(self, use_transport) -> None:
        use_transport(lambda request: httpx.Response(200, text="hello"))

        result = runner.invoke(app, ["get", "--no-color", "http://example.com/"])

        assert result.exit_code == 0
        assert result.stdout.rstrip("\n").endswith("hello")

    def test_invalid_url_is_usage_error(self, use_transport, recorded_requests) -> None:
        use_transport(lambda request: httpx.Response(200))

        result = runner.invoke(app, ["get", "not-a-url"])

        assert result.exit_code == 2
        assert "not-a-url" in result.output
        assert recorded_requests == []

    def test_unreachable_host_exits_non_zero(self, use_transport, unreachable_handler) -> None:
        use_transport(unreachable_handler)

        result = runner.invoke(app, ["get", "http://no-such-host.invalid/"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Name or service not known" in result.output
        assert "HTTP/1.1" not in result.output

    def test_invalid_json_falls_back(self, use_transport) -> None:
        use_transport(
            lambda request: httpx.Response(200, headers={"Content-Type": "application/json"}, content=b"{broken")
        )

        result = runner.invoke(app, ["get", "http://example.com/"])

        assert result.exit_code == 0
        assert "{broken" in result.stdout

    def test_invalid_json_strict_fails(self, use_transport) -> None:
        use_transport(
            lambda request: httpx.Response(200, headers={"Content-Type": "application/json"}, content=b"{broken")
        )

        result = runner.invoke(app, ["get", "--strict-json", "http://example.com/"])

        assert result.exit_code == 1
        assert "not valid JSON" in result.output
        assert "HTTP/1.1 200" not in result.output

    def test_deeply_nested_json_reports_error(self, use_transport) -> None:
        """Test a body too deep to decode ends in an Error line, not a traceback."""
        body = b"[" * 100_000 + b"]" * 100_000
        use_transport(lambda request: httpx.Response(200, headers={"Content-Type": "application/json"}, content=body))

        result = runner.invoke(app, ["get", "--strict-json", "http://example.com/"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert not isinstance(result.exception, RecursionError)

    def test_tab_separated_body_written_unchanged(self, use_transport) -> None:
        body = b"id\tname\r\n1\tada\r\n"
        use_transport(
            lambda request: httpx.Response(200, headers={"Content-Type": "text/tab-separated-values"}, content=body)
        )

        result = runner.invoke(app, ["get", "http://example.com/report.tsv"])

        assert result.exit_code == 0
        assert body in result.stdout_bytes


class TestPost:
    """Tests for the post command."""

    def test_sends_pairs_as_json(self, use_transport, recorded_requests) -> None:
        use_transport(lambda request: httpx.Response(201, json=json.loads(request.content)))

        result = runner.invoke(app, ["post", "http://example.com/items", "a=1", "a=2", "b=x=y"])

        assert result.exit_code == 0, result.output
        request = recorded_requests[0]
        assert request.method == "POST"
        assert json.loads(request.content) == {"a": "2", "b": "x=y"}
        assert request.headers["x-powered-by"] == "Python"
        assert request.headers["user-agent"] == f"httpeek/{__version__}"
        assert result.stdout.splitlines()[0] == "HTTP/1.1 201 Created"

    def test_without_pairs_sends_empty_object(self, use_transport, recorded_requests) -> None:
        use_transport(lambda request: httpx.Response(200))

        result = runner.invoke(app, ["post", "http://example.com/items"])

        assert result.exit_code == 0, result.output
        assert json.loads(recorded_requests[0].content) == {}

    def test_bad_pair_is_usage_error(self, use_transport, recorded_requests) -> None:
        use_transport(lambda request: httpx.Response(200))

        result = runner.invoke(app, ["post", "http://example.com/items", "a=1", "oops"])

        assert result.exit_code == 2
        assert "oops" in result.output
        assert recorded_requests == []

    def test_user_agent_from_env(self, use_transport, recorded_requests, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HTTPEEK_USER_AGENT", "env-agent/9")
        use_transport(lambda request: httpx.Response(200))

        result = runner.invoke(app, ["post", "http://example.com/items", "k=v"])

        assert result.exit_code == 0
        assert recorded_requests[0].headers["user-agent"] == "env-agent/9"
