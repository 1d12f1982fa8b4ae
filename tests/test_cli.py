from __future__ import annotations

import json

import httpx
import pytest
from typer.testing import CliRunner

from adapters import http_client
from cli.main import app

runner = CliRunner()

PAYLOAD = {
    "logs-2024": {"aliases": {"logs-current": {}, "logs": {}}},
    "logs-2023": {"aliases": {"logs": {}}},
    "scratch": {},
}


@pytest.fixture
def requests_seen(monkeypatch) -> list[httpx.Request]:
    seen: list[httpx.Request] = []
    original = http_client.build_client

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path.startswith("/legacy"):
            return httpx.Response(404, json={"error": "IndexMissingException[[foo] missing]", "status": 404})
        if request.url.path.startswith("/odd"):
            return httpx.Response(200, json={"idx[/x]": {"aliases": {"[bold]a[/bold]": {}}}})
        if request.url.path.startswith("/missing"):
            return httpx.Response(404, json={"error": {"type": "index_not_found_exception", "reason": "no such index"}})
        return httpx.Response(200, json=PAYLOAD)

    def fake_build_client(settings=None, **kwargs):
        return original(settings, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(http_client, "build_client", fake_build_client)
    return seen


def test_list_prints_table(requests_seen) -> None:
    result = runner.invoke(app, ["list", "--base-url", "http://cluster.test:9200"])

    assert result.exit_code == 0, result.output
    assert "logs-2024" in result.stdout
    assert "logs-current" in result.stdout
    assert "scratch" in result.stdout
    assert requests_seen[0].url == httpx.URL("http://cluster.test:9200/_aliases")


def test_list_json_with_indices_and_pretty(requests_seen) -> None:
    result = runner.invoke(app, ["list", "-i", "logs-2024", "-i", "logs-2023", "--pretty", "--json"])

    assert result.exit_code == 0, result.output
    assert requests_seen[0].url.raw_path == b"/logs-2024,logs-2023/_aliases?pretty=true"
    data = json.loads(result.stdout)
    assert data["indices"]["logs-2023"] == ["logs"]
    assert data["indices"]["scratch"] == []
    assert data["anomalies"] == 0


def test_list_writes_output_file(requests_seen, tmp_path) -> None:
    target = tmp_path / "out" / "aliases.json"

    result = runner.invoke(app, ["list", "--output", str(target)])

    assert result.exit_code == 0, result.output
    saved = json.loads(target.read_text(encoding="utf-8"))
    assert saved["indices"]["logs-2024"] == ["logs-current", "logs"]


def test_lookup_prints_matching_indices(requests_seen) -> None:
    result = runner.invoke(app, ["lookup", "logs"])

    assert result.exit_code == 0, result.output
    assert "logs-2024" in result.stdout
    assert "logs-2023" in result.stdout
    assert "scratch" not in result.stdout


def test_lookup_without_match_exits_1(requests_seen) -> None:
    result = runner.invoke(app, ["lookup", "nope"])

    assert result.exit_code == 1
    assert "No index has alias" in result.output


def test_transport_error_exits_1(requests_seen) -> None:
    result = runner.invoke(app, ["list", "-i", "missing"])

    assert result.exit_code == 1
    assert "index_not_found_exception" in result.output


def test_engine_error_text_is_printed_verbatim(requests_seen) -> None:
    result = runner.invoke(app, ["list", "-i", "legacy"])

    assert result.exit_code == 1
    assert "IndexMissingException[[foo] missing]" in result.output


def test_bracketed_names_are_printed_verbatim(requests_seen) -> None:
    result = runner.invoke(app, ["list", "-i", "odd"])

    assert result.exit_code == 0, result.output
    assert "idx[/x]" in result.stdout
    assert "[bold]a[/bold]" in result.stdout


def test_lookup_bracketed_alias(requests_seen) -> None:
    result = runner.invoke(app, ["lookup", "[bold]a[/bold]", "-i", "odd"])

    assert result.exit_code == 0, result.output
    assert "idx[/x]" in result.stdout
    assert "[bold]a[/bold]" in result.stdout
