"""Tests for the ``python -m miro`` command line."""

from __future__ import annotations

import json

import httpx
import pytest

import miro.__main__ as cli


@pytest.fixture(autouse=True)
def _settings(monkeypatch):
    monkeypatch.setattr(cli.settings, "access_token", "tok")
    monkeypatch.setattr(cli.settings, "base_url", "http://test/")
    monkeypatch.setattr(cli.settings, "api_version", "v1")
    monkeypatch.setattr(cli.settings, "user_agent", "")
    monkeypatch.setattr(cli.settings, "log_format", "text")


def _transport(status_code: int, body: dict, seen: list | None = None) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=body)

    return httpx.MockTransport(handler)


def test_board_get_prints_name(capsys):
    seen: list[httpx.Request] = []
    code = cli.main(["board", "get", "b1"], _transport=_transport(200, {"id": "b1", "name": "Proj"}, seen))
    assert code == 0
    assert capsys.readouterr().out.strip() == "Proj"
    assert seen[0].url.path == "/v1/boards/b1"
    assert seen[0].headers["Authorization"] == "Bearer tok"


def test_board_create_prints_id(capsys):
    seen: list[httpx.Request] = []
    code = cli.main(
        ["board", "create", "Sprint", "--description", "Q3"],
        _transport=_transport(201, {"id": "new-id", "name": "Sprint"}, seen),
    )
    assert code == 0
    assert capsys.readouterr().out.strip() == "new-id"
    assert json.loads(seen[0].content) == {"name": "Sprint", "description": "Q3"}


def test_me_prints_user_name(capsys):
    code = cli.main(["me"], _transport=_transport(200, {"id": "u1", "name": "Ada"}))
    assert code == 0
    assert capsys.readouterr().out.strip() == "Ada"


def test_api_error_returns_1(capsys):
    body = {"status": 404, "message": "error", "type": "error"}
    code = cli.main(["board", "get", "missing"], _transport=_transport(404, body))
    assert code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "status code not expected, got:404" in captured.err


def test_missing_token_exits(monkeypatch):
    monkeypatch.setattr(cli.settings, "access_token", "")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["me"], _transport=_transport(200, {}))
    assert exc_info.value.code == 2


def test_subcommand_required():
    with pytest.raises(SystemExit):
        cli.main([])
