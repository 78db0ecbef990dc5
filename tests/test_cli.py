import json

import pytest
import requests

import cli
from conftest import UPCOMING, _DummyResp


def test_locales(capsys):
    cli.main(["locales"])
    out = json.loads(capsys.readouterr().out)
    assert out == {"default": "hu", "locales": ["hu", "en"]}


def test_upcoming_prints_event(monkeypatch, capsys):
    def _get(url, params=None, headers=None, timeout=None):
        return _DummyResp(200, UPCOMING[params["lang"]])

    monkeypatch.setattr(requests, "get", _get, raising=True)
    cli.main(["upcoming", "--lang", "en"])
    out = json.loads(capsys.readouterr().out)
    assert out["lang"] == "en"
    assert out["event"]["slug"] == "spring-festival"


def test_upcoming_rejects_unknown_lang():
    with pytest.raises(SystemExit):
        cli.main(["upcoming", "--lang", "xx"])


def test_upcoming_api_failure_exits_1(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda *a, **kw: _DummyResp(500, {}), raising=True)
    with pytest.raises(SystemExit) as exc:
        cli.main(["upcoming"])
    assert exc.value.code == 1
