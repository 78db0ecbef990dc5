import os
import pytest
import requests

# Keep the real event API out of unit tests
os.environ.setdefault("EVENT_API_BASE", "https://events.test/api")
os.environ.setdefault("FLASK_ENV", "testing")

import eventpages.config as cfg  # noqa: E402
from eventpages import create_app  # noqa: E402


class _DummyResp:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self._text is not None:
            raise ValueError("not json")
        return self._payload


UPCOMING = {
    "hu": {"id": 7, "slug": "tavaszi-fesztival", "title": "Tavaszi Fesztivál",
           "startsAt": "2026-11-14T18:00:00Z", "location": {"name": "Budapest"}, "lang": "hu"},
    "en": {"id": 7, "slug": "spring-festival", "title": "Spring Festival",
           "startsAt": "2026-11-14T18:00:00Z", "location": {"name": "Budapest"}, "lang": "en"},
}


@pytest.fixture(autouse=True)
def _patch_cfg(monkeypatch):
    monkeypatch.setattr(cfg, "FLASK_ENV", "testing", raising=False)
    monkeypatch.setattr(cfg, "EVENT_API_BASE", "https://events.test/api", raising=False)
    monkeypatch.setattr(cfg, "EVENT_API_TOKEN", None, raising=False)
    monkeypatch.setattr(cfg, "DEFAULT_LOCALE", "hu", raising=False)
    monkeypatch.setattr(cfg, "SUPPORTED_LOCALES", ["hu", "en"], raising=False)
    yield


@pytest.fixture
def fake_fetch():
    """
    Returns a fetch callable plus the list of calls it saw. `mapper` is either a
    dict of lang -> (payload, status) or a callable(url, params) -> (payload, status).
    """
    calls = []

    def install(mapper=None):
        def _fetch(url, params=None, headers=None, timeout=None):
            calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
            lang = (params or {}).get("lang")
            if mapper is None:
                payload, status = (UPCOMING.get(lang), 200 if lang in UPCOMING else 404)
            elif callable(mapper):
                result = mapper(url, params)
                if isinstance(result, _DummyResp):
                    return result
                payload, status = result
            else:
                payload, status = mapper.get(lang, ({}, 404))
            return _DummyResp(status_code=status, payload=payload)

        _fetch.calls = calls
        return _fetch

    return install


@pytest.fixture
def app_client(fake_fetch):
    app = create_app(fetch=fake_fetch(), config_overrides={"TESTING": True})
    with app.test_client() as c:
        c.fetch_calls = app.extensions["event_fetch"].calls
        yield c
