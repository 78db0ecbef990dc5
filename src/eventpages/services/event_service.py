# eventpages/services/event_service.py
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

import requests

from eventpages import config
from eventpages.i18n import Locale
from eventpages.models.event import EventModel, InvalidEventPayload

logger = logging.getLogger(__name__)

# Same calling convention as requests.get(url, params=..., headers=..., timeout=...)
Fetch = Callable[..., Any]


class EventServiceError(RuntimeError):
    """The event API could not deliver an upcoming event."""


class EventNotFound(EventServiceError):
    def __init__(self, lang: str):
        super().__init__(f"no upcoming event for lang={lang!r}")
        self.lang = lang


class InvalidEventResponse(EventServiceError, InvalidEventPayload):
    pass


def _unwrap(body: Any) -> Any:
    """
    Accepts a bare event object or an envelope: {"event": {...}} / {"data": {...}}.
    """
    if isinstance(body, dict):
        for key in ("event", "data"):
            inner = body.get(key)
            if isinstance(inner, dict):
                return inner
    return body


class EventService:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self._base_url = base_url
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return (self._base_url or config.EVENT_API_BASE).rstrip("/")

    @property
    def timeout(self) -> float:
        return self._timeout if self._timeout is not None else config.EVENT_API_TIMEOUT

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if config.EVENT_API_TOKEN:
            headers["Authorization"] = f"Bearer {config.EVENT_API_TOKEN}"
        return headers

    def get_upcoming_event(self, fetch: Fetch, lang: Locale) -> EventModel:
        """Fetch the next upcoming event for `lang` through the given fetch callable."""
        url = f"{self.base_url}/events/upcoming"
        params = {"lang": lang}
        logger.debug("GET %s %s", url, params)

        try:
            r = fetch(url, params=params, headers=self._headers(), timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("event API unreachable (lang=%s, url=%s): %s", lang, url, e)
            raise EventServiceError(f"event API unreachable: {e}") from e

        if r.status_code == 404:
            logger.info("no upcoming event (lang=%s)", lang)
            raise EventNotFound(lang)

        try:
            r.raise_for_status()
        except requests.HTTPError as e:
            logger.warning("event API error (lang=%s, url=%s): %s", lang, url, e)
            raise EventServiceError(f"event API returned {r.status_code}") from e

        try:
            body = r.json()
        except ValueError as e:
            logger.warning("event API sent non-JSON body (lang=%s, url=%s)", lang, url)
            raise EventServiceError("event API returned a non-JSON body") from e

        try:
            return EventModel.from_dict(_unwrap(body))
        except InvalidEventPayload as e:
            logger.warning("malformed event payload (lang=%s): %s", lang, e)
            raise InvalidEventResponse(str(e)) from e
