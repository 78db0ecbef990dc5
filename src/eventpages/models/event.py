from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union


class InvalidEventPayload(ValueError):
    """Raised when the event API returns something that is not an event."""


def _pick(payload: Mapping[str, Any], *keys: str) -> Any:
    for k in keys:
        v = payload.get(k)
        if v is not None:
            return v
    return None


def _opt_str(v: Any) -> Optional[str]:
    if v is None:
        return None
    return str(v)


def _opt_id(v: Any) -> Optional[Union[int, str]]:
    if v is None or isinstance(v, (int, str)) and not isinstance(v, bool):
        return v
    return str(v)


@dataclass(frozen=True)
class EventModel:
    slug: str
    # kept as the API sent it (int or str)
    id: Optional[Union[int, str]] = None
    title: Optional[str] = None
    description: Optional[str] = None
    starts_at: Optional[str] = None
    ends_at: Optional[str] = None
    location: Optional[str] = None
    image_url: Optional[str] = None
    lang: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Any) -> "EventModel":
        """
        Build an event from the API JSON. Accepts camelCase or snake_case keys.
        """
        if not isinstance(payload, Mapping):
            raise InvalidEventPayload(f"expected an event object, got {type(payload).__name__}")

        slug = payload.get("slug")
        if not isinstance(slug, str) or not slug.strip():
            raise InvalidEventPayload("event payload has no slug")

        location = payload.get("location")
        if isinstance(location, Mapping):
            location = _pick(location, "name", "address")

        return cls(
            slug=slug.strip(),
            id=_opt_id(payload.get("id")),
            title=_opt_str(_pick(payload, "title", "name")),
            description=_opt_str(payload.get("description")),
            starts_at=_opt_str(_pick(payload, "startsAt", "starts_at", "startDate", "start_date")),
            ends_at=_opt_str(_pick(payload, "endsAt", "ends_at", "endDate", "end_date")),
            location=_opt_str(location),
            image_url=_opt_str(_pick(payload, "imageUrl", "image_url", "image")),
            lang=_opt_str(_pick(payload, "lang", "locale")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "starts_at": self.starts_at,
            "ends_at": self.ends_at,
            "location": self.location,
            "image_url": self.image_url,
            "lang": self.lang,
        }
