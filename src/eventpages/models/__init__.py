from eventpages.models.event import EventModel, InvalidEventPayload

__all__ = ["EventModel", "InvalidEventPayload"]
