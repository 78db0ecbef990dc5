from __future__ import annotations
from flask import Blueprint, current_app, jsonify, request

from eventpages import get_fetch
from eventpages.i18n import default_locale, is_locale
from eventpages.services.event_service import EventNotFound, EventService, EventServiceError

bp = Blueprint("api_events", __name__)

event_service = EventService()

@bp.get("/events/upcoming")
def upcoming_event():
    """
    GET /api/events/upcoming?lang=hu
    Returns the next upcoming event for the locale (default locale if lang is missing).
    """
    lang = (request.args.get("lang") or default_locale()).lower()
    if not is_locale(lang):
        return jsonify({"ok": False, "error": f"unsupported lang '{lang}'"}), 400

    try:
        event = event_service.get_upcoming_event(get_fetch(), lang)
    except EventNotFound as e:
        return jsonify({"ok": False, "error": str(e)}), 404
    except EventServiceError as e:
        current_app.logger.warning("[api] upcoming event failed: %s", e)
        return jsonify({"ok": False, "error": str(e)}), 502

    return jsonify({"ok": True, "event": event.to_dict()})
