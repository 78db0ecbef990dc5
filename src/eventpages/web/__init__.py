from __future__ import annotations

import json

from flask import (
    Blueprint,
    abort,
    current_app,
    g,
    jsonify,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from eventpages import get_fetch
from eventpages.i18n import default_locale, is_locale
from eventpages.models.event import EventModel, InvalidEventPayload
from eventpages.services.event_service import EventNotFound, EventService, EventServiceError

bp = Blueprint("web", __name__, template_folder="templates")

event_service = EventService()

PREFETCH_KEY = "prefetched_event"
# Larger handoffs are skipped; the event page then fetches on its own.
PREFETCH_MAX_BYTES = 2048


def _wants_json() -> bool:
    if request.args.get("format") == "json":
        return True
    return request.accept_mimetypes.best_match(["text/html", "application/json"]) == "application/json"


@bp.before_request
def load_prefetched_event():
    """
    Picks up the event the root redirect already fetched, but only for the page it
    redirected to. Whatever is in the session is consumed either way.
    """
    data = session.pop(PREFETCH_KEY, None)
    if not data or request.endpoint != "web.event_page":
        return

    view_args = request.view_args or {}
    lang = str(view_args.get("lang", "")).lower()
    if data.get("lang") != lang or data.get("event", {}).get("slug") != view_args.get("slug"):
        current_app.logger.debug("dropping stale prefetched event %s", data)
        return

    try:
        g.prefetched_event = EventModel.from_dict(data["event"])
    except InvalidEventPayload:
        current_app.logger.warning("ignoring malformed prefetched event in session")


@bp.get("/")
def root():
    lang = default_locale()

    upcoming_event = event_service.get_upcoming_event(get_fetch(), lang)

    g.upcoming_event = upcoming_event
    handoff = {"lang": lang, "event": upcoming_event.to_dict()}
    if len(json.dumps(handoff)) <= PREFETCH_MAX_BYTES:
        session[PREFETCH_KEY] = handoff
    else:
        current_app.logger.debug("event %s too large to hand off in the session", upcoming_event.slug)
    return redirect(url_for("web.event_page", lang=lang, slug=upcoming_event.slug, _external=True), code=302)


@bp.get("/<lang>/events/<path:slug>")
def event_page(lang: str, slug: str):
    lang = lang.lower()
    if not is_locale(lang):
        abort(404)

    event = g.get("prefetched_event")
    if event is None:
        event = event_service.get_upcoming_event(get_fetch(), lang)

    if _wants_json():
        return jsonify({"event": event.to_dict()})
    return render_template("event.html", event=event, lang=lang)


def _error_response(status: int, message: str):
    if _wants_json():
        return jsonify({"ok": False, "error": message}), status
    return render_template("error.html", status=status, message=message), status


@bp.app_errorhandler(EventNotFound)
def handle_event_not_found(e: EventNotFound):
    return _error_response(404, str(e))


@bp.app_errorhandler(EventServiceError)
def handle_event_service_error(e: EventServiceError):
    current_app.logger.warning("[web] event API failure on %s: %s", request.path, e)
    return _error_response(502, "The event service is unavailable right now.")


def register_web(app):
    app.register_blueprint(bp)
