from __future__ import annotations
from datetime import datetime, timezone
from flask import Blueprint, jsonify

from eventpages import config
from eventpages.i18n import supported_locales

bp = Blueprint("api_health", __name__)

@bp.get("/health")
def health():
    now = datetime.now(timezone.utc).isoformat()

    return jsonify({
        "ok": True,
        "time_utc": now,
        "env": config.FLASK_ENV,
        "config": {
            "event_api_base": config.EVENT_API_BASE,
            "event_api_token_set": bool(config.EVENT_API_TOKEN),
            "default_locale": config.DEFAULT_LOCALE,
            "locales": supported_locales(),
        },
    })
