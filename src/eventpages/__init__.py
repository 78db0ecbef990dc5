from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import requests
from flask import Flask, current_app
from flask_cors import CORS

from eventpages import config


def create_app(fetch: Optional[Callable[..., Any]] = None,
               config_overrides: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config["SECRET_KEY"] = config.SECRET_KEY
    if config_overrides:
        app.config.update(config_overrides)
    CORS(app, origins=config.CORS_ORIGINS)

    # Outbound fetch used for the event API; tests inject their own.
    app.extensions["event_fetch"] = fetch or requests.get

    from eventpages.api import register_api
    register_api(app)

    from eventpages.web import register_web
    register_web(app)

    app.logger.info("[create_app] event API at %s", config.EVENT_API_BASE)
    return app


def get_fetch() -> Callable[..., Any]:
    return current_app.extensions["event_fetch"]
