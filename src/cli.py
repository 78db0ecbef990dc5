# src/cli.py
from __future__ import annotations

import os
import json
import argparse
import traceback

# ---------------------------
# Commands
# ---------------------------

def cmd_serve(port: int, host: str, debug: bool):
    from eventpages import create_app
    app = create_app()
    app.run(host=host, port=port, debug=debug)


def cmd_upcoming(lang: str | None):
    import requests
    from eventpages.i18n import default_locale, is_locale
    from eventpages.services.event_service import EventService

    lang = (lang or default_locale()).lower()
    if not is_locale(lang):
        raise SystemExit(f"unsupported lang '{lang}'")
    event = EventService().get_upcoming_event(requests.get, lang)
    print(json.dumps({"ok": True, "lang": lang, "event": event.to_dict()}, indent=2))


def cmd_locales():
    from eventpages.i18n import default_locale, supported_locales
    print(json.dumps({"default": default_locale(), "locales": supported_locales()}, indent=2))


# ---------------------------
# Parser / main
# ---------------------------

def main(argv=None):
    p = argparse.ArgumentParser(description="Event pages CLI")
    sub = p.add_subparsers(dest="cmd", required=True)

    # serve
    sp = sub.add_parser("serve", help="Run Flask server")
    sp.add_argument("--port", type=int, default=int(os.getenv("PORT", "8080")))
    sp.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"))
    sp.add_argument("--debug", action="store_true")
    sp.set_defaults(func=lambda a: cmd_serve(a.port, a.host, a.debug))

    # upcoming
    su = sub.add_parser("upcoming", help="Fetch and print the upcoming event")
    su.add_argument("--lang", default=None, help="locale code (default: DEFAULT_LOCALE)")
    su.set_defaults(func=lambda a: cmd_upcoming(a.lang))

    # locales
    sl = sub.add_parser("locales", help="Print supported locales")
    sl.set_defaults(func=lambda a: cmd_locales())

    args = p.parse_args(argv)
    try:
        return args.func(args)
    except SystemExit:
        raise
    except Exception as e:
        # Surface trace on CLI errors
        print("ERROR:", e)
        traceback.print_exc()
        raise SystemExit(1)


if __name__ == "__main__":
    main()
