# robust .env loading
import os
from pathlib import Path
try:
    from dotenv import load_dotenv  # type: ignore
    # 1) load from CWD (project root when you run commands there)
    load_dotenv(override=False)
    # 2) also try repo root even if code runs from src/
    repo_root = Path(__file__).resolve().parents[2]
    env_path = repo_root / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=True)
except ImportError:
    pass

# --- Flask / server ---
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
FLASK_ENV = os.getenv("FLASK_ENV", "production")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

# --- Event API ---
EVENT_API_BASE = os.getenv("EVENT_API_BASE", "http://localhost:8000/api")
EVENT_API_TOKEN = os.getenv("EVENT_API_TOKEN")  # optional bearer token


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


EVENT_API_TIMEOUT = _float_env("EVENT_API_TIMEOUT", 10.0)

# --- Locales ---
DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "hu").strip().lower()
SUPPORTED_LOCALES = [
    s.strip().lower()
    for s in os.getenv("SUPPORTED_LOCALES", "hu,en").split(",")
    if s.strip()
]
