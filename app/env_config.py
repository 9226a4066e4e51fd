import os

from dotenv import load_dotenv

from app.config import PROJECT_ROOT

load_dotenv(PROJECT_ROOT / ".env")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", "8001"))
APP_RELOAD = _env_bool("APP_RELOAD", False)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
