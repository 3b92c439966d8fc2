# services/config.py
from __future__ import annotations
import os

# ------------------------------------------------------------------------------
# Helper: get env var with fallback
# ------------------------------------------------------------------------------
def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return v if v is not None and v != "" else default

def _flag(name: str, default: str = "0") -> bool:
    return _env(name, default).strip().lower() in {"1", "true", "yes", "y", "on"}

APP_NAME: str = _env("APP_NAME", "Projects Starter")

# ------------------------------------------------------------------------------
# Database (SQLAlchemy async engine)
# ------------------------------------------------------------------------------
DB_URL: str = _env("DB_URL", "sqlite+aiosqlite:///./db.sqlite3")

# ------------------------------------------------------------------------------
# Auth
# ------------------------------------------------------------------------------
SECRET_KEY: str = _env("SECRET_KEY", "change-me-secret")
REFRESH_SECRET: str = _env("REFRESH_SECRET", "change-me-refresh-secret")
ALGORITHM: str = "HS256"
ACCESS_EXPIRE: int = int(_env("ACCESS_EXPIRE", str(15 * 60)))
REFRESH_EXPIRE: int = int(_env("REFRESH_EXPIRE", str(7 * 24 * 3600)))
REGISTRATION_ENABLED: bool = _flag("REGISTRATION_ENABLED", "1")

CORS_ORIGINS: list[str] = [
    o.strip() for o in _env("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173").split(",") if o.strip()
]

# ------------------------------------------------------------------------------
# Listing defaults
# ------------------------------------------------------------------------------
DEFAULT_PER_PAGE: int = int(_env("DEFAULT_PER_PAGE", "10"))
MAX_PER_PAGE: int = int(_env("MAX_PER_PAGE", "100"))

# ------------------------------------------------------------------------------
# Seeding
# ------------------------------------------------------------------------------
SEED_ON_STARTUP: bool = _flag("SEED_ON_STARTUP", "1")
ADMIN_NAME: str = _env("ADMIN_NAME", "Admin")
ADMIN_EMAIL: str = _env("ADMIN_EMAIL", "admin@example.com")
ADMIN_PASSWORD: str = _env("ADMIN_PASSWORD", "password123")

# ------------------------------------------------------------------------------
# AI chat
# ------------------------------------------------------------------------------
ANTHROPIC_API_KEY: str = _env("ANTHROPIC_API_KEY", "")
CHAT_MODEL: str = _env("CHAT_MODEL", "claude-sonnet-4-5")
CHAT_MAX_TOKENS: int = int(_env("CHAT_MAX_TOKENS", "1024"))
CHAT_SYSTEM_PROMPT: str = _env(
    "CHAT_SYSTEM_PROMPT",
    "Je bent een behulpzame assistent voor de starter kit. "
    "Beantwoord vragen over Python, FastAPI, de projectenlijst en meer.",
)
