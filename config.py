"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")

# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5433"))
DB_NAME: str = os.getenv("DB_NAME", "electron")
DB_USER: str = os.getenv("DB_USER", "electron")
DB_PASS: str = os.getenv("DB_PASS", "123test")

DATABASE_URL: str = (
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

# Create PARTNERS/SALES on startup if they are missing
INIT_SCHEMA: bool = os.getenv("INIT_SCHEMA", "false").lower() in ("1", "true", "yes")

# ── Security ──────────────────────────────────────────────
# Comma-separated Telegram user IDs allowed to use the bot; empty allows everyone
_raw_ids = os.getenv("ALLOWED_USER_IDS", "")
ALLOWED_USER_IDS: list[int] = (
    [int(uid.strip()) for uid in _raw_ids.split(",") if uid.strip()]
    if _raw_ids
    else []
)

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
