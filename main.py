"""
main.py
-------
Entry point for the PartnerDesk Telegram bot.

Responsibilities:
    - Open the single database connection (startup fails if it cannot).
    - Wire the repository and service and hand them to the handlers.
    - Start the bot and close the connection on shutdown.
"""

import sys

from telegram import BotCommand
from telegram.ext import Application, CommandHandler

from config import ALLOWED_USER_IDS, DATABASE_URL, INIT_SCHEMA, TELEGRAM_BOT_TOKEN
from db.connection import Database
from db.errors import DatabaseConnectionError
from db.init_db import create_tables
from handlers.partner_handler import (
    SERVICE_KEY,
    create_partner_command,
    partners_command,
    update_partner_command,
)
from handlers.start_handler import help_command, start_command
from repositories.partner_repo import PartnerRepository
from services.partner_service import PartnerService
from utils.logger import get_logger

logger = get_logger(__name__)


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    commands = [
        BotCommand("partners", "Список партнеров"),
        BotCommand("create_partner", "Добавить партнера"),
        BotCommand("update_partner", "Изменить партнера"),
        BotCommand("help", "Справка"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


def build_application(service: PartnerService, token: str = TELEGRAM_BOT_TOKEN) -> Application:
    """Create the Telegram application with every handler registered."""
    app = Application.builder().token(token).post_init(set_bot_commands).build()
    app.bot_data[SERVICE_KEY] = service

    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("help", help_command))
    app.add_handler(CommandHandler("partners", partners_command))
    app.add_handler(CommandHandler("create_partner", create_partner_command))
    app.add_handler(CommandHandler("update_partner", update_partner_command))
    return app


def main() -> None:
    """Initialize and run the bot."""

    if not ALLOWED_USER_IDS:
        logger.warning("ALLOWED_USER_IDS is empty: every Telegram user can edit partners.")

    # ── 1. Database ───────────────────────────────────────
    logger.info("Connecting to the database...")
    db = Database(DATABASE_URL)
    try:
        db.connect()
    except DatabaseConnectionError as e:
        logger.critical(f"Failed to initialize application: {e}")
        sys.exit(1)

    try:
        if INIT_SCHEMA:
            create_tables(db)

        # ── 2. Wiring ─────────────────────────────────────
        service = PartnerService(PartnerRepository(db))
        app = build_application(service)

        # ── 3. Start polling ──────────────────────────────
        logger.info("PartnerDesk is running! Press Ctrl+C to stop.")
        app.run_polling(drop_pending_updates=True, allowed_updates=["message"])
    finally:
        # ── 4. Cleanup on shutdown ────────────────────────
        db.close()
        logger.info("PartnerDesk stopped.")


if __name__ == "__main__":
    main()
