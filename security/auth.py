"""
security/auth.py
----------------
Access control for the bot. Partner records may only be read or changed
by Telegram users listed in ALLOWED_USER_IDS.
"""

from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

import config
from utils.logger import get_logger

logger = get_logger(__name__)

MSG_ACCESS_DENIED = "⛔ Доступ запрещен. Обратитесь к администратору."


def is_allowed(user_id: int) -> bool:
    """An empty whitelist admits everyone (local development)."""
    return not config.ALLOWED_USER_IDS or user_id in config.ALLOWED_USER_IDS


def authorized_only(func: Callable):
    """
    Decorator that restricts a handler to whitelisted users.

    Updates without a user are dropped silently. Refused attempts are
    logged and answered with MSG_ACCESS_DENIED; the handler is not called.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if not user:
            return

        if not is_allowed(user.id):
            logger.warning(
                f"Unauthorized access attempt: user_id={user.id}, username={user.username}"
            )
            await update.message.reply_text(MSG_ACCESS_DENIED)
            return

        return await func(update, context, *args, **kwargs)

    return wrapper
