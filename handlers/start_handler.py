"""
handlers/start_handler.py
--------------------------
Handles /start and /help commands.
"""

from telegram import Update
from telegram.ext import ContextTypes
from telegram.helpers import escape_markdown

from security.auth import authorized_only
from utils.logger import get_logger

logger = get_logger(__name__)

HELP_TEXT = """
🤝 *Партнеры*

*Команды:*
/partners - список партнеров со скидками
/create\\_partner - добавить партнера
/update\\_partner - изменить данные партнера
/help - эта справка

*Скидка* считается по сумме продаж:
больше 10 000 шт. - 5%, больше 50 000 - 10%, больше 300 000 - 15%.
"""


@authorized_only
async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - greet the user and show the commands."""
    user = update.effective_user
    logger.info(f"User {user.id} ({user.first_name}) started the bot.")
    await update.message.reply_text(
        f"Здравствуйте, {escape_markdown(user.first_name)}! 👋\n{HELP_TEXT}",
        parse_mode="Markdown",
    )


@authorized_only
async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command - show all available commands."""
    await update.message.reply_text(HELP_TEXT, parse_mode="Markdown")
