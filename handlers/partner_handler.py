"""
handlers/partner_handler.py
---------------------------
Handles the partner commands: /partners, /create_partner, /update_partner.
Delegates all work to the PartnerService stored in ``context.bot_data``.
"""

from telegram import Update
from telegram.constants import MessageLimit
from telegram.ext import ContextTypes
from telegram.helpers import escape_markdown

from models.partner import Partner
from security.auth import authorized_only
from services.notifications import MSG_FETCH_FAILED, Notice
from services.partner_service import PartnerFetchError, PartnerService
from utils.logger import get_logger

logger = get_logger(__name__)

SERVICE_KEY = "partner_service"

# Positional field order of the "|"-separated partner form
FORM_FIELDS = ("type", "name", "ceo", "email", "phone", "address", "rating")

FORM_HELP = (
    "*Формат:* `тип | название | директор | email | телефон | адрес | рейтинг`\n\n"
    "*Пример:*\n"
    "`ООО | Паркет 29 | Иванов Иван Иванович | info@parket29.ru | "
    "+7 912 345 67 89 | г. Москва, ул. Лесная, 5 | 7`"
)


def _service(context: ContextTypes.DEFAULT_TYPE) -> PartnerService:
    return context.bot_data[SERVICE_KEY]


def command_body(update: Update) -> str:
    """Text after the command word, with the user's spacing and newlines kept."""
    parts = (update.message.text or "").split(maxsplit=1)
    return parts[1] if len(parts) > 1 else ""


def chunk_blocks(blocks: list[str], limit: int = MessageLimit.MAX_TEXT_LENGTH) -> list[str]:
    """
    Join blocks with blank lines into as few messages as possible,
    none longer than ``limit``. A block is never split across messages.
    """
    chunks: list[str] = []
    current = ""
    for block in blocks:
        candidate = f"{current}\n\n{block}" if current else block
        if len(candidate) <= limit or not current:
            current = candidate
        else:
            chunks.append(current)
            current = block
    if current:
        chunks.append(current)
    return chunks


def parse_partner_form(text: str) -> dict | None:
    """
    Parse the structured partner form:
      тип | название | директор | email | телефон | адрес | рейтинг

    Empty fields become None; the database decides whether that is allowed.

    Returns:
        A dict keyed by FORM_FIELDS, or None if the text does not have
        seven fields or the rating is not an integer.
    """
    parts = [p.strip() for p in text.split("|")]
    if len(parts) != len(FORM_FIELDS):
        return None

    form = {key: (value or None) for key, value in zip(FORM_FIELDS, parts)}
    if form["rating"] is not None:
        try:
            form["rating"] = int(form["rating"])
        except ValueError:
            return None
    return form


def format_partner(partner: Partner) -> str:
    """Render one partner as a Markdown block."""
    def esc(value) -> str:
        return escape_markdown(str(value)) if value not in (None, "") else "—"

    lines = [
        f"*{esc(partner.organization_type)} | {esc(partner.name)}*  (#{partner.id})",
        f"  Директор: {esc(partner.ceo)}",
        f"  Телефон: {esc(partner.phone)}",
        f"  Рейтинг: {esc(partner.rating)}",
        f"  Скидка: {partner.discount}%",
    ]
    return "\n".join(lines)


@authorized_only
async def partners_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /partners - list every partner with its discount."""
    try:
        partners = _service(context).get_partners()
    except PartnerFetchError as e:
        logger.error(f"/partners failed: {e}")
        await update.message.reply_text(f"⚠️ {MSG_FETCH_FAILED}")
        return

    if not partners:
        await update.message.reply_text("📭 Партнеров пока нет.")
        return

    # Telegram rejects messages over MAX_TEXT_LENGTH
    for chunk in chunk_blocks([format_partner(p) for p in partners]):
        await update.message.reply_text(chunk, parse_mode="Markdown")


@authorized_only
async def create_partner_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /create_partner <form> - add a new partner.

    Usage:
        /create_partner ООО | Паркет 29 | Иванов И.И. | info@p29.ru | 89123456789 | Москва | 7
    """
    form = parse_partner_form(command_body(update))
    if form is None:
        await update.message.reply_text(
            f"➕ *Новый партнер*\n\n{FORM_HELP}", parse_mode="Markdown"
        )
        return

    notice = _service(context).create_partner(form)
    await update.message.reply_text(_render(notice))


@authorized_only
async def update_partner_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /update_partner <id> <form> - overwrite a partner's details.
    All seven fields are written, so every one must be given.
    """
    body = command_body(update).split(maxsplit=1)
    if not body:
        await update.message.reply_text(
            f"✏️ *Изменить партнера*\n\n`/update_partner <id> <форма>`\n\n{FORM_HELP}",
            parse_mode="Markdown",
        )
        return

    try:
        partner_id = int(body[0])
    except ValueError:
        await update.message.reply_text("⚠️ Первым параметром должен быть номер партнера.")
        return

    form = parse_partner_form(body[1] if len(body) > 1 else "")
    if form is None:
        await update.message.reply_text(FORM_HELP, parse_mode="Markdown")
        return

    form["id"] = partner_id
    notice = _service(context).update_partner(form)
    await update.message.reply_text(_render(notice))


def _render(notice: Notice) -> str:
    icon = "❌" if notice.is_error else "✅"
    return f"{icon} {notice}"
