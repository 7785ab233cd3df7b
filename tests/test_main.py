from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from telegram.ext import CommandHandler

import main
from handlers import start_handler
from handlers.partner_handler import SERVICE_KEY


def test_build_application_registers_commands_and_service():
    service = MagicMock()
    app = main.build_application(service, token="123456:TEST-TOKEN")

    assert app.bot_data[SERVICE_KEY] is service
    commands = set()
    for handler in app.handlers[0]:
        if isinstance(handler, CommandHandler):
            commands |= set(handler.commands)
    assert {"start", "help", "partners", "create_partner", "update_partner"} <= commands


def test_main_exits_when_database_is_unreachable(monkeypatch):
    from db.errors import DatabaseConnectionError

    def refuse(self):
        raise DatabaseConnectionError("could not connect")

    monkeypatch.setattr(main.Database, "connect", refuse)
    with pytest.raises(SystemExit) as info:
        main.main()
    assert info.value.code == 1


@pytest.fixture()
def open_whitelist(monkeypatch):
    import config

    monkeypatch.setattr(config, "ALLOWED_USER_IDS", [])


def _update(first_name="Анна"):
    return SimpleNamespace(
        effective_user=SimpleNamespace(id=1, username="anna", first_name=first_name),
        message=SimpleNamespace(reply_text=AsyncMock()),
    )


@pytest.mark.asyncio
async def test_help_command_lists_partner_commands(open_whitelist):
    update = _update()
    await start_handler.help_command(update, SimpleNamespace())

    text = update.message.reply_text.await_args.args[0]
    assert "/partners" in text


@pytest.mark.asyncio
async def test_start_command_escapes_user_name(open_whitelist):
    update = _update(first_name="Иван_*Петров*")
    await start_handler.start_command(update, SimpleNamespace())

    text = update.message.reply_text.await_args.args[0]
    assert "Иван\\_\\*Петров\\*" in text
