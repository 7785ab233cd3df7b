"""
services/notifications.py
-------------------------
User-facing notices and the Russian message catalog they are built from.
Storage errors are mapped to text here and nowhere else.
"""

from dataclasses import dataclass

from db.errors import StorageError, UniqueViolation

INFO = "info"
ERROR = "error"

ERROR_TITLE = "Ошибка"

MSG_PARTNER_CREATED = "Успех! Партнер создан"
MSG_PARTNER_UPDATED = "Успех! Данные обновлены"
MSG_NAME_TAKEN = "Партнер с таким именем уже существует"
MSG_CREATE_FAILED = "Не удалось создать партнера"
MSG_UPDATE_FAILED = "Не удалось обновить данные партнера"
MSG_FETCH_FAILED = "Не удалось загрузить список партнеров"


@dataclass(frozen=True)
class Notice:
    """A message to show the user after an operation."""
    level: str  # 'info' | 'error'
    message: str
    title: str = ""

    @property
    def is_error(self) -> bool:
        return self.level == ERROR

    def __str__(self) -> str:
        if self.title:
            return f"{self.title}: {self.message}"
        return self.message


def success(message: str) -> Notice:
    return Notice(INFO, message)


def failure(error: StorageError, generic_message: str) -> Notice:
    """
    Pick the error notice for a failed write.

    A duplicate name gets its own message; everything else collapses to
    ``generic_message``.
    """
    if isinstance(error, UniqueViolation):
        return Notice(ERROR, MSG_NAME_TAKEN, ERROR_TITLE)
    return Notice(ERROR, generic_message, ERROR_TITLE)
