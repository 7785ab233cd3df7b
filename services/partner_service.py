"""
services/partner_service.py
---------------------------
The three partner operations: list, create and update.
Each runs one query through the repository and reports the outcome.
"""

from typing import Any, Mapping

from db.errors import StorageError
from models.partner import Partner, PartnerInput
from repositories.partner_repo import PartnerRepository
from services.notifications import (
    MSG_CREATE_FAILED,
    MSG_PARTNER_CREATED,
    MSG_PARTNER_UPDATED,
    MSG_UPDATE_FAILED,
    Notice,
    failure,
    success,
)
from utils.logger import get_logger

logger = get_logger(__name__)


class PartnerFetchError(Exception):
    """Raised when the partner list cannot be read, whatever the cause."""


class PartnerService:
    """
    Request handlers for partner records.

    Stateless between calls; no operation depends on the outcome of another.
    Storage errors never escape create/update: they are logged and turned
    into an error Notice.
    """

    def __init__(self, repo: PartnerRepository):
        self.repo = repo

    def get_partners(self) -> list[Partner]:
        """
        Return all partners with their discount tier.

        Raises:
            PartnerFetchError: On any database error. The detail is logged only.
        """
        try:
            return self.repo.list_partners()
        except StorageError as e:
            logger.error(f"Error fetching partners: {e}")
            raise PartnerFetchError("Failed to fetch partners") from e

    def create_partner(self, partner: Mapping[str, Any]) -> Notice:
        """
        Create a partner from ``{type, name, ceo, email, phone, address, rating}``.

        Returns:
            A success notice, or an error notice naming a duplicate name
            or a generic failure.
        """
        data = PartnerInput.from_mapping(partner)
        data.id = None
        try:
            self.repo.create(data)
        except StorageError as e:
            logger.error(f"Error creating partner '{data.name}': {e}")
            return failure(e, MSG_CREATE_FAILED)
        return success(MSG_PARTNER_CREATED)

    def update_partner(self, partner: Mapping[str, Any]) -> Notice:
        """
        Update a partner from ``{id, type, name, ceo, email, phone, address, rating}``.

        An unknown id changes nothing and still reports success; the miss
        is logged as a warning.
        """
        data = PartnerInput.from_mapping(partner)
        try:
            updated = self.repo.update(data)
        except StorageError as e:
            logger.error(f"Error updating partner #{data.id}: {e}")
            return failure(e, MSG_UPDATE_FAILED)
        if not updated:
            logger.warning(f"Update matched no partner with id {data.id}")
        return success(MSG_PARTNER_UPDATED)
