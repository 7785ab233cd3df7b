"""
repositories/partner_repo.py
----------------------------
Data access layer for partners.
Runs the statements from db.queries and returns domain objects.
"""

from db.connection import Database
from db.queries import CREATE_PARTNER, LIST_PARTNERS, UPDATE_PARTNER
from models.partner import Partner, PartnerInput
from utils.logger import get_logger

logger = get_logger(__name__)


class PartnerRepository:
    """Repository for the partners table. Raises db.errors.StorageError subclasses."""

    def __init__(self, db: Database):
        self.db = db

    # ── READ ──────────────────────────────────────────────

    def list_partners(self) -> list[Partner]:
        """
        Fetch every partner with its discount tier.

        Partners without sales are included with discount 0.

        Returns:
            Partners ordered by id. Empty list if the table is empty.
        """
        with self.db.cursor() as cur:
            cur.execute(LIST_PARTNERS)
            return [self._row_to_partner(r) for r in cur.fetchall()]

    # ── CREATE ────────────────────────────────────────────

    def create(self, data: PartnerInput) -> int:
        """
        Insert a new partner. Any ``id`` on the input is ignored.

        Returns:
            The server-assigned id.

        Raises:
            UniqueViolation: If a partner with the same name exists.
        """
        with self.db.cursor() as cur:
            cur.execute(CREATE_PARTNER, data.insert_params())
            partner_id = cur.fetchone()["id"]
        logger.info(f"Created partner #{partner_id} '{data.name}'")
        return partner_id

    # ── UPDATE ────────────────────────────────────────────

    def update(self, data: PartnerInput) -> bool:
        """
        Overwrite the seven editable fields of the partner ``data.id``.

        Returns:
            True if a row was updated, False if no partner has that id.

        Raises:
            UniqueViolation: If the new name belongs to another partner.
        """
        with self.db.cursor() as cur:
            cur.execute(UPDATE_PARTNER, data.update_params())
            updated = cur.rowcount > 0
        if updated:
            logger.info(f"Updated partner #{data.id}")
        return updated

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_partner(row: dict) -> Partner:
        """Convert a dict row from LIST_PARTNERS to a Partner."""
        return Partner(
            id=row["id"],
            organization_type=row["organization_type"],
            name=row["name"],
            ceo=row["ceo"],
            email=row["email"],
            phone=row["phone"],
            address=row["address"],
            rating=row["rating"],
            taxpayer_id=row["taxpayer_id"],
            discount=int(row["discount"]),
            sales_quantity=int(row["sales_quantity"]),
        )
