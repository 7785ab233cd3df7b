"""
models/partner.py
-----------------
Partner models and the sales-volume discount tier table.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

# (exclusive lower bound on summed sale quantity, discount percent), highest first.
DISCOUNT_TIERS: tuple[tuple[int, int], ...] = (
    (300_000, 15),
    (50_000, 10),
    (10_000, 5),
)
BASE_DISCOUNT: int = 0


def discount_for_quantity(quantity: Optional[float]) -> int:
    """
    Return the discount percent earned by a summed sale quantity.

    Comparisons are strict, so a quantity sitting exactly on a breakpoint
    gets the lower tier. ``None`` (no sales at all) earns the base discount.
    """
    if quantity is None:
        return BASE_DISCOUNT
    for threshold, percent in DISCOUNT_TIERS:
        if quantity > threshold:
            return percent
    return BASE_DISCOUNT


@dataclass
class Partner:
    """
    A partner record as returned by the list query.

    Attributes:
        id: Database primary key.
        organization_type: Legal form (ООО, ЗАО, ИП, ПАО ...).
        name: Company name, unique across all partners.
        ceo: Full name of the director.
        email: Contact e-mail.
        phone: Contact phone.
        address: Legal address.
        rating: Partner rating.
        taxpayer_id: Tax number (read-only here).
        discount: Derived discount percent, never stored.
        sales_quantity: Total quantity sold to the partner, never stored.
    """
    id: int
    organization_type: str
    name: str
    ceo: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    rating: Optional[int] = None
    taxpayer_id: Optional[str] = None
    discount: int = BASE_DISCOUNT
    sales_quantity: int = 0

    def __str__(self) -> str:
        return f"#{self.id} {self.organization_type} | {self.name} | скидка {self.discount}%"


@dataclass
class PartnerInput:
    """
    Payload of the create and update operations.

    ``id`` is ignored on create and selects the row on update.
    """
    organization_type: Optional[str]
    name: Optional[str]
    ceo: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    rating: Optional[int] = None
    id: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PartnerInput":
        """Build from the UI's field names (``type`` is the organization type)."""
        return cls(
            organization_type=data.get("type"),
            name=data.get("name"),
            ceo=data.get("ceo"),
            email=data.get("email"),
            phone=data.get("phone"),
            address=data.get("address"),
            rating=data.get("rating"),
            id=data.get("id"),
        )

    def insert_params(self) -> tuple:
        """Positional values for CREATE_PARTNER."""
        return (
            self.organization_type, self.name, self.ceo, self.email,
            self.phone, self.address, self.rating,
        )

    def update_params(self) -> tuple:
        """Positional values for UPDATE_PARTNER; name comes before type, id last."""
        return (
            self.name, self.organization_type, self.ceo, self.email,
            self.phone, self.address, self.rating, self.id,
        )

