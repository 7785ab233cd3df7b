"""
db/queries.py
-------------
The fixed catalog of SQL statements run against PARTNERS and SALES.
All statements use psycopg2 positional placeholders (%s).
"""

from models.partner import BASE_DISCOUNT, DISCOUNT_TIERS

PARTNER_COLUMNS: tuple[str, ...] = (
    "id",
    "organization_type",
    "name",
    "ceo",
    "email",
    "phone",
    "address",
    "taxpayer_id",
    "rating",
)


def _discount_case(quantity_expr: str) -> str:
    """Render DISCOUNT_TIERS as a SQL CASE over ``quantity_expr``."""
    branches = "\n".join(
        f"             WHEN {quantity_expr} > {threshold} THEN {percent}"
        for threshold, percent in DISCOUNT_TIERS
    )
    return f"CASE\n{branches}\n             ELSE {BASE_DISCOUNT}\n        END"


_P_COLUMNS = ", ".join(f"p.{c}" for c in PARTNER_COLUMNS)

LIST_PARTNERS = f"""
    SELECT {_P_COLUMNS},
        COALESCE(SUM(s.quantity), 0) AS sales_quantity,
        {_discount_case("SUM(s.quantity)")} AS discount
    FROM partners AS p
    LEFT JOIN sales AS s ON p.id = s.partner_id
    GROUP BY {_P_COLUMNS}
    ORDER BY p.id;
"""

CREATE_PARTNER = """
    INSERT INTO partners (organization_type, name, ceo, email, phone, address, rating)
    VALUES (%s, %s, %s, %s, %s, %s, %s)
    RETURNING id;
"""

UPDATE_PARTNER = """
    UPDATE partners
    SET name = %s, organization_type = %s, ceo = %s, email = %s,
        phone = %s, address = %s, rating = %s
    WHERE id = %s;
"""
