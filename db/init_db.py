"""
db/init_db.py
-------------
Creates the PARTNERS and SALES tables if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import Database
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Partners: companies we sell to. The name must be unique.
CREATE TABLE IF NOT EXISTS partners (
    id                  SERIAL PRIMARY KEY,
    organization_type   VARCHAR(10) NOT NULL,
    name                VARCHAR(255) NOT NULL UNIQUE,
    ceo                 VARCHAR(255),
    email               VARCHAR(255),
    phone               VARCHAR(20),
    address             VARCHAR(500),
    taxpayer_id         VARCHAR(12),
    rating              INT CHECK (rating >= 0)
);

-- Sales: quantities sold to a partner; their sum drives the discount tier
CREATE TABLE IF NOT EXISTS sales (
    id                  SERIAL PRIMARY KEY,
    partner_id          INT NOT NULL REFERENCES partners(id),
    quantity            INT NOT NULL CHECK (quantity > 0),
    sale_date           DATE NOT NULL DEFAULT CURRENT_DATE
);

CREATE INDEX IF NOT EXISTS idx_sales_partner ON sales(partner_id);
"""


def create_tables(db: Database) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    with db.cursor() as cur:
        cur.execute(SCHEMA_SQL)
    logger.info("Database schema initialized successfully.")


if __name__ == "__main__":
    from config import DATABASE_URL

    with Database(DATABASE_URL) as database:
        create_tables(database)
    print("Database schema created successfully.")
