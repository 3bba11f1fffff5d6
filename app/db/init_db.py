from __future__ import annotations

import logging

from sqlalchemy.engine import Engine

from app.db.base import Base

# Import models so Base knows them
from app.models.address import Address  # noqa: F401
from app.models.customer import Customer  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(bind: Engine) -> None:
    """
    Create the customers and addresses tables if they are missing.
    Existing tables are left alone.
    """
    Base.metadata.create_all(bind=bind)
    logger.info("Database schema ready (%s)", ", ".join(sorted(Base.metadata.tables)))
