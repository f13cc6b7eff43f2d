from __future__ import annotations

import logging

from sqlalchemy.engine import Engine

import models  # noqa: F401  registers tables on Base.metadata
from db.base_class import Base

logger = logging.getLogger(__name__)


def ensure_schema(engine: Engine) -> None:
    """Create any missing tables. Existing tables are left untouched."""
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("Schema ensured for tables: %s", ", ".join(sorted(Base.metadata.tables)))
