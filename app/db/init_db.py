"""
Database initialization.

Creates all record-store tables.
"""

from typing import Optional

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

import app.db.base  # noqa: F401
from app.db.session import engine as default_engine


def init_db(engine: Optional[Engine] = None) -> None:
    """Create every table registered on ``SQLModel.metadata``."""
    target = engine or default_engine

    logger.info(f"[DB] Creating tables on {target.url.render_as_string(hide_password=True)}")
    SQLModel.metadata.create_all(target)
    logger.info(f"[DB] Tables ready: {', '.join(sorted(SQLModel.metadata.tables))}")


if __name__ == "__main__":
    init_db()
