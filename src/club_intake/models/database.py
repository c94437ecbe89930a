"""Database engine and session dependency"""

import os
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlmodel import Session

from club_intake.config import config


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Create the process-wide engine on first use"""
    database_url = config["database_url"]

    if not database_url:
        raise ValueError(
            "DATABASE_URL environment variable is not set. "
            "Make sure to set DATABASE_URL in the deployment settings or local .env file."
        )

    return create_engine(
        database_url,
        echo=os.getenv("DEBUG", "false").lower() == "true",
        pool_pre_ping=True,
    )


def get_db():
    """Get database session"""
    with Session(get_engine()) as session:
        yield session
