import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from inventory_api.database.engine import engine

logger = logging.getLogger(__name__)

SessionLocal = sessionmaker(
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


def get_db():
    """Request-scoped session; anything left uncommitted on error is rolled back."""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def database_reachable(db: Session) -> bool:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Database ping failed", exc_info=True)
        return False
    return True
