from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, String

from inventory_api.core.constants import SETTINGS_DOCUMENT_ID
from inventory_api.database.base import Base


class Setting(Base):
    __tablename__ = "settings"

    # Single document, always stored under SETTINGS_DOCUMENT_ID.
    id = Column(String, primary_key=True, default=SETTINGS_DOCUMENT_ID)
    codes = Column(JSON, nullable=False, default=lambda: {})

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


__all__ = ["Setting"]
