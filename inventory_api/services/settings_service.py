import logging
from datetime import datetime, timezone

from sqlalchemy import delete
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_api.core.constants import SETTINGS_DOCUMENT_ID
from inventory_api.models.setting import Setting
from inventory_api.services.exceptions import StoreError, ValidationError

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class SettingsService:
    """Stores the single price-codes document under a fixed key."""

    def __init__(self, db: Session):
        self.db = db

    def save(self, codes) -> dict:
        if not isinstance(codes, dict):
            raise ValidationError("Invalid settings format")

        try:
            self._upsert(dict(codes))
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to save settings")
            raise StoreError("Failed to save settings") from exc

        logger.info("Replaced price codes (%d keys)", len(codes))
        return codes

    def _upsert(self, codes: dict) -> None:
        values = {
            "id": SETTINGS_DOCUMENT_ID,
            "codes": codes,
            "updated_at": datetime.now(timezone.utc),
        }
        dialect_name = self.db.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect_name)
        if insert is not None:
            stmt = insert(Setting).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[Setting.id],
                set_={"codes": stmt.excluded.codes, "updated_at": stmt.excluded.updated_at},
            )
            self.db.execute(stmt)
            # The ORM identity map may hold a stale copy of the row.
            self.db.expire_all()
            return

        setting = self.db.get(Setting, SETTINGS_DOCUMENT_ID, with_for_update=True)
        if setting is None:
            self.db.add(Setting(**values))
        else:
            setting.codes = codes
            setting.updated_at = values["updated_at"]

    def get(self) -> dict:
        try:
            setting = self.db.get(Setting, SETTINGS_DOCUMENT_ID)
        except SQLAlchemyError as exc:
            logger.exception("Failed to fetch settings")
            raise StoreError("Failed to fetch settings") from exc
        if setting is None or not setting.codes:
            return {}
        return dict(setting.codes)

    def delete(self) -> None:
        try:
            self.db.execute(delete(Setting))
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to delete price codes")
            raise StoreError("Failed to delete price codes") from exc
        logger.info("Deleted price codes")


__all__ = ["SettingsService"]
