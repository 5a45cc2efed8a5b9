from typing import Any, Optional

from pydantic import BaseModel


class SettingsPayload(BaseModel):
    # Shape is checked by the settings service so bad input maps to one fixed message.
    codes: Optional[Any] = None
