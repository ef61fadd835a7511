from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

class FormatRevision(str, Enum):
    LEGACY = "legacy"
    CURRENT = "current"

class DecodeOptions(BaseModel):
    revision: FormatRevision = FormatRevision.CURRENT
    sanitize_strings: bool = False

    @property
    def strip_nulls(self) -> bool:
        # NUL stripping in sanitize() arrived with the current revision
        return self.revision is FormatRevision.CURRENT
