from enum import Enum
from typing import Optional


class ParseErrorKind(str, Enum):
    UNKNOWN_ENTITY_TYPE = "UNKNOWN_ENTITY_TYPE"
    MISSING_START_BIT = "MISSING_START_BIT"
    MISSING_STOP_BIT = "MISSING_STOP_BIT"
    INCOMPLETE_HEAD = "INCOMPLETE_HEAD"


class RegistryParseError(Exception):
    """Terminal failure of a registry extract parse. No partial record is produced."""

    def __init__(self, kind: ParseErrorKind, detail: Optional[str] = None):
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)
