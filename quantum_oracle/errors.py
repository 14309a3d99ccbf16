"""
Error kinds reported by request handlers and their HTTP translation
"""
from dataclasses import dataclass
from enum import Enum

from pydantic import ValidationError


class ErrorKind(str, Enum):
    MALFORMED_REQUEST = "malformed_request"  # not JSON, not an object, missing field
    INVALID_TYPE = "invalid_type"  # wrong value type for a field
    INTERNAL = "internal"  # unexpected engine failure


# Every kind surfaces as 400, matching the upstream API contract
ERROR_STATUS = {
    ErrorKind.MALFORMED_REQUEST: 400,
    ErrorKind.INVALID_TYPE: 400,
    ErrorKind.INTERNAL: 400,
}


@dataclass(frozen=True)
class ApiError:
    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return ERROR_STATUS[self.kind]

    @classmethod
    def from_validation(cls, exc: ValidationError) -> "ApiError":
        """Collapse pydantic errors into one message line"""
        errors = exc.errors()
        kind = ErrorKind.INVALID_TYPE
        if any(e["type"] == "missing" or not e["loc"] for e in errors):
            kind = ErrorKind.MALFORMED_REQUEST

        parts = []
        for e in errors:
            field = ".".join(str(p) for p in e["loc"]) or "body"
            parts.append(f"{field}: {e['msg']}")
        return cls(kind, "; ".join(parts))
