from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    STORE = "store"
    MEDIA_UNAVAILABLE = "media_unavailable"


@dataclass(frozen=True)
class Result:
    """Outcome of an operation whose failures are expected, not exceptional."""

    is_successful: bool
    value: Any = None
    message: str = ""
    kind: ErrorKind | None = None

    @classmethod
    def ok(cls, value=None):
        return cls(is_successful=True, value=value)

    @classmethod
    def failed(cls, message: str, kind: ErrorKind):
        return cls(is_successful=False, message=message, kind=kind)


OK = "Ok"


def describe_store_error(error) -> str:
    return str(getattr(error, "orig", None) or error)
