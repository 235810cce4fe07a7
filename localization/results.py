"""Explicit success/failure results returned by the localization service."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from .exceptions import LocalizationError

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Why a localization operation failed."""

    ALREADY_EXISTS = "ALREADY_EXISTS"
    NOT_FOUND = "NOT_FOUND"
    DEFAULT_LANGUAGE = "DEFAULT_LANGUAGE"
    STORE_ERROR = "STORE_ERROR"

    @property
    def is_policy_violation(self) -> bool:
        """True for expected failures the caller should report to the user."""
        return self is not ErrorKind.STORE_ERROR


@dataclass
class OperationResult(Generic[T]):
    """Outcome of a mutating service call."""

    value: Optional[T] = None
    error: Optional[LocalizationError] = None

    @classmethod
    def success(cls, value: Any = None) -> "OperationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: LocalizationError) -> "OperationResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        if self.error is None:
            return None
        return ErrorKind(self.error.code)

    @property
    def message(self) -> str:
        return self.error.message if self.error else ""

    @property
    def cause(self) -> Optional[BaseException]:
        return self.error.cause if self.error else None

    def unwrap(self) -> T:
        """Return the value, or raise the error this result carries."""
        if self.error is not None:
            raise self.error
        return self.value

    def to_dict(self) -> dict:
        if self.ok:
            return {"status": "success"}
        return {"status": "error", "code": self.error.code, "message": self.error.message, "details": self.error.details}
