"""Diagnostics collected while importing a language from CSV."""

from dataclasses import dataclass, field
from enum import Enum


class CsvErrorWarningType(str, Enum):
    """Classification of a CSV import problem."""

    BAD_DATA_FORMAT = "BadDataFormat"
    DOES_NOT_EXIST = "DoesNotExist"
    ALREADY_EXISTS = "AlreadyExists"
    ITEM_BAD = "ItemBad"
    MISSING_KEY_OR_VALUE = "MissingKeyOrValue"
    NEW_KEY_CREATED = "NewKeyCreated"
    GENERAL_ERROR = "GeneralError"


@dataclass
class CsvErrorWarning:
    """A single error or warning raised during an import."""

    error_warning_type: CsvErrorWarningType
    message: str

    def to_dict(self) -> dict:
        return {"type": self.error_warning_type.value, "message": self.message}


@dataclass
class CsvReport:
    """Ordered errors and warnings produced by a CSV import. Never persisted."""

    errors: list[CsvErrorWarning] = field(default_factory=list)
    warnings: list[CsvErrorWarning] = field(default_factory=list)

    def add_error(self, error_type: CsvErrorWarningType, message: str) -> None:
        self.errors.append(CsvErrorWarning(error_type, message))

    def add_warning(self, warning_type: CsvErrorWarningType, message: str) -> None:
        self.warnings.append(CsvErrorWarning(warning_type, message))

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def to_dict(self) -> dict:
        return {
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
        }
