from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List


class ErrorLevel(Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class ConversionIssue:
    level: ErrorLevel
    field_path: str  # dot path into the source document, e.g. "invoice_lines.0.item"
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"level": self.level.value, "field_path": self.field_path, "message": self.message}


@dataclass
class ErrorList:
    """Caller-owned sink for conversion warnings and errors.

    The mapper only ever appends; storage and reporting belong to the caller.
    """

    issues: List[ConversionIssue] = field(default_factory=list)

    def add(self, issue: ConversionIssue) -> None:
        self.issues.append(issue)

    def add_warning(self, field_path: str, message: str) -> None:
        self.add(ConversionIssue(ErrorLevel.WARNING, field_path, message))

    def add_error(self, field_path: str, message: str) -> None:
        self.add(ConversionIssue(ErrorLevel.ERROR, field_path, message))

    @property
    def warnings(self) -> List[ConversionIssue]:
        return [i for i in self.issues if i.level is ErrorLevel.WARNING]

    @property
    def errors(self) -> List[ConversionIssue]:
        return [i for i in self.issues if i.level is ErrorLevel.ERROR]

    def has_errors(self) -> bool:
        return any(i.level is ErrorLevel.ERROR for i in self.issues)

    def to_list(self) -> List[Dict[str, Any]]:
        return [i.to_dict() for i in self.issues]

    def __len__(self) -> int:
        return len(self.issues)

    def __iter__(self) -> Iterator[ConversionIssue]:
        return iter(self.issues)
