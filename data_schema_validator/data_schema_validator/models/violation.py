from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


DataPath = str

ROOT_PATH: DataPath = "$"


@dataclass(frozen=True)
class Violation:
    message: str
    path: Optional[DataPath] = None
    # Constraint-specific fields, kept in emission order
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {}
        if self.path is not None:
            record["path"] = self.path
        record.update(self.details)
        record["message"] = self.message
        return record


def join_property(base: DataPath, name: str) -> DataPath:
    return f"{base}.{name}"


def join_index(base: DataPath, index: int) -> DataPath:
    return f"{base}[{index}]"


def data_violation(path: DataPath, message: str, **details: Any) -> Violation:
    """Violation raised by the data itself, located at ``path``."""
    return Violation(message=message, path=path, details=details)


def schema_violation(message: str, **details: Any) -> Violation:
    """Violation raised by a malformed schema; carries no data path."""
    return Violation(message=message, details=details)
