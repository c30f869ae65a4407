# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Per-file result reporting for the validation CLI."""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ..exceptions import jsonable_record
from ..models.violation import Violation


class ValidationReport:
    """Container for the validation outcome of a single data file."""

    def __init__(self, file_path: Path):
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(self, message: str, path: Optional[str] = None, **details: Any):
        """Add an error record.

        Args:
            message: Error message
            path: Optional data path where the error occurred
        """
        error: Dict[str, Any] = {}
        if path is not None:
            error['path'] = path
        error.update(details)
        error['message'] = message
        self.errors.append(error)

    def add_violations(self, violations: Iterable[Violation]):
        for violation in violations:
            self.errors.append(violation.to_dict())

    def to_dict(self) -> Dict[str, Any]:
        return {'file': str(self.file_path), 'errors': [jsonable_record(error) for error in self.errors]}


def format_error_line(error: Dict[str, Any]) -> str:
    """Render one error record as ``[path] message (field=value, ...)``."""
    location = f"[{error['path']}] " if 'path' in error else ""
    extras = ", ".join(
        f"{key}={value!r}" for key, value in error.items() if key not in ('path', 'message')
    )
    suffix = f" ({extras})" if extras else ""
    return f"{location}{error['message']}{suffix}"
