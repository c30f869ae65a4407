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

"""Schema type tags and the keys a schema definition may carry."""

from enum import Enum
from typing import List, Optional


REF_KEY = "$ref"


class SchemaType(str, Enum):
    """Type tags accepted in the ``type`` key of a schema node."""

    NUMBER = "number"
    INTEGER = "integer"
    STRING = "string"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"

    @classmethod
    def get_all_types(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def from_tag(cls, tag) -> Optional["SchemaType"]:
        """Return the member for ``tag`` or None when the tag is unknown."""
        if not isinstance(tag, str):
            return None
        try:
            return cls(tag)
        except ValueError:
            return None
