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

"""Recursive validation of data against a schema definition.

Every check on a node is evaluated; a type mismatch does not stop the
allowed-values, bound, length or pattern checks of the same node. Violations
are returned in depth-first pre-order: each call builds its own list and the
caller extends its list with the result at the point of descent.
"""

from __future__ import annotations

import math
import numbers
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ..models.schema_types import REF_KEY, SchemaType
from ..models.violation import (
    ROOT_PATH,
    DataPath,
    Violation,
    data_violation,
    join_index,
    join_property,
    schema_violation,
)
from ..registry.schema_registry import SchemaRegistry

DEFAULT_MAX_DEPTH = 200

INVALID_TYPE = "Invalid value type"
EXTRA_PROPERTY = "Extra property found"
MISSING_PROPERTY = "Not exist"

_SEQUENCE_TYPES = (list, tuple)


@dataclass(frozen=True)
class _Context:
    registry: Optional[SchemaRegistry]
    max_depth: int


# ---- value predicates -------------------------------------------------------


def _is_real(value: Any) -> bool:
    # bool is an int subclass but never a number here
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    # integers are always finite; math.isfinite overflows on ints beyond float range
    return _is_real(value) and (isinstance(value, numbers.Integral) or math.isfinite(value))


def _is_integer(value: Any) -> bool:
    if not _is_number(value):
        return False
    return isinstance(value, numbers.Integral) or float(value).is_integer()


def _has_length(value: Any) -> bool:
    return isinstance(value, str) or isinstance(value, _SEQUENCE_TYPES)


def _is_allowed(value: Any, allowed) -> bool:
    for candidate in allowed:
        if isinstance(candidate, bool) != isinstance(value, bool):
            continue
        if candidate == value:
            return True
    return False


@lru_cache(maxsize=256)
def _compile_pattern(pattern: str) -> re.Pattern:
    return re.compile(pattern)


# ---- shared constraint checks ---------------------------------------------


def _bad_schema_value(key: str, value: Any) -> Violation:
    return schema_violation(f'invalid schema, bad "{key}" value', **{key: value})


def _check_type(ok: bool, schema_type: SchemaType, data: Any, path: DataPath) -> List[Violation]:
    if ok:
        return []
    return [data_violation(path, INVALID_TYPE, value=data, type=schema_type.value)]


def _check_values(schema: Mapping[str, Any], data: Any, path: DataPath) -> List[Violation]:
    if "values" not in schema:
        return []
    allowed = schema["values"]
    if not isinstance(allowed, _SEQUENCE_TYPES):
        return [_bad_schema_value("values", allowed)]
    if _is_allowed(data, allowed):
        return []
    return [
        data_violation(
            path,
            "Value does not satisfy allowed values constraint",
            value=data,
            values=allowed,
        )
    ]


def _check_bound(
    schema: Mapping[str, Any],
    key: str,
    measured: Optional[Any],
    data: Any,
    path: DataPath,
    *,
    upper: bool,
    integral: bool = False,
) -> List[Violation]:
    """Check an inclusive bound stored under ``key``.

    ``measured`` is the quantity compared with the bound (the value itself or
    its length); None means the bound does not apply to this value.
    """
    if key not in schema:
        return []
    bound = schema[key]
    if not _is_real(bound) or (integral and not isinstance(bound, numbers.Integral)):
        return [_bad_schema_value(key, bound)]
    if measured is None:
        return []
    failed = measured > bound if upper else measured < bound
    if not failed:
        return []
    return [data_violation(path, f"Value does not satisfy {key} constraint", value=data, **{key: bound})]


def _check_pattern(schema: Mapping[str, Any], data: Any, path: DataPath) -> List[Violation]:
    if "pattern" not in schema:
        return []
    pattern = schema["pattern"]
    try:
        compiled = pattern if isinstance(pattern, re.Pattern) else _compile_pattern(pattern)
    except (re.error, TypeError):
        return [_bad_schema_value("pattern", pattern)]

    # unanchored: a match anywhere in the string satisfies the constraint
    if not isinstance(data, str) or compiled.search(data) is not None:
        return []
    return [data_violation(path, "Value does not satisfy pattern constraint", value=data, pattern=pattern)]


# ---- per-type validators -------------------------------------------------


def _validate_number(
    schema_type: SchemaType, schema: Mapping[str, Any], data: Any, path: DataPath, ctx: _Context, depth: int
) -> List[Violation]:
    is_valid = _is_integer(data) if schema_type is SchemaType.INTEGER else _is_number(data)
    measured = data if _is_real(data) else None

    issues = _check_type(is_valid, schema_type, data, path)
    issues.extend(_check_values(schema, data, path))
    issues.extend(_check_bound(schema, "minimum", measured, data, path, upper=False))
    issues.extend(_check_bound(schema, "maximum", measured, data, path, upper=True))
    return issues


def _validate_string(
    schema_type: SchemaType, schema: Mapping[str, Any], data: Any, path: DataPath, ctx: _Context, depth: int
) -> List[Violation]:
    length = len(data) if _has_length(data) else None

    issues = _check_type(isinstance(data, str), schema_type, data, path)
    issues.extend(_check_values(schema, data, path))
    issues.extend(_check_bound(schema, "minLength", length, data, path, upper=False, integral=True))
    issues.extend(_check_bound(schema, "maxLength", length, data, path, upper=True, integral=True))
    issues.extend(_check_pattern(schema, data, path))
    return issues


def _validate_boolean(
    schema_type: SchemaType, schema: Mapping[str, Any], data: Any, path: DataPath, ctx: _Context, depth: int
) -> List[Violation]:
    return _check_type(isinstance(data, bool), schema_type, data, path)


def _validate_object(
    schema_type: SchemaType, schema: Mapping[str, Any], data: Any, path: DataPath, ctx: _Context, depth: int
) -> List[Violation]:
    is_mapping = isinstance(data, Mapping)
    issues = _check_type(is_mapping, schema_type, data, path)

    if "properties" not in schema:
        issues.append(schema_violation('invalid schema, missing "properties" key'))
        return issues
    properties = schema["properties"]
    if not isinstance(properties, Mapping):
        issues.append(_bad_schema_value("properties", properties))
        return issues

    # A non-mapping value has no keys: no extra properties, every required one is missing
    fields: Mapping[Any, Any] = data if is_mapping else {}
    required = schema.get("required") or ()
    if not isinstance(required, (list, tuple, set, frozenset)):
        issues.append(_bad_schema_value("required", required))
        required = ()

    for key in fields:
        if key not in properties:
            issues.append(data_violation(path, EXTRA_PROPERTY, property=key))

    for name, sub_schema in properties.items():
        if name not in fields:
            if name in required:
                issues.append(data_violation(path, MISSING_PROPERTY, property=name))
            continue
        issues.extend(_validate(sub_schema, fields[name], join_property(path, name), ctx, depth + 1))

    return issues


def _validate_array(
    schema_type: SchemaType, schema: Mapping[str, Any], data: Any, path: DataPath, ctx: _Context, depth: int
) -> List[Violation]:
    is_sequence = isinstance(data, _SEQUENCE_TYPES)
    issues = _check_type(is_sequence, schema_type, data, path)

    if "items" not in schema:
        issues.append(schema_violation('invalid schema, missing "items" key'))
        return issues
    if not is_sequence:
        return issues

    item_schema = schema["items"]
    for index, item in enumerate(data):
        issues.extend(_validate(item_schema, item, join_index(path, index), ctx, depth + 1))
    return issues


_NodeValidator = Callable[
    [SchemaType, Mapping[str, Any], Any, DataPath, _Context, int], List[Violation]
]

_NODE_VALIDATORS: Dict[SchemaType, _NodeValidator] = {
    SchemaType.NUMBER: _validate_number,
    SchemaType.INTEGER: _validate_number,
    SchemaType.STRING: _validate_string,
    SchemaType.BOOLEAN: _validate_boolean,
    SchemaType.OBJECT: _validate_object,
    SchemaType.ARRAY: _validate_array,
}


# ---- reference resolution & dispatch -----------------------------------------


def _resolve_reference(schema: Any, registry: Optional[SchemaRegistry]) -> Tuple[Any, Optional[Violation]]:
    """Follow ``$ref`` nodes until a concrete schema is reached.

    Sibling keys of a reference node are ignored. A chain that comes back to an
    id it already visited is reported instead of being followed.
    """
    visited: List[str] = []
    while isinstance(schema, Mapping) and REF_KEY in schema:
        ref = schema[REF_KEY]
        if ref in visited:
            return None, schema_violation(f'circular schema reference "{ref}"')
        visited.append(ref)

        if registry is None or not isinstance(ref, str) or not registry.has(ref):
            return None, schema_violation(f'"{ref}" schema does not exist')
        schema = registry.get(ref)
    return schema, None


def _validate(schema: Any, data: Any, path: DataPath, ctx: _Context, depth: int) -> List[Violation]:
    if depth > ctx.max_depth:
        return [data_violation(path, "maximum validation depth exceeded", maxDepth=ctx.max_depth)]

    schema, issue = _resolve_reference(schema, ctx.registry)
    if issue is not None:
        return [issue]

    if not isinstance(schema, Mapping):
        return [schema_violation("invalid schema, expected a mapping")]

    raw_type = schema.get("type")
    schema_type = SchemaType.from_tag(raw_type)
    if schema_type is None:
        return [schema_violation(f'unknown schema type given "{raw_type}"')]

    return _NODE_VALIDATORS[schema_type](schema_type, schema, data, path, ctx, depth)


def validate_node(
    schema: Any,
    data: Any,
    path: DataPath = ROOT_PATH,
    *,
    registry: Optional[SchemaRegistry] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> List[Violation]:
    """Validate ``data`` against ``schema``.

    Args:
        schema: Schema definition (a mapping, possibly a ``$ref`` node)
        data: Value to validate
        path: Path of ``data`` within the validated document
        registry: Registry used to resolve ``$ref`` nodes
        max_depth: Deepest property/index nesting that is descended into

    Returns:
        List of violations in depth-first pre-order; empty when data is valid
    """
    return _validate(schema, data, path, _Context(registry=registry, max_depth=max_depth), 0)
