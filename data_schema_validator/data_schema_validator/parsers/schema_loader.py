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

"""Load schema definition files into a registry."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import List, Optional, Union

from ..config import validator_config
from ..exceptions import DocumentLoadError, SchemaLoadError
from ..registry.schema_registry import SchemaRegistry
from ..schema.meta_schema import check_schema_definition
from .document_parser import DocumentParser, document_parser

logger = logging.getLogger(__name__)

SCHEMA_SUFFIXES = (".schema.yaml", ".schema.yml", ".schema.json")


def is_schema_file(path: Path) -> bool:
    """Return True for ``<id>.schema.(yaml|yml|json)`` files, skipping dotfiles."""
    if path.name.startswith(".") or path.name.endswith("~"):
        return False
    return path.name.endswith(SCHEMA_SUFFIXES)


def schema_id_from_path(path: Path) -> str:
    """Derive the schema id from a file name.

    Example: ``notify.schema.yaml`` -> ``notify``
    """
    for suffix in SCHEMA_SUFFIXES:
        if path.name.endswith(suffix):
            schema_id = path.name[: -len(suffix)]
            if not schema_id:
                raise SchemaLoadError(f"Missing schema id before '{suffix}' in '{path.name}'")
            return schema_id
    raise SchemaLoadError(
        f"Schema file name must end with one of {SCHEMA_SUFFIXES}: '{path.name}'"
    )


def load_schema_file(
    registry: SchemaRegistry,
    file_path: Union[str, Path],
    schema_id: Optional[str] = None,
    *,
    strict: Optional[bool] = None,
    parser: Optional[DocumentParser] = None,
) -> str:
    """Load one schema file and register it.

    Args:
        registry: Registry receiving the schema
        file_path: Path to the schema file
        schema_id: Id to register under; derived from the file name when None
        strict: Check the definition against the meta-schema first.
            If None, uses global config.
        parser: Document parser to read the file with

    Returns:
        The schema id the file was registered under

    Raises:
        SchemaLoadError: If the file cannot be read, is not a mapping, or
            fails the meta-schema check in strict mode
    """
    path = Path(file_path)
    parser = parser or document_parser
    strict = validator_config.strict_schema_files if strict is None else strict

    if schema_id is None:
        schema_id = schema_id_from_path(path)

    try:
        definition = parser.load_document(path)
    except DocumentLoadError as exc:
        raise SchemaLoadError(str(exc)) from exc

    if not isinstance(definition, Mapping):
        raise SchemaLoadError(
            f"Top-level of '{path.name}' must be a mapping, not '{type(definition).__name__}'"
        )

    if strict:
        problems = check_schema_definition(definition)
        if problems:
            details = "\n".join(f"  - {problem}" for problem in problems)
            raise SchemaLoadError(f"Invalid schema definition in {path}:\n{details}")

    if registry.add(schema_id, definition):
        logger.debug(f"Loaded schema '{schema_id}' from '{path.name}'")
    return schema_id


def load_schema_directory(
    registry: SchemaRegistry,
    schema_dir: Union[str, Path],
    *,
    strict: Optional[bool] = None,
    parser: Optional[DocumentParser] = None,
    errors: Optional[List[SchemaLoadError]] = None,
) -> int:
    """Load every schema file found directly in ``schema_dir``.

    Files that fail to load are logged and skipped; when ``errors`` is given
    the failures are appended to it as well.

    Returns:
        Number of schemas registered
    """
    directory = Path(schema_dir)
    if not directory.is_dir():
        logger.warning(f"Schema directory does not exist: '{directory}'")
        return 0

    count = 0
    for file in sorted(directory.iterdir()):
        if not file.is_file() or not is_schema_file(file):
            continue
        try:
            schema_id = schema_id_from_path(file)
            if registry.has(schema_id):
                logger.warning(f"Schema '{schema_id}' already registered, skipping '{file.name}'")
                continue
            load_schema_file(registry, file, schema_id, strict=strict, parser=parser)
            count += 1
        except SchemaLoadError as err:
            logger.error(f"Failed to load schema from '{file}': {err}")
            if errors is not None:
                errors.append(err)

    return count
