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

"""YAML/JSON document parser with optional caching."""

import json
import yaml
import logging
from pathlib import Path
from typing import Any, Dict, Union

from ..config import validator_config
from ..exceptions import DocumentLoadError

logger = logging.getLogger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


class DocumentParser:
    """Parser for the data documents and schema files fed to the validator.

    ``.json`` files are decoded with :mod:`json`; everything else goes through
    ``yaml.safe_load``. An empty document loads as None.
    """

    def __init__(self, cache_enabled: bool = None):
        """Initialize document parser.

        Args:
            cache_enabled: Whether to enable caching. If None, uses global config.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else validator_config.cache_enabled
        self._cache: Dict[Path, Any] = {}

    def load_document(self, file_path: Union[str, Path]) -> Any:
        """Load a YAML or JSON document.

        Args:
            file_path: Path to the document

        Returns:
            Parsed document content

        Raises:
            DocumentLoadError: If the file cannot be read or parsed
        """
        path = Path(file_path)

        if not path.exists():
            raise DocumentLoadError(f"Document not found: {path}")

        if not path.is_file():
            raise DocumentLoadError(f"Path is not a file: {path}")

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading document from cache: {path}")
            return self._cache[path]

        logger.debug(f"Loading document: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f"Failed to read document {path}: {exc}") from exc

        if path.suffix.lower() in JSON_SUFFIXES:
            document = self._parse_json(content, str(path))
        else:
            document = self._parse_yaml(content, str(path))

        if self.cache_enabled:
            self._cache[path] = document
        return document

    def load_document_from_string(self, content: str, fmt: str = "yaml") -> Any:
        """Load a document from string content.

        Args:
            content: Document text
            fmt: ``"yaml"`` or ``"json"``

        Raises:
            DocumentLoadError: If content cannot be parsed
        """
        if fmt == "json":
            return self._parse_json(content, "<string>")
        if fmt == "yaml":
            return self._parse_yaml(content, "<string>")
        raise DocumentLoadError(f"Unsupported document format: {fmt!r}")

    @staticmethod
    def _parse_json(content: str, source: str) -> Any:
        if not content.strip():
            return None
        try:
            return json.loads(content)
        except json.JSONDecodeError as exc:
            raise DocumentLoadError(f"Failed to parse JSON {source}: {exc}") from exc

    @staticmethod
    def _parse_yaml(content: str, source: str) -> Any:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise DocumentLoadError(f"Failed to parse YAML {source}: {exc}") from exc

    def clear_cache(self):
        """Clear the document cache."""
        self._cache.clear()
        logger.debug("Document cache cleared")


# Global parser instance
document_parser = DocumentParser()
