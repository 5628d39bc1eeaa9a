# Copyright 2026 TIER IV, inc.
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

"""Loading of schema and instance documents from JSON or YAML."""

import json
import logging
from pathlib import Path
from typing import Any, Union

import yaml

from .exceptions import SchemaLoadError

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def load_document(file_path: Union[str, Path]) -> Any:
    """Load a schema or instance document from disk.

    ``.json`` files are read with the json module, anything else is parsed as
    YAML (a superset of JSON).

    Args:
        file_path: Path to the document

    Returns:
        The parsed value tree

    Raises:
        SchemaLoadError: If the file cannot be read or parsed
    """
    path = Path(file_path)

    if not path.exists():
        raise SchemaLoadError(f"Document not found: {path}")

    if not path.is_file():
        raise SchemaLoadError(f"Path is not a file: {path}")

    logger.debug(f"Loading document: {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaLoadError(f"Failed to read document {path}: {exc}") from exc

    if path.suffix.lower() == ".json":
        try:
            return json.loads(content)
        except json.JSONDecodeError as exc:
            raise SchemaLoadError(f"Failed to parse JSON file {path}: {exc}") from exc

    if path.suffix.lower() not in _YAML_SUFFIXES:
        logger.debug(f"Unknown suffix '{path.suffix}', parsing {path} as YAML")
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise SchemaLoadError(f"Failed to parse YAML file {path}: {exc}") from exc


def load_document_from_string(content: str) -> Any:
    """Parse a JSON or YAML document held in a string."""
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise SchemaLoadError(f"Failed to parse document content: {exc}") from exc
