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

"""JSON Schema loader for the bundled cloud-config schemas."""

import json
import logging
from pathlib import Path
from typing import Dict, List

from ..config import DEFAULT_SCHEMA_VERSION
from ..exceptions import SchemaError

logger = logging.getLogger(__name__)

SCHEMA_FILE_NAME = "cloud-config.json"

# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, dict] = {}


def get_schema_dir() -> Path:
    """Return the directory holding one sub-directory per bundled schema version."""
    return Path(__file__).parent.parent / "schema"


def get_schema_path(version: str) -> Path:
    """Get the path to the cloud-config JSON Schema file for the given version.

    Args:
        version: Schema version directory name (e.g., "v22.3")

    Returns:
        Path to the schema file
    """
    return get_schema_dir() / version / SCHEMA_FILE_NAME


def available_schema_versions() -> List[str]:
    """List the schema versions shipped with the package, sorted by name."""
    schema_dir = get_schema_dir()
    if not schema_dir.is_dir():
        return []
    return sorted(
        version_dir.name
        for version_dir in schema_dir.iterdir()
        if version_dir.is_dir() and (version_dir / SCHEMA_FILE_NAME).exists()
    )


def load_schema(version: str = DEFAULT_SCHEMA_VERSION) -> dict:
    """Load the cloud-config JSON Schema for the given version.

    Args:
        version: Schema version directory name (e.g., "v22.3")

    Returns:
        Schema dictionary. Callers must treat it as read-only, it is shared
        through the cache.

    Raises:
        SchemaError: If the schema file doesn't exist or is not valid JSON
    """
    if version in _SCHEMA_CACHE:
        logger.debug(f"Loading schema from cache: {version}")
        return _SCHEMA_CACHE[version]

    schema_path = get_schema_path(version)
    if not schema_path.is_file():
        raise SchemaError(
            f"Schema file not found for version {version}: {schema_path} "
            f"(available: {', '.join(available_schema_versions()) or 'none'})"
        )

    logger.debug(f"Loading schema file: {schema_path}")
    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaError(
            f"Invalid JSON in schema file {schema_path}: {e.msg} (line {e.lineno}, column {e.colno})"
        ) from e
    except OSError as e:
        raise SchemaError(f"Failed to read schema file {schema_path}: {e}") from e

    if not isinstance(schema, dict):
        raise SchemaError(f"Schema file {schema_path} must contain a JSON object, got {type(schema).__name__}")

    # Cache the schema
    _SCHEMA_CACHE[version] = schema

    return schema


def clear_cache() -> None:
    """Clear the schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()
