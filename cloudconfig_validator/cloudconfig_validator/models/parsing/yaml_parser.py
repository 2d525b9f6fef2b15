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

"""YAML loader for cloud-config documents with source location tracking."""

import yaml
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ...config import DEFAULT_DOCUMENT_PATH
from ...exceptions import FileReadError, ParseError

logger = logging.getLogger(__name__)

SourceMap = Dict[str, Dict[str, int]]


@dataclass(frozen=True)
class LoadedDocument:
    """A parsed cloud-config document and where each of its nodes came from."""
    data: Any
    source_map: SourceMap = field(default_factory=dict)
    file_path: Optional[Path] = None


def json_pointer_escape(token: str) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return token.replace("~", "~0").replace("/", "~1")


class YamlParser:
    """Reads cloud-config YAML from disk or memory. Performs no content validation."""

    @classmethod
    def _build_source_map_from_yaml(cls, content: str) -> SourceMap:
        """Build a mapping from JSON-pointer paths to 1-based line/column.

        This uses PyYAML's node tree so we can track locations without changing the
        parsed data shapes returned by safe_load. Path tokens come from the
        constructed keys (``on`` -> ``True``, ``0x1F`` -> ``31``) so they match the
        paths jsonschema reports.
        """
        source_map: SourceMap = {}

        loader = yaml.SafeLoader(content)
        try:
            root = loader.get_single_node()
        except yaml.YAMLError:
            # Parsing errors are reported by safe_load.
            loader.dispose()
            return source_map

        if root is None:
            loader.dispose()
            return source_map

        def _key_token(key_node) -> Optional[str]:
            try:
                return str(loader.construct_object(key_node, deep=True))
            except (yaml.YAMLError, ValueError):
                # Merge keys and invalid timestamps keep their source text.
                raw = getattr(key_node, "value", None)
                return None if raw is None else str(raw)

        def _record(path: str, node) -> None:
            mark = getattr(node, "start_mark", None)
            if mark is None:
                return
            # PyYAML uses 0-based line/column
            source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

        def _walk(node, path: str) -> None:
            _record(path, node)

            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    key = _key_token(key_node)
                    if key is None:
                        continue
                    _walk(value_node, f"{path}/{json_pointer_escape(key)}")
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, f"{path}/{idx}")

        try:
            _walk(root, "")
        finally:
            loader.dispose()
        return source_map

    @staticmethod
    def _parse_error(exc: yaml.YAMLError, origin: str) -> ParseError:
        mark = getattr(exc, "problem_mark", None)
        if mark is None:
            return ParseError(f"Failed to parse YAML {origin}: {exc}")
        return ParseError(
            f"Failed to parse YAML {origin}: {exc}",
            line=int(mark.line) + 1,
            column=int(mark.column) + 1,
        )

    def load_document_from_string(self, content: str, file_path: Optional[Path] = None) -> LoadedDocument:
        """Parse cloud-config YAML text.

        Args:
            content: YAML text
            file_path: Optional origin of the text, used in error messages

        Returns:
            LoadedDocument; an empty document parses to an empty mapping

        Raises:
            ParseError: If content is not well-formed YAML
        """
        origin = f"file {file_path}" if file_path is not None else "content"
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise self._parse_error(exc, origin) from exc
        except ValueError as exc:
            # Well-formed scalars the constructor rejects, e.g. a 2024-13-45 timestamp.
            raise ParseError(f"Failed to parse YAML {origin}: {exc}") from exc

        if data is None:
            data = {}

        return LoadedDocument(
            data=data,
            source_map=self._build_source_map_from_yaml(content),
            file_path=file_path,
        )

    def load_document(self, file_path: Union[str, Path] = DEFAULT_DOCUMENT_PATH) -> LoadedDocument:
        """Read and parse a cloud-config YAML file.

        Args:
            file_path: Path to the YAML file, ``./cloudconfig.yaml`` by default

        Returns:
            LoadedDocument with the parsed data and its source map

        Raises:
            FileReadError: If the file is missing, not a file, or cannot be read as UTF-8
            ParseError: If the file is not well-formed YAML
        """
        path = Path(file_path)

        if not path.exists():
            raise FileReadError(f"Cloud-config file not found: {path}")

        if not path.is_file():
            raise FileReadError(f"Path is not a file: {path}")

        logger.debug(f"Loading cloud-config file: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(f"Failed to read cloud-config file {path}: {exc}") from exc

        return self.load_document_from_string(content, file_path=path)


# Global parser instance
yaml_parser = YamlParser()
