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

"""Rendering of validation outcomes for standard output."""

import base64
import json
from typing import Any, Dict, List, Optional

from .models.cloud_config_schema import InvalidDocument, ValidationIssue, ValidationResult
from .models.parsing.yaml_parser import LoadedDocument, SourceMap
from .utils.source_location import lookup_source


_JSON_KEY_TYPES = (str, int, float, bool, type(None))


def to_json_compatible(value: Any) -> Any:
    """Convert YAML-native data into something ``json.dumps`` accepts.

    Mapping keys JSON cannot hold (dates from an unquoted ``2024-06-05:``, for
    instance) become ``str(key)``. ``!!set`` values become lists sorted by
    their string form and ``!!binary`` values become base64 text. Other values
    are left for ``json.dumps(default=str)``.
    """
    if isinstance(value, dict):
        return {
            (key if isinstance(key, _JSON_KEY_TYPES) else str(key)): to_json_compatible(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [to_json_compatible(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return [to_json_compatible(item) for item in sorted(value, key=str)]
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    return value


def issue_to_dict(issue: ValidationIssue, source_map: Optional[SourceMap] = None) -> Dict[str, Any]:
    """Convert an issue to a JSON-ready record.

    ``line`` and ``column`` are only present when the source map knows the path.
    """
    record: Dict[str, Any] = {
        'path': issue.path,
        'keyword': issue.keyword,
        'message': issue.message,
        'schema_path': issue.schema_path,
    }
    loc = lookup_source(source_map, issue.path)
    if loc.line is not None:
        record['line'] = loc.line
    if loc.column is not None:
        record['column'] = loc.column
    return record


def issues_to_list(result: InvalidDocument, source_map: Optional[SourceMap] = None) -> List[Dict[str, Any]]:
    return [issue_to_dict(issue, source_map) for issue in result.issues]


def render(result: ValidationResult, source_map: Optional[SourceMap] = None) -> str:
    """Render a validation result as pretty-printed JSON.

    A valid document keeps its structure and passes through
    :func:`to_json_compatible`. An invalid one is reported as the ordered list
    of issues, in the order the validator produced them. Remaining values JSON
    cannot represent (YAML timestamps, for instance) are rendered with
    ``str()``.
    """
    if isinstance(result, InvalidDocument):
        payload: Any = issues_to_list(result, source_map)
    else:
        payload = to_json_compatible(result.document)
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


def render_loaded(result: ValidationResult, loaded: LoadedDocument) -> str:
    """Render a result for a document loaded from YAML, annotating issues with line/column."""
    return render(result, loaded.source_map)
