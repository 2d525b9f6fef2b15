from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    yaml_path: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def lookup_source(
    source_map: Optional[Dict[str, Dict[str, int]]],
    yaml_path: Optional[str],
    file_path: Optional[Path] = None,
) -> SourceLocation:
    """Find where a JSON-pointer path was written in the YAML source.

    The root path "" is a valid key, so only ``None`` means "no path".
    """
    if not source_map or yaml_path is None:
        return SourceLocation(file_path=file_path, yaml_path=yaml_path)

    entry = source_map.get(yaml_path)
    if not entry:
        return SourceLocation(file_path=file_path, yaml_path=yaml_path)

    return SourceLocation(
        file_path=file_path,
        yaml_path=yaml_path,
        line=entry.get("line"),
        column=entry.get("column"),
    )


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc or loc.file_path is None:
        return ""

    if loc.line is not None and loc.column is not None:
        return f"{loc.file_path}:{loc.line}:{loc.column}"
    if loc.line is not None:
        return f"{loc.file_path}:{loc.line}"
    return str(loc.file_path)
