"""Text and JSON editing of template files.

Edits are plain read-modify-write cycles on UTF-8 text: regex
substitution for XML/Gradle/pbxproj sources (no structural parsing) and
`json` for `app.json`. OS-level and decoding failures surface as
`ProjectIOError` (`ManifestParseError` for `app.json`).
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from core.errors import ManifestParseError, ProjectIOError, ScaffoldError

logger = logging.getLogger(__name__)


def read_text(
    path: Path,
    *,
    errors: str = "strict",
    decode_error: type[ScaffoldError] = ProjectIOError,
) -> str:
    """Read `path` as UTF-8.

    `errors="surrogateescape"` lets files in a legacy encoding round-trip
    byte for byte through `write_text` with the same setting.
    """

    try:
        return path.read_text(encoding="utf-8", errors=errors)
    except UnicodeDecodeError as exc:
        raise decode_error(f"{path} is not valid UTF-8 (byte {exc.start}: {exc.reason})") from exc
    except OSError as exc:
        raise ProjectIOError(f"Cannot read {path}: {exc.strerror or exc}") from exc


def write_text(path: Path, content: str, *, errors: str = "strict") -> None:
    try:
        path.write_text(content, encoding="utf-8", errors=errors)
    except OSError as exc:
        raise ProjectIOError(f"Cannot write {path}: {exc.strerror or exc}") from exc


def substitute(
    text: str,
    pattern: re.Pattern[str],
    replacement: str,
    *,
    first_only: bool = False,
) -> tuple[str, int]:
    """Replace matches of `pattern` with the literal `replacement`.

    Named groups `prefix` and `suffix`, when present in the pattern, are
    kept around the replacement so callers only swap the value itself.
    """

    def _render(match: re.Match[str]) -> str:
        groups = match.groupdict()
        return f"{groups.get('prefix') or ''}{replacement}{groups.get('suffix') or ''}"

    return pattern.subn(_render, text, count=1 if first_only else 0)


def rewrite_file(
    path: Path,
    pattern: re.Pattern[str],
    replacement: str,
    *,
    first_only: bool = False,
    errors: str = "strict",
) -> int:
    """Apply `substitute` to a file in place; returns the number of replacements.

    The file is left untouched when nothing matches.
    """

    original = read_text(path, errors=errors)
    updated, count = substitute(original, pattern, replacement, first_only=first_only)
    if count:
        write_text(path, updated, errors=errors)
    logger.debug("%s: %d replacement(s) for %s", path, count, pattern.pattern)
    return count


def find_first(path: Path, pattern: re.Pattern[str], group: str = "value") -> str | None:
    match = pattern.search(read_text(path))
    return match.group(group) if match else None


def update_json_fields(path: Path, fields: dict[str, Any]) -> dict[str, Any]:
    """Set top-level keys of a JSON object file, keeping all other keys in order.

    Output uses 2-space indentation and keeps non-ASCII characters as-is.
    A trailing newline is written only if the original file had one.
    """

    raw = read_text(path, decode_error=ManifestParseError)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(f"{path.name} is not valid JSON: {exc.msg} (line {exc.lineno})") from exc
    if not isinstance(data, dict):
        raise ManifestParseError(f"{path.name} must contain a JSON object, got {type(data).__name__}")

    data.update(fields)
    rendered = json.dumps(data, ensure_ascii=False, indent=2)
    if raw.endswith("\n"):
        rendered += "\n"
    write_text(path, rendered)
    return data
