"""Relocation of the Android source package directory.

`java/com/oldname/...` becomes `java/<new/package/path>/...`. Each direct
child of the old package directory is moved with its whole subtree, then
the emptied directories are pruned back up to the java root.
"""

from __future__ import annotations

import logging
import re
import shutil
import tempfile
from pathlib import Path

from adapters.project_files import rewrite_file
from core.errors import FilesystemError

logger = logging.getLogger(__name__)

SOURCE_SUFFIXES = (".java", ".kt")


def _is_within(path: Path, parent: Path) -> bool:
    return path == parent or path.is_relative_to(parent)


def _move_children(src: Path, dest: Path) -> list[str]:
    moved: list[str] = []
    for entry in sorted(src.iterdir()):
        target = dest / entry.name
        if target.exists():
            raise FilesystemError(f"Cannot move {entry}: {target} already exists")
        shutil.move(str(entry), str(target))
        moved.append(entry.name)
    return moved


def _prune_empty_dirs(start: Path, *, stop: Path, keep: Path) -> None:
    """Remove `start` and its parents while empty, up to (excluding) `stop`.

    Directories on the path to `keep` are never removed.
    """

    current = start
    while current != stop and _is_within(current, stop) and not _is_within(keep, current):
        if any(current.iterdir()):
            break
        current.rmdir()
        logger.debug("Removed empty directory %s", current)
        current = current.parent


def relocate_package_dir(*, java_root: Path, old_dir: Path, new_dir: Path) -> list[str]:
    """Move the contents of `old_dir` into `new_dir`; returns the moved entry names."""

    if not old_dir.is_dir():
        raise FilesystemError(f"Android source directory not found: {old_dir}")
    if old_dir.resolve() == new_dir.resolve():
        raise FilesystemError(f"Android sources are already located at {new_dir}")

    try:
        if _is_within(new_dir, old_dir):
            # new_dir sits under old_dir: stage the children outside first
            staging = Path(tempfile.mkdtemp(prefix=".rn-scaffold-", dir=java_root))
            moved = _move_children(old_dir, staging)
            new_dir.mkdir(parents=True, exist_ok=True)
            _move_children(staging, new_dir)
            staging.rmdir()
        else:
            new_dir.mkdir(parents=True, exist_ok=True)
            moved = _move_children(old_dir, new_dir)
        _prune_empty_dirs(old_dir, stop=java_root, keep=new_dir)
    except (OSError, shutil.Error) as exc:
        raise FilesystemError(f"Failed to relocate {old_dir} -> {new_dir}: {exc}") from exc

    logger.info("Moved %d entries from %s to %s", len(moved), old_dir, new_dir)
    return moved


def rewrite_package_declarations(source_dir: Path, old_package: str, new_package: str) -> list[Path]:
    """Point `package`/`import` statements of relocated sources at the new package.

    Matches `old_package` only as a whole dotted prefix, so `com.app` does
    not touch `com.apple`. Sources in a legacy encoding are rewritten
    without touching their non-UTF-8 bytes.
    """

    if old_package == new_package:
        return []

    pattern = re.compile(
        rf"(?P<prefix>^\s*(?:package|import(?:\s+static)?)\s+){re.escape(old_package)}(?=[.;\s])",
        re.MULTILINE,
    )
    changed: list[Path] = []
    for path in sorted(source_dir.rglob("*")):
        if path.is_file() and path.suffix in SOURCE_SUFFIXES:
            if rewrite_file(path, pattern, new_package, errors="surrogateescape"):
                changed.append(path)
    return changed
