"""Template checkout via the `git` CLI."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from core.config import AppSettings
from core.errors import CloneError

logger = logging.getLogger(__name__)


def build_clone_command(
    *,
    repo: str,
    dest_dir: Path,
    ref: str | None,
    git_executable: str = "git",
    depth: int | None = None,
) -> list[str]:
    cmd = [git_executable, "clone"]
    if ref:
        cmd += ["--branch", ref]
    if depth:
        cmd += ["--depth", str(depth)]
    cmd += [repo, str(dest_dir)]
    return cmd


def clone_template(
    *,
    dest_dir: Path,
    ref: str | None,
    repo: str | None = None,
    settings: AppSettings | None = None,
) -> Path:
    """Clone the template into `dest_dir` (default branch when `ref` is None)."""

    settings = settings or AppSettings()
    repo = repo or settings.template_repo

    if dest_dir.exists() and any(dest_dir.iterdir()):
        raise CloneError(f"Destination {dest_dir} already exists and is not empty")

    cmd = build_clone_command(
        repo=repo,
        dest_dir=dest_dir,
        ref=ref,
        git_executable=settings.git_executable,
        depth=settings.clone_depth,
    )
    logger.debug("Running %s", " ".join(cmd))
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except FileNotFoundError as exc:
        raise CloneError(f"git executable not found: {settings.git_executable}") from exc

    if proc.returncode != 0:
        msg = proc.stderr.strip() or proc.stdout.strip()
        if not msg:
            msg = f"git clone failed (exit {proc.returncode})"
        raise CloneError(msg)
    return dest_dir
