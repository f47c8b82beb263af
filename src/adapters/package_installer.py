"""JavaScript dependency installation inside the generated project."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from core.config import AppSettings
from core.errors import InstallError

logger = logging.getLogger(__name__)

INSTALL_ARGS: dict[str, list[str]] = {
    "npm": ["npm", "install"],
    "yarn": ["yarn", "install"],
}

START_COMMANDS: dict[str, str] = {
    "npm": "npm start",
    "yarn": "yarn start",
}


def install_dependencies(project_root: Path, *, settings: AppSettings | None = None) -> None:
    settings = settings or AppSettings()
    cmd = INSTALL_ARGS[settings.install_command]
    logger.debug("Running %s in %s", " ".join(cmd), project_root)
    try:
        proc = subprocess.run(cmd, cwd=project_root, capture_output=True, text=True, check=False)
    except FileNotFoundError as exc:
        raise InstallError(f"{cmd[0]} not found on PATH") from exc

    if proc.returncode != 0:
        msg = proc.stderr.strip() or proc.stdout.strip()
        if not msg:
            msg = f"{' '.join(cmd)} failed (exit {proc.returncode})"
        raise InstallError(msg)
