"""Generator configuration.

Centralizes environment variables (pydantic-settings) so the CLI and the
adapters read the template repo and tool names the same way.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from dotenv import dotenv_values, set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TEMPLATE_REPO = "https://github.com/your-username/react-native-template"
APP_DIR_NAME = "rn-scaffold"
ENV_FILE_HEADER = "# rn-scaffold user config (.env)\n"


def get_user_config_dir() -> Path:
    """`%APPDATA%`, `~/Library/Application Support` or `$XDG_CONFIG_HOME` (default `~/.config`)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return base / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_user_env_vars() -> dict[str, str]:
    env_path = get_user_env_file()
    if not env_path.exists():
        return {}
    return {k: v for k, v in dotenv_values(env_path).items() if v is not None}


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Set keys in the user's .env file, creating it on first use.

    Other keys already in the file are kept; `None` values are skipped.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    if not env_path.exists():
        env_path.write_text(ENV_FILE_HEADER, encoding="utf-8")

    for key, value in values.items():
        if value is not None:
            set_key(env_path, key, value, quote_mode="never")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Precedence: process environment, then `./.env`, then the user .env.
    """

    model_config = SettingsConfigDict(
        env_prefix="RN_SCAFFOLD_",
        extra="ignore",
        case_sensitive=False,
        # later files win
        env_file=(str(get_user_env_file()), ".env"),
        env_file_encoding="utf-8",
    )

    template_repo: str = Field(
        default=DEFAULT_TEMPLATE_REPO,
        min_length=1,
        description="Git URL (or local path) of the React Native template.",
    )
    default_template_version: str = Field(
        default="latest",
        min_length=1,
        description="Template ref used when --version is not given.",
    )
    install_command: Literal["npm", "yarn"] = Field(
        default="npm",
        description="Package manager used to install JavaScript dependencies.",
    )
    git_executable: str = Field(
        default="git",
        min_length=1,
        description="git binary used for cloning.",
    )
    clone_depth: int | None = Field(
        default=None,
        ge=1,
        description="Shallow clone depth; full clone when unset.",
    )
