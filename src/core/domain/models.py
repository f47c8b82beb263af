"""Domain models (Pydantic v2).

`ScaffoldRequest` is what the prompt layer hands to the generator;
`RewriteReport` is what the identifier rewriter hands back for display.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from core.domain.identifiers import validate_package_identifier

LATEST_TEMPLATE_VERSION = "latest"


class ScaffoldRequest(BaseModel):
    """User inputs for one generator run."""

    project_name: str = Field(
        ...,
        min_length=1,
        description="Directory the template is cloned into.",
    )
    app_name: str = Field(
        ...,
        min_length=1,
        description="Written to app.json `name` and `displayName`.",
    )
    package_identifier: str = Field(
        ...,
        description="Reversed-domain Android application ID / iOS bundle identifier.",
    )
    template_version: str = Field(
        default=LATEST_TEMPLATE_VERSION,
        min_length=1,
        description="Git ref of the template; `latest` means the default branch.",
    )

    @field_validator("project_name")
    @classmethod
    def _no_path_separators(cls, value: str) -> str:
        if "/" in value or "\\" in value or value in (".", ".."):
            raise ValueError("project name must be a plain directory name")
        return value

    @field_validator("package_identifier")
    @classmethod
    def _valid_identifier(cls, value: str) -> str:
        return validate_package_identifier(value)

    @property
    def clone_ref(self) -> str | None:
        """Branch/tag to pass to `git clone --branch`, or None for the default branch."""

        if self.template_version == LATEST_TEMPLATE_VERSION:
            return None
        return self.template_version


class FileChange(BaseModel):
    """One rewritten file or relocated directory."""

    path: Path
    description: str
    replacements: int = Field(default=0, ge=0)


class RewriteReport(BaseModel):
    """Outcome of `rewrite_project`."""

    package_identifier: str
    previous_package: str
    old_source_dir: Path | None = None
    new_source_dir: Path | None = None
    moved_entries: list[str] = Field(default_factory=list)
    changes: list[FileChange] = Field(default_factory=list)

    def record(self, path: Path, description: str, replacements: int = 0) -> None:
        self.changes.append(FileChange(path=path, description=description, replacements=replacements))
