"""Error taxonomy for the generator.

Every failure the CLI reports is a `ScaffoldError`. Adapters translate
low-level exceptions (`OSError`, `json.JSONDecodeError`, subprocess
failures) into one of these and chain the original with `raise ... from`.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for errors surfaced to the user as a single failure."""


class IdentifierValidationError(ScaffoldError, ValueError):
    """A user-supplied identifier is syntactically invalid."""


class ProjectIOError(ScaffoldError):
    """A template file is missing, unreadable or unwritable."""


class FilesystemError(ScaffoldError):
    """A directory could not be created, moved or removed."""


class ManifestParseError(ScaffoldError):
    """`app.json` is not a JSON object."""


class CloneError(ScaffoldError):
    """`git clone` of the template repository failed."""


class InstallError(ScaffoldError):
    """The dependency install command failed."""
