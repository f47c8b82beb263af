"""Fixed file locations inside a React Native template checkout."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.domain.identifiers import package_segments
from core.errors import ProjectIOError


@dataclass(frozen=True)
class TemplateLayout:
    """Paths the identifier rewriter touches, relative to `root`."""

    root: Path
    ios_name: str

    @property
    def app_manifest(self) -> Path:
        return self.root / "app.json"

    @property
    def android_app_dir(self) -> Path:
        return self.root / "android" / "app"

    @property
    def android_manifest(self) -> Path:
        return self.android_app_dir / "src" / "main" / "AndroidManifest.xml"

    @property
    def android_build_file(self) -> Path:
        return self.android_app_dir / "build.gradle"

    @property
    def android_java_root(self) -> Path:
        return self.android_app_dir / "src" / "main" / "java"

    @property
    def ios_dir(self) -> Path:
        return self.root / "ios"

    @property
    def info_plist(self) -> Path:
        return self.ios_dir / self.ios_name / "Info.plist"

    @property
    def xcode_project(self) -> Path:
        return self.ios_dir / f"{self.ios_name}.xcodeproj" / "project.pbxproj"

    def android_source_dir(self, package: str) -> Path:
        return self.android_java_root.joinpath(*package_segments(package))


def resolve_ios_name(root: Path, candidates: list[str]) -> str:
    """Pick the iOS project name: first candidate with an `.xcodeproj`, else the only one present."""

    ios_dir = root / "ios"
    for name in candidates:
        if (ios_dir / f"{name}.xcodeproj").is_dir():
            return name

    found = sorted(p.stem for p in ios_dir.glob("*.xcodeproj")) if ios_dir.is_dir() else []
    if len(found) == 1:
        return found[0]
    if not found:
        raise ProjectIOError(f"No .xcodeproj bundle found under {ios_dir}")
    raise ProjectIOError(
        f"Several .xcodeproj bundles under {ios_dir} ({', '.join(found)}); none matches {', '.join(candidates)}"
    )


def load_layout(root: Path, *, app_name: str, project_name: str) -> TemplateLayout:
    if not root.is_dir():
        raise ProjectIOError(f"Project root does not exist: {root}")
    candidates = list(dict.fromkeys([app_name, project_name]))
    return TemplateLayout(root=root, ios_name=resolve_ios_name(root, candidates))
