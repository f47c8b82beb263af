"""Identifier propagation across a freshly cloned template.

Given the user's app name and package identifier, rewrites the manifest,
the Android descriptors and source directory, and the iOS bundle
identifier. Steps run in order and stop at the first error; nothing is
rolled back, since the checkout is disposable and can simply be cloned
again.

Substitution policy per file:
- `Info.plist`: first `CFBundleIdentifier` pair only (the key is unique).
- Android manifest, `build.gradle`, `project.pbxproj`: every occurrence,
  since build variants and configurations repeat the declarations.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from adapters.project_files import find_first, rewrite_file, update_json_fields
from adapters.source_tree import relocate_package_dir, rewrite_package_declarations
from core.domain.identifiers import (
    default_template_package,
    is_dotted_identifier,
    validate_package_identifier,
)
from core.domain.models import RewriteReport
from core.errors import FilesystemError
from core.services.template_layout import TemplateLayout, load_layout

logger = logging.getLogger(__name__)

ANDROID_PACKAGE_ATTR = re.compile(r'(?P<prefix>\bpackage=")(?P<value>[^"]+)(?P<suffix>")')
GRADLE_APPLICATION_ID = re.compile(r'(?P<prefix>\bapplicationId\s*=?\s*")(?P<value>[^"]*)(?P<suffix>")')
GRADLE_NAMESPACE = re.compile(r'(?P<prefix>\bnamespace\s*=?\s*")(?P<value>[^"]*)(?P<suffix>")')
PLIST_BUNDLE_IDENTIFIER = re.compile(r"<key>CFBundleIdentifier</key>\s*<string>(?P<value>.*?)</string>")
PBX_BUNDLE_IDENTIFIER = re.compile(r"(?P<prefix>PRODUCT_BUNDLE_IDENTIFIER = )(?P<value>[^;\n]*)(?P<suffix>;)")


def update_app_manifest(layout: TemplateLayout, app_name: str, report: RewriteReport) -> None:
    update_json_fields(layout.app_manifest, {"name": app_name, "displayName": app_name})
    report.record(layout.app_manifest, "name/displayName", 2)


def discover_android_package(layout: TemplateLayout, project_name: str) -> str:
    """Package the checkout currently declares.

    Looks at the manifest `package` attribute, then the Gradle `namespace`
    (the source package) and `applicationId`; falls back to `com.<project name>`.
    """

    found = find_first(layout.android_manifest, ANDROID_PACKAGE_ATTR)
    if not found:
        for pattern in (GRADLE_NAMESPACE, GRADLE_APPLICATION_ID):
            found = find_first(layout.android_build_file, pattern)
            if found:
                break
    if found and is_dotted_identifier(found):
        return found
    return default_template_package(project_name)


def _resolve_old_source_dir(layout: TemplateLayout, package: str, project_name: str) -> tuple[str, Path]:
    candidate = layout.android_source_dir(package)
    if candidate.is_dir():
        return package, candidate

    fallback_package = default_template_package(project_name)
    fallback = layout.android_source_dir(fallback_package)
    if fallback.is_dir():
        logger.warning("No sources under %s; using %s instead", candidate, fallback)
        return fallback_package, fallback
    raise FilesystemError(f"Android source directory not found: {candidate}")


def update_android_package(
    layout: TemplateLayout,
    package_identifier: str,
    project_name: str,
    report: RewriteReport,
) -> None:
    discovered = discover_android_package(layout, project_name)
    previous, old_dir = _resolve_old_source_dir(layout, discovered, project_name)
    report.previous_package = previous

    count = rewrite_file(layout.android_manifest, ANDROID_PACKAGE_ATTR, package_identifier)
    report.record(layout.android_manifest, "package attribute", count)

    count = rewrite_file(layout.android_build_file, GRADLE_APPLICATION_ID, package_identifier)
    count += rewrite_file(layout.android_build_file, GRADLE_NAMESPACE, package_identifier)
    report.record(layout.android_build_file, "applicationId/namespace", count)

    new_dir = layout.android_source_dir(package_identifier)
    report.moved_entries = relocate_package_dir(
        java_root=layout.android_java_root,
        old_dir=old_dir,
        new_dir=new_dir,
    )
    report.old_source_dir = old_dir
    report.new_source_dir = new_dir
    report.record(new_dir, f"moved from {old_dir.relative_to(layout.root)}", len(report.moved_entries))

    for path in rewrite_package_declarations(new_dir, previous, package_identifier):
        report.record(path, "package/import declarations", 1)


def update_ios_bundle_identifier(layout: TemplateLayout, bundle_identifier: str, report: RewriteReport) -> None:
    replacement = f"<key>CFBundleIdentifier</key>\n\t<string>{bundle_identifier}</string>"
    count = rewrite_file(layout.info_plist, PLIST_BUNDLE_IDENTIFIER, replacement, first_only=True)
    report.record(layout.info_plist, "CFBundleIdentifier", count)

    count = rewrite_file(layout.xcode_project, PBX_BUNDLE_IDENTIFIER, bundle_identifier)
    report.record(layout.xcode_project, "PRODUCT_BUNDLE_IDENTIFIER", count)


def rewrite_project(
    *,
    app_name: str,
    package_identifier: str,
    project_name: str,
    project_root: Path,
) -> RewriteReport:
    """Propagate the new identifiers through the checkout at `project_root`.

    Raises a `ScaffoldError` subclass on the first failing step; files
    rewritten by earlier steps stay rewritten.
    """

    validate_package_identifier(package_identifier)
    layout = load_layout(project_root, app_name=app_name, project_name=project_name)
    report = RewriteReport(
        package_identifier=package_identifier,
        previous_package=default_template_package(project_name),
    )

    update_app_manifest(layout, app_name, report)
    update_android_package(layout, package_identifier, project_name, report)
    update_ios_bundle_identifier(layout, package_identifier, report)

    logger.info("Rewrote identifiers in %s to %s", project_root, package_identifier)
    return report
