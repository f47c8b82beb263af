from __future__ import annotations

from pathlib import Path

import pytest

from adapters.source_tree import relocate_package_dir, rewrite_package_declarations
from core.errors import FilesystemError


def _tree(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}


def test_relocate_moves_children_with_subtrees(java_root: Path) -> None:
    old_dir = java_root / "com" / "myapp"
    new_dir = java_root / "com" / "example" / "app"
    before = _tree(old_dir)

    moved = relocate_package_dir(java_root=java_root, old_dir=old_dir, new_dir=new_dir)

    assert moved == ["MainActivity.java", "MainApplication.kt", "utils"]
    assert _tree(new_dir) == before
    assert not old_dir.exists()
    assert (java_root / "com").is_dir()


def test_relocate_prunes_empty_ancestors(java_root: Path) -> None:
    old_dir = java_root / "com" / "myapp"
    new_dir = java_root / "org" / "example" / "app"

    relocate_package_dir(java_root=java_root, old_dir=old_dir, new_dir=new_dir)

    assert not (java_root / "com").exists()
    assert java_root.is_dir()
    assert (new_dir / "utils" / "Helper.java").is_file()


def test_relocate_into_subdirectory_of_old_package(java_root: Path) -> None:
    old_dir = java_root / "com" / "myapp"
    new_dir = java_root / "com" / "myapp" / "mobile"
    before = _tree(old_dir)

    relocate_package_dir(java_root=java_root, old_dir=old_dir, new_dir=new_dir)

    assert _tree(new_dir) == before
    assert sorted(p.name for p in old_dir.iterdir()) == ["mobile"]
    assert [p.name for p in java_root.iterdir()] == ["com"]


def test_relocate_to_parent_package(java_root: Path) -> None:
    old_dir = java_root / "com" / "myapp"
    new_dir = java_root / "com"

    relocate_package_dir(java_root=java_root, old_dir=old_dir, new_dir=new_dir)

    assert (new_dir / "MainActivity.java").is_file()
    assert not old_dir.exists()


def test_relocate_missing_old_dir(java_root: Path) -> None:
    with pytest.raises(FilesystemError, match="not found"):
        relocate_package_dir(
            java_root=java_root,
            old_dir=java_root / "com" / "nothere",
            new_dir=java_root / "com" / "example",
        )


def test_relocate_onto_itself_fails(java_root: Path) -> None:
    same = java_root / "com" / "myapp"
    with pytest.raises(FilesystemError, match="already located"):
        relocate_package_dir(java_root=java_root, old_dir=same, new_dir=same)
    assert (same / "MainActivity.java").is_file()


def test_relocate_refuses_to_overwrite(java_root: Path) -> None:
    new_dir = java_root / "com" / "example"
    new_dir.mkdir(parents=True)
    (new_dir / "MainActivity.java").write_text("existing", encoding="utf-8")

    with pytest.raises(FilesystemError, match="already exists"):
        relocate_package_dir(java_root=java_root, old_dir=java_root / "com" / "myapp", new_dir=new_dir)
    assert (new_dir / "MainActivity.java").read_text(encoding="utf-8") == "existing"


def test_rewrite_package_declarations(java_root: Path) -> None:
    source_dir = java_root / "com" / "myapp"

    changed = rewrite_package_declarations(source_dir, "com.myapp", "com.example.app")

    assert {p.name for p in changed} == {"MainActivity.java", "MainApplication.kt", "Helper.java"}
    activity = (source_dir / "MainActivity.java").read_text(encoding="utf-8")
    assert activity.startswith("package com.example.app;\n")
    assert "import com.example.app.utils.Helper;" in activity
    assert "import com.facebook.react.ReactActivity;" in activity
    kotlin = (source_dir / "MainApplication.kt").read_text(encoding="utf-8")
    assert kotlin.startswith("package com.example.app\n")
    assert "import com.myappextras.Unrelated" in kotlin
    helper = (source_dir / "utils" / "Helper.java").read_text(encoding="utf-8")
    assert helper.startswith("package com.example.app.utils;")


def test_rewrite_package_declarations_noop_for_same_package(java_root: Path) -> None:
    assert rewrite_package_declarations(java_root, "com.myapp", "com.myapp") == []


def test_rewrite_package_declarations_handles_static_imports(java_root: Path) -> None:
    source_dir = java_root / "com" / "myapp"
    uses = source_dir / "Uses.java"
    uses.write_text(
        "package com.myapp;\n\nimport static com.myapp.utils.Helper.help;\nimport  static  com.myapp.Const.*;\n",
        encoding="utf-8",
    )

    rewrite_package_declarations(source_dir, "com.myapp", "com.example.app")

    assert uses.read_text(encoding="utf-8") == (
        "package com.example.app;\n\n"
        "import static com.example.app.utils.Helper.help;\n"
        "import  static  com.example.app.Const.*;\n"
    )


def test_rewrite_package_declarations_in_latin1_source(java_root: Path) -> None:
    source_dir = java_root / "com" / "myapp"
    legacy = source_dir / "Legacy.java"
    legacy.write_bytes(b"package com.myapp;\n// Caf\xe9\n")

    changed = rewrite_package_declarations(source_dir, "com.myapp", "com.example.app")

    assert legacy in changed
    assert legacy.read_bytes() == b"package com.example.app;\n// Caf\xe9\n"
