from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

ANDROID_MANIFEST = """<manifest xmlns:android="http://schemas.android.com/apk/res/android"
  package="com.myapp">

    <uses-permission android:name="android.permission.INTERNET" />

    <application android:name=".MainApplication" android:label="@string/app_name">
      <activity android:name=".MainActivity" android:exported="true" />
    </application>
</manifest>
"""

BUILD_GRADLE = """apply plugin: "com.android.application"

android {
    ndkVersion rootProject.ext.ndkVersion
    namespace "com.myapp"
    defaultConfig {
        applicationId "com.myapp"
        minSdkVersion rootProject.ext.minSdkVersion
        versionCode 1
        versionName "1.0"
    }
}
"""

MAIN_ACTIVITY = """package com.myapp;

import com.facebook.react.ReactActivity;
import com.myapp.utils.Helper;

public class MainActivity extends ReactActivity {
}
"""

MAIN_APPLICATION = """package com.myapp

import com.myappextras.Unrelated

class MainApplication
"""

HELPER = """package com.myapp.utils;

public class Helper {}
"""

INFO_PLIST = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
\t<key>CFBundleDisplayName</key>
\t<string>MyApp</string>
\t<key>CFBundleIdentifier</key>
\t<string>$(PRODUCT_BUNDLE_IDENTIFIER)</string>
\t<key>CFBundleName</key>
\t<string>$(PRODUCT_NAME)</string>
</dict>
</plist>
"""

PBXPROJ = """// !$*UTF8*$!
{
\t\t13B07F941A680F5B00A75B9A /* Debug */ = {
\t\t\tbuildSettings = {
\t\t\t\tPRODUCT_BUNDLE_IDENTIFIER = "org.reactjs.native.example.$(PRODUCT_NAME:rfc1034identifier)";
\t\t\t\tPRODUCT_NAME = MyApp;
\t\t\t};
\t\t};
\t\t13B07F951A680F5B00A75B9A /* Release */ = {
\t\t\tbuildSettings = {
\t\t\t\tPRODUCT_BUNDLE_IDENTIFIER = "org.reactjs.native.example.$(PRODUCT_NAME:rfc1034identifier)";
\t\t\t\tPRODUCT_NAME = MyApp;
\t\t\t};
\t\t};
\t\t00E356F61AD99517003FC87E /* Tests */ = {
\t\t\tbuildSettings = {
\t\t\t\tPRODUCT_BUNDLE_IDENTIFIER = "org.reactjs.native.example.$(PRODUCT_NAME:rfc1034identifier)";
\t\t\t};
\t\t};
}
"""

APP_JSON = {"name": "MyApp", "displayName": "MyApp", "version": "1.0.0"}


def build_template(root: Path, *, name: str = "MyApp") -> Path:
    """Write a minimal React Native template checkout under `root`."""

    root.mkdir(parents=True, exist_ok=True)
    (root / "app.json").write_text(json.dumps(APP_JSON, indent=2) + "\n", encoding="utf-8")

    android_main = root / "android" / "app" / "src" / "main"
    package_dir = android_main / "java" / "com" / name.lower()
    (package_dir / "utils").mkdir(parents=True)
    (android_main / "AndroidManifest.xml").write_text(ANDROID_MANIFEST, encoding="utf-8")
    (root / "android" / "app" / "build.gradle").write_text(BUILD_GRADLE, encoding="utf-8")
    (package_dir / "MainActivity.java").write_text(MAIN_ACTIVITY, encoding="utf-8")
    (package_dir / "MainApplication.kt").write_text(MAIN_APPLICATION, encoding="utf-8")
    (package_dir / "utils" / "Helper.java").write_text(HELPER, encoding="utf-8")

    ios = root / "ios"
    (ios / name).mkdir(parents=True)
    (ios / f"{name}.xcodeproj").mkdir()
    (ios / name / "Info.plist").write_text(INFO_PLIST, encoding="utf-8")
    (ios / f"{name}.xcodeproj" / "project.pbxproj").write_text(PBXPROJ, encoding="utf-8")
    return root


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    return build_template(tmp_path / "MyApp")


@pytest.fixture
def java_root(template_root: Path) -> Path:
    return template_root / "android" / "app" / "src" / "main" / "java"


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.upper().startswith("RN_SCAFFOLD_"):
            monkeypatch.delenv(key)
