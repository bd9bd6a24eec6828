"""
Unit Tests — Platform Selection
================================
Explicit platform arguments, the PATHUTIL_PLATFORM override, and the
native cleaning primitive.
"""
import ntpath
import posixpath

import pytest

from pathutil.core import config
from pathutil.core.platform import (
    PLATFORMS,
    Platform,
    clean,
    current_platform,
    host_platform,
    is_windows,
    native_separator,
    path_flavor,
    resolve_platform,
    volume_name,
)


# ---------------------------------------------------------------------------
# 1. Platform constants
# ---------------------------------------------------------------------------
class TestPlatformConstants:

    def test_all_platforms_present(self):
        assert PLATFORMS == {"windows", "posix", "virtual"}

    def test_values_are_lowercase(self):
        for p in PLATFORMS:
            assert p == p.lower()


# ---------------------------------------------------------------------------
# 2. Resolution and override
# ---------------------------------------------------------------------------
class TestResolvePlatform:

    def test_explicit_platform_wins(self, monkeypatch):
        monkeypatch.setattr(config, "PLATFORM_OVERRIDE", "windows")
        assert resolve_platform(Platform.POSIX) == Platform.POSIX

    def test_explicit_platform_is_case_insensitive(self):
        assert resolve_platform("Windows") == Platform.WINDOWS

    def test_unknown_explicit_platform_raises(self):
        with pytest.raises(ValueError):
            resolve_platform("plan9")

    def test_override_used_when_not_explicit(self, monkeypatch):
        monkeypatch.setattr(config, "PLATFORM_OVERRIDE", "windows")
        assert current_platform() == Platform.WINDOWS
        assert resolve_platform(None) == Platform.WINDOWS

    def test_unknown_override_falls_back_to_host(self, monkeypatch, caplog):
        monkeypatch.setattr(config, "PLATFORM_OVERRIDE", "amiga")
        with caplog.at_level("WARNING", logger="pathutil.core.platform"):
            assert current_platform() == host_platform()
        assert "amiga" in caplog.text

    def test_no_override_uses_host(self, monkeypatch):
        monkeypatch.setattr(config, "PLATFORM_OVERRIDE", None)
        assert current_platform() == host_platform()

    def test_override_changes_default_behaviour(self, monkeypatch):
        from pathutil.fs.windows import strip_drive_letter

        monkeypatch.setattr(config, "PLATFORM_OVERRIDE", "windows")
        assert strip_drive_letter("C:\\Users\\test") == "Users\\test"
        monkeypatch.setattr(config, "PLATFORM_OVERRIDE", "posix")
        assert strip_drive_letter("C:\\Users\\test") == "C:\\Users\\test"


# ---------------------------------------------------------------------------
# 3. Native primitives
# ---------------------------------------------------------------------------
class TestNativePrimitives:

    def test_flavors(self):
        assert path_flavor(Platform.WINDOWS) is ntpath
        assert path_flavor(Platform.POSIX) is posixpath
        assert path_flavor(Platform.VIRTUAL) is posixpath

    def test_separators(self):
        assert native_separator(Platform.WINDOWS) == "\\"
        assert native_separator(Platform.VIRTUAL) == "/"

    def test_virtual_is_not_windows(self):
        assert not is_windows(Platform.VIRTUAL)

    def test_clean_empty_is_dot(self):
        assert clean("", Platform.POSIX) == "."
        assert clean("", Platform.WINDOWS) == "."

    def test_clean_posix(self):
        assert clean("/a/b/../c/./d/", Platform.POSIX) == "/a/c/d"

    def test_clean_windows_converts_separators(self):
        assert clean("a/b/../c", Platform.WINDOWS) == "a\\c"

    def test_volume_name(self):
        assert volume_name("C:\\x", Platform.WINDOWS) == "C:"
        assert volume_name("\\\\host\\share\\x", Platform.WINDOWS) == "\\\\host\\share"
        assert volume_name("C:\\x", Platform.POSIX) == ""
