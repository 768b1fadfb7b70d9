from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates path normalization, cross-platform data directory resolution,
and the safe creation primitives used by the materializer.
"""

import os
from pathlib import Path
from unittest.mock import patch

from scaffold4ai.infra.fs import (
    get_user_data_dir,
    normalize_path,
    safe_mkdir,
    safe_touch,
)

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_get_user_data_dir_windows() -> None:
    """TC-01: Verify resolution of %LOCALAPPDATA% on Windows systems."""
    mock_appdata = "C:/Users/Test/AppData/Local"
    with patch("os.name", "nt"):
        with patch.dict(os.environ, {"LOCALAPPDATA": mock_appdata}):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert "Scaffold4AI" in path


def test_get_user_data_dir_unix() -> None:
    """TC-01: Verify resolution of ~/.scaffold4ai on Unix-like systems."""
    mock_home = "/home/testuser"
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value=mock_home):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                normalized_path = path.replace("\\", "/")
                assert normalized_path.endswith("/home/testuser/.scaffold4ai")


def test_normalize_path_expansion() -> None:
    """TC-02: Verify expansion of environment variables and user shortcuts."""
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path("$TEST_VAR/sub", fallback=".")
        assert path.lower().endswith(os.path.join("my_folder", "sub").lower())

        with patch("os.path.expanduser", side_effect=lambda p: p.replace("~", "/home/user")):
            path = normalize_path("~/code", fallback=".")
            assert "code" in Path(path).parts


def test_normalize_path_uses_fallback(tmp_path: Path) -> None:
    assert normalize_path("   ", fallback=str(tmp_path)) == os.path.abspath(str(tmp_path))

# -----------------------------------------------------------------------------
# FILESYSTEM OPERATIONS TESTS
# -----------------------------------------------------------------------------

def test_safe_mkdir_success(tmp_path: Path) -> None:
    """TC-03: Verify recursive directory creation."""
    target = tmp_path / "deep" / "nested" / "dir"
    success, err = safe_mkdir(str(target))

    assert success is True
    assert err is None
    assert target.exists()


def test_safe_mkdir_permission_error() -> None:
    """TC-03: Verify error handling when directory creation fails."""
    with patch("os.makedirs", side_effect=OSError("Permission Denied")):
        success, err = safe_mkdir("/root/forbidden")
        assert success is False
        assert "Permission Denied" in err


def test_safe_touch_creates_and_truncates(tmp_path: Path) -> None:
    """TC-04: Verify empty file creation over existing content."""
    target = tmp_path / "file.txt"
    target.write_text("content", encoding="utf-8")

    success, err = safe_touch(str(target))

    assert success is True
    assert err is None
    assert target.read_text(encoding="utf-8") == ""


def test_safe_touch_missing_parent(tmp_path: Path) -> None:
    success, err = safe_touch(str(tmp_path / "missing" / "file.txt"))
    assert success is False
    assert err
