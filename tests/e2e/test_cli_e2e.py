from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess. These tests validate argument parsing, exit codes,
stream output (stdout/stderr), and file system side effects (created
project structure).
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "scaffold4ai" / "main.py"

LAYOUT = """Here is the structure you asked for:
```
blog/
├── app/
│   ├── __init__.py
│   └── models.py
├── tests/
│   └── test_models.py
└── README.md
```
"""


def run_cli(args: List[str], home: Path, stdin: str = "") -> subprocess.CompletedProcess[str]:
    """
    Helper to execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH and points the user data
    directory at a temporary home so no saved config leaks in or out.

    Args:
        args: List of command line arguments (excluding 'python' and script path).
        home: Directory used as HOME / LOCALAPPDATA for the subprocess.
        stdin: Text fed to the interactive prompts.

    Returns:
        subprocess.CompletedProcess: The result object containing returncode, stdout, and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["USERPROFILE"] = str(home)
    env["LOCALAPPDATA"] = str(home)
    for var in ("GROQ_API_KEY", "MODEL", "GROQ_API_URL"):
        env.pop(var, None)

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        env=env,
        input=stdin,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def layout_file(tmp_path: Path) -> Path:
    path = tmp_path / "layout.md"
    path.write_text(LAYOUT, encoding="utf-8")
    return path

# -----------------------------------------------------------------------------
# E2E TEST CASES
# -----------------------------------------------------------------------------

def test_e2e_help_command(home: Path) -> None:
    """Verify that --help returns 0 and displays usage information."""
    result = run_cli(["--help"], home)

    assert result.returncode == 0
    assert "usage:" in result.stdout.lower()
    assert "--layout-file" in result.stdout


def test_e2e_creates_structure_from_layout_file(tmp_path: Path, home: Path, layout_file: Path) -> None:
    """Verify the full pipeline: clean, parse, auto-confirm and materialize."""
    out_dir = tmp_path / "out"

    result = run_cli(
        ["--layout-file", str(layout_file), "--yes", "--no-color", "-o", str(out_dir)],
        home,
    )

    assert result.returncode == 0, f"CLI failed. Stderr: {result.stderr}"
    assert "Project structure created successfully!" in result.stdout
    assert "\x1b[" not in result.stdout

    assert (out_dir / "blog" / "app").is_dir()
    assert (out_dir / "blog" / "app" / "__init__.py").is_file()
    assert (out_dir / "blog" / "app" / "models.py").is_file()
    assert (out_dir / "blog" / "tests" / "test_models.py").is_file()
    assert (out_dir / "blog" / "README.md").read_text(encoding="utf-8") == ""


def test_e2e_review_loop_delete_then_create(tmp_path: Path, home: Path, layout_file: Path) -> None:
    """Verify interactive deletion by id before confirming creation."""
    out_dir = tmp_path / "out"

    # Ids: 1 blog, 2 app, 3 __init__.py, 4 models.py, 5 tests, 6 test_models.py, 7 README.md
    result = run_cli(
        ["--layout-file", str(layout_file), "--no-color", "-o", str(out_dir)],
        home,
        stdin="d 5\nc\n",
    )

    assert result.returncode == 0, f"CLI failed. Stderr: {result.stderr}"
    assert "Item ID 5 (and its children) deleted." in result.stdout
    assert (out_dir / "blog" / "app" / "models.py").is_file()
    assert not (out_dir / "blog" / "tests").exists()


def test_e2e_abort_creates_nothing(tmp_path: Path, home: Path, layout_file: Path) -> None:
    out_dir = tmp_path / "out"

    result = run_cli(
        ["--layout-file", str(layout_file), "--no-color", "-o", str(out_dir)],
        home,
        stdin="a\n",
    )

    assert result.returncode == 0
    assert "Aborted by user." in result.stdout
    assert not (out_dir / "blog").exists()


def test_e2e_unparseable_layout_declined_retry(tmp_path: Path, home: Path) -> None:
    """Verify a malformed layout reports the error and exits cleanly on 'no'."""
    bad = tmp_path / "bad.txt"
    bad.write_text("first/\n├── a.py\nsecond/\n", encoding="utf-8")

    result = run_cli(["--layout-file", str(bad), "--no-color"], home, stdin="n\n")

    assert result.returncode == 0
    assert "Error parsing project layout" in result.stdout
    assert "Aborted due to parsing error." in result.stdout


def test_e2e_missing_layout_file(tmp_path: Path, home: Path) -> None:
    result = run_cli(["--layout-file", str(tmp_path / "nope.txt")], home)

    assert result.returncode == 2
    assert "Error reading layout file" in result.stderr


def test_e2e_missing_credentials(home: Path) -> None:
    """Verify that a model request without credentials fails with exit code 2."""
    result = run_cli(["a todo app", "--no-color"], home)

    assert result.returncode == 2
    assert "GROQ_API_KEY and MODEL environment variables must be set." in result.stderr


def test_e2e_dump_config(home: Path) -> None:
    result = run_cli(["--dump-config", "--model", "some-model", "--no-color"], home)

    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert data["model"] == "some-model"
    assert data["color"] is False
    assert "api_key" not in data
