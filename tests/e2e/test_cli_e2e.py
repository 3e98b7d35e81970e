from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess. These tests validate argument parsing, exit codes,
stream output (stdout/stderr) and the generated archive on disk.
"""

import gzip
import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

import pytest
from PIL import Image

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "iconjar" / "main.py"


def run_cli(args: List[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
    """
    Execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH so the package resolves
    without being installed.

    Args:
        args: Command line arguments (excluding 'python' and script path).
        cwd: Optional working directory for the subprocess.

    Returns:
        subprocess.CompletedProcess: Result with returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def icon_dir(tmp_path: Path) -> Path:
    """
    Create an icon source tree.

    Structure:
    /glyphs
      home.png
      /arrows
        up.png
        down.svg
      notes.txt
    """
    root = tmp_path / "glyphs"
    arrows = root / "arrows"
    arrows.mkdir(parents=True)
    Image.new("RGBA", (24, 24)).save(root / "home.png", format="PNG")
    Image.new("RGBA", (32, 32)).save(arrows / "up.png", format="PNG")
    (arrows / "down.svg").write_text('<svg xmlns="http://www.w3.org/2000/svg"/>', encoding="utf-8")
    (root / "notes.txt").write_text("not an icon", encoding="utf-8")
    return root


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    path = tmp_path / "out"
    path.mkdir()
    return path

# -----------------------------------------------------------------------------
# TESTS
# -----------------------------------------------------------------------------


def test_cli_help() -> None:
    result = run_cli(["--help"])
    assert result.returncode == 0
    assert "build" in result.stdout


def test_cli_build_json(icon_dir: Path, out_dir: Path) -> None:
    result = run_cli([
        "build", str(icon_dir),
        "-o", str(out_dir),
        "--license-name", "CC-BY",
        "--json",
    ])

    assert result.returncode == 0, result.stderr
    summary = json.loads(result.stdout)
    assert summary["ok"] is True
    assert summary["name"] == "glyphs"
    assert summary["sets"] == 2
    assert summary["icons"] == 3

    archive = out_dir / "glyphs.iconjar"
    assert Path(summary["archive"]) == archive
    assert sorted(os.listdir(archive / "icons")) == ["down.svg", "home.png", "up.png"]

    meta = json.loads(gzip.decompress((archive / "META").read_bytes()).decode("utf-8"))
    assert len(meta["licences"]) == 1
    assert {r["name"] for r in meta["sets"].values()} == {"glyphs", "arrows"}
    widths = {r["name"]: r["width"] for r in meta["items"].values()}
    assert widths == {"home": 24, "up": 32, "down": 0}


def test_cli_build_human_output(icon_dir: Path, out_dir: Path) -> None:
    result = run_cli(["build", str(icon_dir), "-o", str(out_dir), "--name", "Glyphs"])

    assert result.returncode == 0, result.stderr
    assert "Archive created:" in result.stdout
    assert "Icons: 3" in result.stdout
    assert (out_dir / "Glyphs.iconjar" / "META").is_file()


def test_cli_existing_archive_fails(icon_dir: Path, out_dir: Path) -> None:
    (out_dir / "glyphs.iconjar").mkdir()

    result = run_cli(["build", str(icon_dir), "-o", str(out_dir)])

    assert result.returncode == 1
    assert "ERROR:" in result.stderr


def test_cli_missing_source(tmp_path: Path) -> None:
    result = run_cli(["build", str(tmp_path / "nowhere"), "-o", str(tmp_path)])

    assert result.returncode == 2
    assert "Source directory does not exist" in result.stderr


def test_cli_config_file(icon_dir: Path, out_dir: Path, tmp_path: Path) -> None:
    config_file = tmp_path / "archive.json"
    config_file.write_text(json.dumps({"extension": ".icons", "bogus": 1}), encoding="utf-8")

    result = run_cli(["build", str(icon_dir), "-o", str(out_dir), "--config", str(config_file)])

    assert result.returncode == 0, result.stderr
    assert (out_dir / "glyphs.icons").is_dir()
