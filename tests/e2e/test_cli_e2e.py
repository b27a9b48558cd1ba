from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script in a subprocess and checks exit codes and the
JSON written to stdout.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "assetdata" / "main.py"


def run_cli(args: List[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
    """
    Execute the CLI in a separate process with 'src' on PYTHONPATH.

    Args:
        args: Command line arguments (excluding the interpreter and script).
        cwd: Optional working directory.

    Returns:
        subprocess.CompletedProcess: Return code, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_e2e_single_root_from_cwd(site_folder: Path) -> None:
    result = run_cli(["--page", "blog/post1", "--render-yaml"], cwd=site_folder)

    assert result.returncode == 0, result.stderr
    out = json.loads(result.stdout)
    assert out["asset_base"] == "assets/blog/post1"
    assert out["assets"]["files"] == ["hero.jpg"]
    assert out["assets"]["structured_data"] == {"gallery.yml": ["one.jpg", "two.jpg"]}
    assert out["assets"]["folders"] == {"thumbs": {"files": ["a.jpg"], "folders": {}, "structured_data": {}}}


def test_e2e_multi_root(site_folder: Path) -> None:
    result = run_cli(["-s", str(site_folder), "-a", "assets,downloads", "--no-limit", "--max-depth", "1"])

    assert result.returncode == 0, result.stderr
    out = json.loads(result.stdout)
    assert out["asset_base"] == ["assets", "downloads"]
    assert out["assets"]["assets"] == {"files": ["logo.png"], "folders": {"blog": None}}
    assert out["assets"]["downloads"]["files"] == ["manual.pdf"]


def test_e2e_output_is_stable(site_folder: Path) -> None:
    first = run_cli(["-s", str(site_folder), "--no-limit"])
    second = run_cli(["-s", str(site_folder), "--no-limit"])
    assert first.returncode == 0
    assert first.stdout == second.stdout


def test_e2e_debug_diagnostics_on_stderr(site_folder: Path) -> None:
    result = run_cli(["-s", str(site_folder), "-p", "index", "--debug"])

    assert result.returncode == 0
    assert "asset folders to scan" in result.stderr


def test_e2e_parse_error_exit_code(site_folder: Path) -> None:
    (site_folder / "assets" / "bad.yml").write_text("a: [\n", encoding="utf-8")

    result = run_cli(["-s", str(site_folder), "--render-yaml"])

    assert result.returncode == 1
    assert "bad.yml" in result.stderr
