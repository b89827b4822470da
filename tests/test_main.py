"""Test CLI module functionality."""

import os
import subprocess
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


def test_main_module_importable():
    """Test that the __main__ module can be imported."""
    import pwfilter.__main__ as main_module

    assert hasattr(main_module, "main")


def test_main_module_executable():
    """Test that the module can be executed with python -m."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))

    result = subprocess.run(
        [sys.executable, "-m", "pwfilter", "check", "password: VeryStrong857#"],
        capture_output=True,
        text=True,
        timeout=30,
        env=env,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.startswith("KEEP ")
    assert "ModuleNotFoundError" not in result.stderr
