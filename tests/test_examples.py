"""Smoke tests for example scripts.

These tests verify that examples run without errors.
They don't verify correctness of results, just that the code executes.
"""

import subprocess
import sys
from pathlib import Path

EXAMPLES_DIR = Path(__file__).parent.parent / "lander" / "examples"


def run_example(example_name: str, timeout: int = 120) -> subprocess.CompletedProcess:
    """Run an example script and return the result."""
    script_path = EXAMPLES_DIR / f"{example_name}.py"

    result = subprocess.run(
        [sys.executable, str(script_path)],
        capture_output=True,
        text=True,
        timeout=timeout,
        cwd=Path(__file__).parent.parent,  # Run from project root
    )

    return result


class TestExamplesSmoke:
    """Smoke tests that verify examples run without crashing."""

    def test_autopilot_comparison_runs(self) -> None:
        """Test that autopilot_comparison.py runs without errors."""
        result = run_example("autopilot_comparison")
        assert result.returncode == 0, f"autopilot_comparison failed:\n{result.stderr}"
        assert "velocity-control" in result.stdout


class TestModuleEntryPoint:
    """Smoke test for ``python -m lander``."""

    def test_module_runs(self) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "lander", "--autopilot", "pid"],
            capture_output=True,
            text=True,
            timeout=120,
            cwd=Path(__file__).parent.parent,
        )
        assert result.returncode == 0, result.stderr
        assert "Successful landing!" in result.stdout
