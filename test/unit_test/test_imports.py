"""Every entry module must import on its own in a fresh interpreter."""

import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@pytest.mark.parametrize(
    "module",
    [
        "capmesh.__main__",
        "capmesh.core.logging_config",
        "capmesh.server.core.config",
        "capmesh.server.main",
        "capmesh.server.api.v1.health",
        "capmesh.registry",
        "capmesh.capabilities",
    ],
)
def test_module_imports_in_fresh_interpreter(module: str) -> None:
    completed = subprocess.run(
        [sys.executable, "-c", f"import {module}"],
        capture_output=True,
        text=True,
        cwd=PROJECT_ROOT,
        timeout=60,
    )

    assert completed.returncode == 0, completed.stderr
