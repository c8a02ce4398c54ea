#!/usr/bin/env python3
"""
E2E Test Helper Utilities

Helper functions for end-to-end tests to reduce boilerplate and improve consistency.
"""

import os
import subprocess
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


def get_test_environment(data_dir: Path) -> dict[str, str]:
    """
    Get environment dictionary for E2E subprocess tests.

    Creates a copy of the current environment with WALLET_DATA_DIR set to the
    specified test data directory and WALLET_ENV set to "test".

    Args:
        data_dir: Path to temporary test data directory

    Returns:
        Environment dictionary for subprocess.run(env=...)
    """
    pythonpath = os.pathsep.join(filter(None, [str(SRC_DIR), os.environ.get("PYTHONPATH")]))
    return {
        **os.environ,
        "PYTHONPATH": pythonpath,
        "WALLET_ENV": "test",
        "WALLET_DATA_DIR": str(data_dir),
    }


def run_wallet(data_dir: Path, *args: str, input_text: str | None = None) -> subprocess.CompletedProcess:
    """
    Run the wallet CLI in a subprocess against a test data directory.

    Example:
        result = run_wallet(tmp_path, "totals")
        assert result.returncode == 0
    """
    return subprocess.run(
        [sys.executable, "-m", "wallet.cli.main", *args],
        env=get_test_environment(data_dir),
        input=input_text,
        capture_output=True,
        text=True,
        timeout=60,
    )
