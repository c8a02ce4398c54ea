"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import pytest
from pathlib import Path

from wallet.core import config as config_module
from wallet.ledger.store import TransactionStore


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """Per-test wallet data directory (WALLET_DATA_DIR)."""
    path = tmp_path / "wallet_data_dir"
    path.mkdir()
    return path


@pytest.fixture
def ledger_path(data_dir) -> Path:
    """Location of the ledger file inside the test data directory."""
    return data_dir / "transactions.txt"


@pytest.fixture
def sample_store() -> TransactionStore:
    """Store holding one income and two expenses."""
    store = TransactionStore()
    store.add_transaction("2024/01/05", "income", "salary", 100.0)
    store.add_transaction("2024/01/10", "expense", "food", 40.0)
    store.add_transaction("2024/02/01", "expense", "rent", 70.0)
    return store


@pytest.fixture
def sample_ledger_text() -> str:
    """Ledger file contents matching sample_store."""
    return (
        "2024/01/05 income salary 100.00\n"
        "2024/01/10 expense food 40.00\n"
        "2024/02/01 expense rent 70.00\n"
    )


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, data_dir):
    """Set up test environment variables."""
    # Ensure tests never touch a real ledger
    monkeypatch.setenv("WALLET_ENV", "test")
    monkeypatch.setenv("WALLET_DATA_DIR", str(data_dir))
    monkeypatch.delenv("WALLET_LEDGER_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    # Drop any configuration cached by an earlier test
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests running the CLI in a subprocess"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for amount formatting and precision"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take significant time to run"
    )
