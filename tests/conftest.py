"""Shared test fixtures."""

from pathlib import Path

import pytest

import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gas_ledger.core.ledger import begin_request  # noqa: E402
from gas_ledger.core.models import RequestScope  # noqa: E402
from gas_ledger.core.store import ContractStore  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch, tmp_path):
    """Keep GAS_LEDGER_* variables and stray .env files out of tests."""
    for key in ("GAS_LEDGER_DEFAULT_VALUES", "GAS_LEDGER_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def store() -> ContractStore:
    return ContractStore()


@pytest.fixture
def scope() -> RequestScope:
    return begin_request()
