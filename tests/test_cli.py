"""Tests for the command line entry point."""

from gas_ledger import cli
from gas_ledger.core.exceptions import MissingSourceDataError
from gas_ledger.core.store import ContractStore


class TestMain:
    """Test cases for cli.main."""

    def test_prints_sorted_list_and_gas(self, capsys) -> None:
        assert cli.main() == 0
        out = capsys.readouterr().out
        assert "SortedList: [0, 1, 3, 3, 4, 4, 6, 8]" in out
        assert "Gas: 21" in out
        assert "Free: False" in out

    def test_uses_environment_values(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("GAS_LEDGER_DEFAULT_VALUES", "[2, 1]")
        assert cli.main() == 0
        assert "SortedList: [1, 2]" in capsys.readouterr().out

    def test_missing_source_exits_non_zero(self, monkeypatch, capsys) -> None:
        def fail(self, scope):
            raise MissingSourceDataError("unsorted_list")

        monkeypatch.setattr(ContractStore, "read_sorted", fail)
        assert cli.main() == 1
        captured = capsys.readouterr()
        assert "no unsorted_list in storage" in captured.err
        assert captured.out == ""
