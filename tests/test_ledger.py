"""Tests for request gas accounting."""

from gas_ledger.core.ledger import begin_request, record_operations, to_response
from gas_ledger.core.models import OperationKind


class TestRecordOperations:
    """Test cases for record_operations."""

    def test_creates_scope_when_missing(self) -> None:
        scope = record_operations(None, OperationKind.READ)
        assert scope.total_cost == 1
        assert scope.free is True

    def test_mutates_existing_scope_in_place(self) -> None:
        scope = begin_request()
        returned = record_operations(scope, OperationKind.WRITE)
        again = record_operations(returned, OperationKind.READ)
        assert returned is scope
        assert again is scope
        assert scope.total_cost == 21
        assert scope.operations == [OperationKind.WRITE, OperationKind.READ]

    def test_write_then_delete(self) -> None:
        scope = record_operations(None, OperationKind.WRITE, OperationKind.DELETE)
        assert scope.total_cost == 5
        assert scope.free is False

    def test_free_flag_never_recovers(self) -> None:
        scope = record_operations(None, OperationKind.WRITE)
        record_operations(scope, OperationKind.READ, OperationKind.DELETE)
        assert scope.free is False

    def test_no_operations(self) -> None:
        scope = record_operations(None)
        assert scope.total_cost == 0
        assert scope.free is True


class TestToResponse:
    """Test cases for to_response."""

    def test_copies_scope_totals(self) -> None:
        scope = record_operations(None, OperationKind.READ, OperationKind.WRITE)
        res = to_response(scope, [1, 2])
        assert res.data == (1, 2)
        assert res.total_cost == 21
        assert res.free is False

    def test_response_is_detached_from_scope(self) -> None:
        scope = record_operations(None, OperationKind.READ)
        res = to_response(scope, None)
        record_operations(scope, OperationKind.WRITE)
        assert res.total_cost == 1
        assert res.free is True

    def test_missing_scope_is_empty_and_free(self) -> None:
        res = to_response(None, [1, 2])
        assert res.data is None
        assert res.total_cost == 0
        assert res.free is True
