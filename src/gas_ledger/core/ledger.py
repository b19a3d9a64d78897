"""Gas accounting for a single request.

A request owns exactly one RequestScope for its lifetime. The scope is
passed explicitly to every store call, which records the operations it
performs into it; responses copy the totals out of the scope at the time
they are built.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from gas_ledger.core.models import OperationKind, RequestScope, Response

logger = logging.getLogger(__name__)


def begin_request() -> RequestScope:
    """Open a fresh scope: zero cost, free."""
    return RequestScope()


def record_operations(
    scope: RequestScope | None,
    *ops: OperationKind,
) -> RequestScope:
    """Record operations into a request scope.

    If ``scope`` is None a new one is created first. An existing scope is
    mutated in place and returned, never replaced.

    Args:
        scope: The request's scope, or None if the request has none yet
        *ops: Operations to record, in order

    Returns:
        The scope the operations were recorded into

    Example:
        >>> scope = record_operations(None, OperationKind.WRITE, OperationKind.DELETE)
        >>> scope.total_cost, scope.free
        (5, False)
    """
    if scope is None:
        scope = begin_request()

    scope.record(*ops)
    logger.debug(
        "request %s recorded %s (total_cost=%d, free=%s)",
        scope.request_id,
        [op.name for op in ops],
        scope.total_cost,
        scope.free,
    )
    return scope


def to_response(scope: RequestScope | None, data: Iterable[int] | None) -> Response:
    """Bundle data with the gas totals of a scope.

    A missing scope means the request did no metered work, so the response
    is empty and free.
    """
    if scope is None:
        return Response(data=None)

    return Response(
        data=tuple(data) if data is not None else None,
        total_cost=scope.total_cost,
        free=scope.free,
    )
