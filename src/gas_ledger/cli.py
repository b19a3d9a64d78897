"""Command line entry point: read the default contract's sorted list."""

import logging
import sys

from gas_ledger.core.config import get_settings
from gas_ledger.core.exceptions import MissingSourceDataError
from gas_ledger.core.ledger import begin_request
from gas_ledger.core.store import ContractStore


def main() -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    with ContractStore(config=settings.to_store_config()) as store:
        try:
            res = store.read_sorted(begin_request())
        except MissingSourceDataError as e:
            print(e, file=sys.stderr)
            return 1

    print(f"SortedList: {list(res.data or ())}")
    print(f"Gas: {res.total_cost}")
    print(f"Free: {res.free}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
