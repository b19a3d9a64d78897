import sys

from gas_ledger.cli import main

sys.exit(main())
