"""Allow `python -m dryrun`."""

import sys

from dryrun.dryrun import main

sys.exit(main())
