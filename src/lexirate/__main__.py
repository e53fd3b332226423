"""Allow ``python -m lexirate``."""

import sys

from lexirate.cli import main

sys.exit(main())
