"""Allow ``python -m ant_simulator``."""

import sys

from ant_simulator.cli import main

sys.exit(main())
