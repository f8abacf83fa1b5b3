"""Allow `python -m behaviorgen`."""

import sys

from behaviorgen.presentation.cli import main

sys.exit(main())
