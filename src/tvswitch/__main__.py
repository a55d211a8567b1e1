"""Allow running as `python -m tvswitch`."""

import sys

from .cli import main

sys.exit(main())
