"""Allow running as python -m bigrational."""

import sys

from .cli import main

sys.exit(main())
