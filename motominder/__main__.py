"""Allow ``python -m motominder``."""

import sys

from motominder.cli import main

sys.exit(main())
