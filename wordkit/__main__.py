"""Allow ``python -m wordkit``."""

import sys

from wordkit.cli import main

sys.exit(main())
