"""Allow ``python -m timeout_checker``."""

import sys

from timeout_checker.checker import main

sys.exit(main())
