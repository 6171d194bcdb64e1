"""
Cross-check resource timeout declarations against their documentation.

Usage:
    from timeout_checker import check_timeouts

    outcome = check_timeouts("internal/service/widget_resource.go", ".")
    print(outcome.exit_code)
"""

from timeout_checker.checker import CheckOutcome, check_timeouts, main
from timeout_checker.models import TIMEOUT_FIELDS, TimeoutRecord

__version__ = "0.1.0"

__all__ = [
    "CheckOutcome",
    "check_timeouts",
    "main",
    "TIMEOUT_FIELDS",
    "TimeoutRecord",
]
