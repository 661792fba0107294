"""Utility modules for notus-dx."""

from notus_dx.utils.polling import poll_until_terminal
from notus_dx.utils.timing import redact, safe_dumps, timed_operation

__all__ = ["poll_until_terminal", "redact", "safe_dumps", "timed_operation"]
