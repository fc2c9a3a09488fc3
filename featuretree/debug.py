"""
Debug output for featuretree.

Messages go to stderr with a timestamp and a short tag naming the
component that produced them. Output is off unless the global switch
is on or the caller passes enabled=True for its own message.
"""

from datetime import datetime
import sys


_debug_enabled: bool = False


def set_debug(enabled: bool):
    """Enable or disable debug output for the whole package."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


def is_debug() -> bool:
    return _debug_enabled


def debug_print(tag: str, msg: str, enabled: bool = False) -> None:
    if not (enabled or _debug_enabled):
        return
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {tag}: {msg}", file=sys.stderr)
