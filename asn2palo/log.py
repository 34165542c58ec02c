"""
Timestamped console messages and an optional debug trace file.
"""

import datetime
import inspect

from asn2palo import config


def _timestamp():
    return datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def _append(path, line):
    with open(path, "a", encoding="utf-8") as log_file:
        log_file.write(line + "\n")


def debug(message, enabled=None, path=None):
    """Append '[time] [caller] message' to the debug log when debugging is on.

    ``enabled`` and ``path`` default to config.DEBUG / config.DEBUG_LOG, read
    at call time so the switch can be flipped while running.
    """
    if enabled is None:
        enabled = config.DEBUG
    if not enabled:
        return
    frame = inspect.currentframe().f_back
    caller = frame.f_code.co_name if frame is not None else "MAIN"
    if caller == "<module>":
        caller = "MAIN"
    _append(path or config.DEBUG_LOG, f"[{_timestamp()}] [{caller}] {message}")


def log_message(message, enabled=None, path=None):
    """Print message to console, and to the debug log if debugging is on"""
    print(message)
    if enabled is None:
        enabled = config.DEBUG
    if enabled:
        _append(path or config.DEBUG_LOG, f"[{_timestamp()}] {message}")
