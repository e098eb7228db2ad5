"""
Last-access timestamps of stored entries.

``os.stat`` already hides the per-platform ``stat`` layouts (``st_atim`` on
Linux/OpenBSD, ``st_atimespec`` on Darwin, ``FILETIME`` on Windows), so one
implementation covers every target.
"""

import os
from typing import Callable

AccessTimeFn = Callable[[str], float]


def stat_access_time(path: str) -> float:
    """Return the last-access time of ``path`` in epoch seconds."""
    return os.stat(path).st_atime
