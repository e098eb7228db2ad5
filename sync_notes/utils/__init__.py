"""
Utilities package.
"""

from sync_notes.utils.storage import DocumentStore
from sync_notes.utils.access_time import stat_access_time
from sync_notes.utils.logging import setup_logging

__all__ = [
    "DocumentStore",
    "stat_access_time",
    "setup_logging",
]
