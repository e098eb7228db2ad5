"""
Services package - business logic.
"""

from sync_notes.services.authorizer import Authorizer
from sync_notes.services.collector import Collector
from sync_notes.services.notes import NoteService
from sync_notes.services.scheduler import Scheduler

__all__ = [
    "Authorizer",
    "Collector",
    "NoteService",
    "Scheduler",
]
