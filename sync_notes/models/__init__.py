"""
Models package - data structures and schemas.
"""

from sync_notes.models.schemas import (
    Token,
    StoredEntry,
    CreateNoteResponse,
    Note,
)

__all__ = [
    "Token",
    "StoredEntry",
    "CreateNoteResponse",
    "Note",
]
