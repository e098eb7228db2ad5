"""
Data models and schemas for notes and create-note requests.
"""

from dataclasses import dataclass
from uuid import UUID
from pydantic import BaseModel


@dataclass(frozen=True)
class Token:
    """A single-use permission to create one note."""
    id: UUID
    issued_at: float    # Epoch seconds


@dataclass(frozen=True)
class StoredEntry:
    """A note file as seen by the collector."""
    name: str           # Filename, the note id's string form
    path: str
    last_access: float  # Epoch seconds


class CreateNoteResponse(BaseModel):
    """Response from the create-note-request endpoint."""
    id: UUID


class Note(BaseModel):
    """A note as sent and returned over the API."""
    id: UUID
    data: str
