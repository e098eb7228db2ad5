"""
Note service.
Ties create-note tokens to note storage for the API routes.
"""

from uuid import UUID

from sync_notes.exceptions import AuthorizationError, NotFoundError
from sync_notes.models import Note, Token
from sync_notes.services.authorizer import Authorizer
from sync_notes.utils.storage import DocumentStore


class NoteService:
    """Create, read and update notes."""

    def __init__(self, authorizer: Authorizer, store: DocumentStore):
        self.authorizer = authorizer
        self.store = store

    def request_note(self) -> Token:
        """Reserve a note id."""
        return self.authorizer.issue()

    def create_note(self, note: Note) -> Note:
        """
        Store a note under a previously requested id.

        Raises:
            AuthorizationError: if the id is not an outstanding, unexpired token
            StorageError: if the note cannot be written
        """
        if not self.authorizer.consume(note.id):
            raise AuthorizationError(f"No pending create-note request for {note.id}")
        self.store.create(note.id, note.data.encode("utf-8"))
        return note

    def get_note(self, note_id: UUID) -> Note:
        payload = self.store.read(note_id)
        if payload is None:
            raise NotFoundError(f"Note {note_id} not found")
        return Note(id=note_id, data=payload.decode("utf-8", errors="replace"))

    def update_note(self, note_id: UUID, note: Note) -> Note:
        """Overwrite an existing note. The body id must match ``note_id``."""
        if note.id != note_id:
            raise NotFoundError(f"Note id {note.id} does not match {note_id}")
        self.store.update(note_id, note.data.encode("utf-8"))
        return note
