"""
Note API routes.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from sync_notes.exceptions import NotFoundError
from sync_notes.models import CreateNoteResponse, Note
from sync_notes.services import NoteService

router = APIRouter(prefix="/v1")


def get_note_service(request: Request) -> NoteService:
    return request.app.state.note_service


def _parse_note_id(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise NotFoundError(f"Note {value} not found")


@router.post(
    "/create-note-request",
    response_model=CreateNoteResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_note_request(service: NoteService = Depends(get_note_service)):
    """Reserve an id for a new note."""
    token = service.request_note()
    return CreateNoteResponse(id=token.id)


@router.post("/note", response_model=Note, status_code=status.HTTP_201_CREATED)
def create_note(note: Note, service: NoteService = Depends(get_note_service)):
    """Store a new note under a reserved id. Each id can be used once."""
    return service.create_note(note)


@router.get("/note/{note_id}", response_model=Note)
def get_note(note_id: str, service: NoteService = Depends(get_note_service)):
    return service.get_note(_parse_note_id(note_id))


@router.put("/note/{note_id}", response_model=Note)
def update_note(note_id: str, note: Note, service: NoteService = Depends(get_note_service)):
    """Overwrite an existing note."""
    return service.update_note(_parse_note_id(note_id), note)
