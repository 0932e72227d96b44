from app.domains.notes.entities import Note
from app.domains.notes.schemas import (
    NoteCreate, NoteTextUpdate, NotePositionUpdate, NoteColorUpdate, NoteResponse
)
from app.domains.notes.services import NoteService

__all__ = [
    "Note",
    "NoteCreate", "NoteTextUpdate", "NotePositionUpdate", "NoteColorUpdate", "NoteResponse",
    "NoteService"
]
