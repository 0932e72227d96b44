from app.db.repositories.board_repository import BoardRepository
from app.db.repositories.note_repository import NoteRepository
from app.db.repositories.drawing_repository import DrawingRepository

__all__ = [
    "BoardRepository",
    "NoteRepository",
    "DrawingRepository"
]
