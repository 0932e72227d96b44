from app.db.models.board import Board
from app.db.models.note import Note
from app.db.models.drawing import Drawing

__all__ = [
    "Board",
    "Note",
    "Drawing"
]
