from app.domains.boards.entities import Board, stale_cutoff
from app.domains.boards.schemas import (
    BoardResponse, BoardDetailResponse, CleanupResponse, Image
)
from app.domains.boards.services import BoardService

__all__ = [
    "Board", "stale_cutoff",
    "BoardResponse", "BoardDetailResponse", "CleanupResponse", "Image",
    "BoardService"
]
