from typing import Optional, List, TYPE_CHECKING

if TYPE_CHECKING:
    from app.domains.notes.entities import Note
    from app.domains.drawings.entities import Drawing

HOUR_MS = 60 * 60 * 1000


def stale_cutoff(now: int, ttl_hours: int) -> int:
    """Граница устаревания: доски с last_accessed_at строго меньше неё удаляются"""
    return now - ttl_hours * HOUR_MS


class Board:
    """Сущность доски"""

    def __init__(
        self,
        id: str,
        created_at: int,
        last_accessed_at: int,
        notes: Optional[List["Note"]] = None,
        drawings: Optional[List["Drawing"]] = None,
        row_id: Optional[int] = None
    ):
        self.id = id
        self.created_at = created_at
        self.last_accessed_at = last_accessed_at
        self.notes = notes if notes is not None else []
        self.drawings = drawings if drawings is not None else []
        self.row_id = row_id

    @classmethod
    def create_board(cls, board_id: str, now: int) -> "Board":
        """Создание новой доски"""
        return cls(id=board_id, created_at=now, last_accessed_at=now)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Board(id={self.id}, last_accessed_at={self.last_accessed_at})"
