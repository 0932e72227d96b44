from typing import List

from app.core.schemas import CamelModel
from app.domains.notes.schemas import NoteResponse
from app.domains.drawings.schemas import DrawingResponse


class BoardResponse(CamelModel):
    """Схема для ответа с данными доски"""
    id: str
    created_at: int
    last_accessed_at: int


class BoardDetailResponse(BoardResponse):
    """Доска вместе со стикерами и штрихами"""
    notes: List[NoteResponse]
    drawings: List[DrawingResponse]


class CleanupResponse(CamelModel):
    """Результат очистки устаревших досок"""
    deleted_count: int


class Image(CamelModel):
    """Изображение на доске.

    Пока только тип: таблицы и операций для изображений нет.
    """
    id: str
    board_id: str
    src: str
    x: float
    y: float
    width: float
    height: float
    created_at: int
    updated_at: int
