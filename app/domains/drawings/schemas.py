from typing import List

from app.core.schemas import CamelModel


class Point(CamelModel):
    """Точка штриха"""
    x: float
    y: float


class DrawingCreate(CamelModel):
    """Схема для создания штриха"""
    points: List[Point]
    color: str
    stroke_width: float


class DrawingResponse(CamelModel):
    """Схема для ответа с данными штриха"""
    id: str
    board_id: str
    points: List[Point]
    color: str
    stroke_width: float
    created_at: int
