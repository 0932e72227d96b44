import uuid
from typing import Optional, List, Dict


class Drawing:
    """Сущность штриха (свободного рисования).

    Штрих неизменяем после создания: его можно только удалить.
    """

    def __init__(
        self,
        id: str,
        board_id: str,
        points: List[Dict[str, float]],
        color: str,
        stroke_width: float,
        created_at: int,
        row_id: Optional[int] = None
    ):
        self.id = id
        self.board_id = board_id
        self.points = points
        self.color = color
        self.stroke_width = stroke_width
        self.created_at = created_at
        self.row_id = row_id

    @property
    def point_count(self) -> int:
        return len(self.points)

    @classmethod
    def create_drawing(
        cls,
        board_id: str,
        points: List[Dict[str, float]],
        color: str,
        stroke_width: float,
        now: int
    ) -> "Drawing":
        """Создание нового штриха"""
        return cls(
            id=str(uuid.uuid4()),
            board_id=board_id,
            points=[{"x": point["x"], "y": point["y"]} for point in points],
            color=color,
            stroke_width=stroke_width,
            created_at=now
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Drawing):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Drawing(id={self.id}, board_id={self.board_id}, points={self.point_count})"
