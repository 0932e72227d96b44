import uuid
from typing import Optional


class Note:
    """Сущность стикера на доске"""

    def __init__(
        self,
        id: str,
        board_id: str,
        text: str,
        x: float,
        y: float,
        color: str,
        created_at: int,
        updated_at: int,
        row_id: Optional[int] = None
    ):
        self.id = id
        self.board_id = board_id
        self.text = text
        self.x = x
        self.y = y
        self.color = color
        self.created_at = created_at
        self.updated_at = updated_at
        # внутренний идентификатор строки в хранилище
        self.row_id = row_id

    def update_text(self, text: str, now: int) -> dict:
        """Изменение текста. Возвращает только изменённые поля"""
        self.text = text
        self.updated_at = now
        return {"text": self.text, "updated_at": self.updated_at}

    def move_to(self, x: float, y: float, now: int) -> dict:
        """Перемещение стикера. Возвращает только изменённые поля"""
        self.x = x
        self.y = y
        self.updated_at = now
        return {"x": self.x, "y": self.y, "updated_at": self.updated_at}

    def recolor(self, color: str, now: int) -> dict:
        """Смена цвета. Возвращает только изменённые поля"""
        self.color = color
        self.updated_at = now
        return {"color": self.color, "updated_at": self.updated_at}

    @classmethod
    def create_note(
        cls,
        board_id: str,
        text: str,
        x: float,
        y: float,
        color: str,
        now: int
    ) -> "Note":
        """Создание нового стикера"""
        return cls(
            id=str(uuid.uuid4()),
            board_id=board_id,
            text=text,
            x=x,
            y=y,
            color=color,
            created_at=now,
            updated_at=now
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Note):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Note(id={self.id}, board_id={self.board_id}, x={self.x}, y={self.y})"
