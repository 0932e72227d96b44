from app.core.schemas import CamelModel


class NoteCreate(CamelModel):
    """Схема для создания стикера"""
    text: str
    x: float
    y: float
    color: str


class NoteTextUpdate(CamelModel):
    """Схема для изменения текста"""
    text: str


class NotePositionUpdate(CamelModel):
    """Схема для перемещения"""
    x: float
    y: float


class NoteColorUpdate(CamelModel):
    """Схема для смены цвета"""
    color: str


class NoteResponse(CamelModel):
    """Схема для ответа с данными стикера"""
    id: str
    board_id: str
    text: str
    x: float
    y: float
    color: str
    created_at: int
    updated_at: int
