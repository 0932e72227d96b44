class NotFoundError(Exception):
    """Запрошенная сущность не найдена"""

    message = "Not found"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class NoteNotFoundError(NotFoundError):
    message = "Note not found"


class DrawingNotFoundError(NotFoundError):
    message = "Drawing not found"
