from app.domains.drawings.entities import Drawing
from app.domains.drawings.schemas import Point, DrawingCreate, DrawingResponse
from app.domains.drawings.services import DrawingService

__all__ = [
    "Drawing",
    "Point", "DrawingCreate", "DrawingResponse",
    "DrawingService"
]
