from app.api.http.health import router as health_router
from app.api.http.boards import router as boards_router
from app.api.http.notes import router as notes_router
from app.api.http.drawings import router as drawings_router

__all__ = [
    "health_router",
    "boards_router",
    "notes_router",
    "drawings_router"
]
