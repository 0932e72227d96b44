import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.http.health import router as health_router
from app.api.http.boards import router as boards_router
from app.api.http.notes import router as notes_router
from app.api.http.drawings import router as drawings_router
from app.core.config import settings
from app.core.db import create_tables

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Миграций нет: схема создаётся при старте
    await create_tables()
    logger.info("Database tables are ready")
    yield


app = FastAPI(
    title=settings.app_name,
    description="Хранилище досок: стикеры, рисунки и очистка неактивных досок",
    version="1.0.0",
    lifespan=lifespan
)

# Настройка CORS для работы с frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # В продакшене указать конкретные домены
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключаем роутеры
app.include_router(health_router)
app.include_router(boards_router)
app.include_router(notes_router)
app.include_router(drawings_router)


@app.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "message": f"{settings.app_name} API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }
