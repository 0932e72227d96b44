from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from app.api.http.notes import to_note_response
from app.api.http.drawings import to_drawing_response
from app.core.clock import Clock, get_clock
from app.core.db import get_db
from app.domains.boards.schemas import BoardResponse, BoardDetailResponse, CleanupResponse
from app.domains.boards.services import BoardService

router = APIRouter(prefix="/boards", tags=["boards"])


# Объявлен до /{board_id}; запускается внешним планировщиком
@router.delete("/stale", response_model=CleanupResponse)
async def cleanup_old_boards(
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock)
):
    """Удаление досок, к которым давно не обращались"""
    board_service = BoardService(db, clock)

    deleted_count = await board_service.cleanup_old_boards()
    return CleanupResponse(deleted_count=deleted_count)


@router.post("/{board_id}", response_model=BoardResponse)
async def get_or_create_board(
    board_id: str,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock)
):
    """Открытие доски: создаёт её или обновляет время обращения"""
    board_service = BoardService(db, clock)

    board = await board_service.get_or_create_board(board_id)

    return BoardResponse(
        id=board.id,
        created_at=board.created_at,
        last_accessed_at=board.last_accessed_at
    )


@router.get("/{board_id}", response_model=Optional[BoardDetailResponse])
async def get_board(
    board_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Получение доски со стикерами и штрихами, либо null"""
    board_service = BoardService(db)

    board = await board_service.get_board(board_id)

    if not board:
        return None

    return BoardDetailResponse(
        id=board.id,
        created_at=board.created_at,
        last_accessed_at=board.last_accessed_at,
        notes=[to_note_response(note) for note in board.notes],
        drawings=[to_drawing_response(drawing) for drawing in board.drawings]
    )
