from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.clock import Clock, get_clock
from app.core.db import get_db
from app.core.errors import DrawingNotFoundError
from app.core.schemas import SuccessResponse
from app.domains.drawings.entities import Drawing
from app.domains.drawings.schemas import DrawingCreate, DrawingResponse
from app.domains.drawings.services import DrawingService

router = APIRouter(tags=["drawings"])


def to_drawing_response(drawing: Drawing) -> DrawingResponse:
    return DrawingResponse(
        id=drawing.id,
        board_id=drawing.board_id,
        points=drawing.points,
        color=drawing.color,
        stroke_width=drawing.stroke_width,
        created_at=drawing.created_at
    )


@router.post("/boards/{board_id}/drawings", response_model=DrawingResponse, status_code=status.HTTP_201_CREATED)
async def create_drawing(
    board_id: str,
    drawing_data: DrawingCreate,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock)
):
    """Создание штриха на доске"""
    drawing_service = DrawingService(db, clock)

    drawing = await drawing_service.create_drawing(
        board_id,
        [point.model_dump() for point in drawing_data.points],
        drawing_data.color,
        drawing_data.stroke_width
    )
    return to_drawing_response(drawing)


@router.get("/boards/{board_id}/drawings", response_model=List[DrawingResponse])
async def get_drawings(
    board_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Получение штрихов доски"""
    drawing_service = DrawingService(db)

    drawings = await drawing_service.get_drawings(board_id)
    return [to_drawing_response(drawing) for drawing in drawings]


@router.delete("/drawings/{drawing_id}", response_model=SuccessResponse)
async def delete_drawing(
    drawing_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Удаление штриха"""
    drawing_service = DrawingService(db)

    try:
        await drawing_service.delete_drawing(drawing_id)
    except DrawingNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )

    return SuccessResponse()
