from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.clock import Clock, get_clock
from app.core.db import get_db
from app.core.errors import NoteNotFoundError
from app.core.schemas import SuccessResponse
from app.domains.notes.entities import Note
from app.domains.notes.schemas import (
    NoteCreate, NoteTextUpdate, NotePositionUpdate, NoteColorUpdate, NoteResponse
)
from app.domains.notes.services import NoteService

router = APIRouter(tags=["notes"])


def to_note_response(note: Note) -> NoteResponse:
    return NoteResponse(
        id=note.id,
        board_id=note.board_id,
        text=note.text,
        x=note.x,
        y=note.y,
        color=note.color,
        created_at=note.created_at,
        updated_at=note.updated_at
    )


@router.post("/boards/{board_id}/notes", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    board_id: str,
    note_data: NoteCreate,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock)
):
    """Создание стикера на доске"""
    note_service = NoteService(db, clock)

    note = await note_service.create_note(
        board_id,
        note_data.text,
        note_data.x,
        note_data.y,
        note_data.color
    )
    return to_note_response(note)


@router.get("/boards/{board_id}/notes", response_model=List[NoteResponse])
async def get_notes(
    board_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Получение стикеров доски"""
    note_service = NoteService(db)

    notes = await note_service.get_notes(board_id)
    return [to_note_response(note) for note in notes]


@router.patch("/notes/{note_id}/text", response_model=SuccessResponse)
async def update_note_text(
    note_id: str,
    update_data: NoteTextUpdate,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock)
):
    """Изменение текста стикера"""
    note_service = NoteService(db, clock)

    try:
        await note_service.update_note_text(note_id, update_data.text)
    except NoteNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )

    return SuccessResponse()


@router.patch("/notes/{note_id}/position", response_model=SuccessResponse)
async def update_note_position(
    note_id: str,
    update_data: NotePositionUpdate,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock)
):
    """Перемещение стикера"""
    note_service = NoteService(db, clock)

    try:
        await note_service.update_note_position(note_id, update_data.x, update_data.y)
    except NoteNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )

    return SuccessResponse()


@router.patch("/notes/{note_id}/color", response_model=SuccessResponse)
async def update_note_color(
    note_id: str,
    update_data: NoteColorUpdate,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock)
):
    """Смена цвета стикера"""
    note_service = NoteService(db, clock)

    try:
        await note_service.update_note_color(note_id, update_data.color)
    except NoteNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )

    return SuccessResponse()


@router.delete("/notes/{note_id}", response_model=SuccessResponse)
async def delete_note(
    note_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Удаление стикера"""
    note_service = NoteService(db)

    try:
        await note_service.delete_note(note_id)
    except NoteNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )

    return SuccessResponse()
