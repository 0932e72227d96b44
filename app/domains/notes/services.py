import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import Clock, system_clock
from app.core.errors import NoteNotFoundError
from app.db.repositories.note_repository import NoteRepository
from app.domains.notes.entities import Note

logger = logging.getLogger(__name__)


class NoteService:
    """Сервис для работы со стикерами"""

    def __init__(self, session: AsyncSession, clock: Clock = system_clock):
        self.session = session
        self.clock = clock
        self.note_repository = NoteRepository(session)

    async def create_note(
        self,
        board_id: str,
        text: str,
        x: float,
        y: float,
        color: str
    ) -> Note:
        """Создание стикера. Существование доски не проверяется"""
        note = Note.create_note(board_id, text, x, y, color, self.clock.now_ms())
        created_note = await self.note_repository.create(note)
        await self.session.commit()

        logger.info(f"Note {created_note.id} created on board {board_id}")
        return created_note

    async def get_notes(self, board_id: str) -> List[Note]:
        """Получение стикеров доски"""
        return await self.note_repository.get_by_board(board_id)

    # Узкие операции обновления: при перетаскивании пишутся только x/y
    async def update_note_text(self, note_id: str, text: str) -> None:
        note = await self._get_note(note_id)
        await self.note_repository.patch(note.row_id, **note.update_text(text, self.clock.now_ms()))
        await self.session.commit()

    async def update_note_position(self, note_id: str, x: float, y: float) -> None:
        note = await self._get_note(note_id)
        await self.note_repository.patch(note.row_id, **note.move_to(x, y, self.clock.now_ms()))
        await self.session.commit()

    async def update_note_color(self, note_id: str, color: str) -> None:
        note = await self._get_note(note_id)
        await self.note_repository.patch(note.row_id, **note.recolor(color, self.clock.now_ms()))
        await self.session.commit()

    async def delete_note(self, note_id: str) -> None:
        """Удаление стикера. Принадлежность доске не проверяется"""
        note = await self._get_note(note_id)
        await self.note_repository.delete(note.row_id)
        await self.session.commit()

        logger.info(f"Note {note_id} deleted from board {note.board_id}")

    async def _get_note(self, note_id: str) -> Note:
        note = await self.note_repository.get_by_id(note_id)
        if not note:
            raise NoteNotFoundError()
        return note
