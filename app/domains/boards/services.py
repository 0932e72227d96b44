import logging
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import Clock, system_clock
from app.core.config import settings
from app.db.repositories.board_repository import BoardRepository
from app.db.repositories.note_repository import NoteRepository
from app.db.repositories.drawing_repository import DrawingRepository
from app.domains.boards.entities import Board, stale_cutoff

logger = logging.getLogger(__name__)


class BoardService:
    """Сервис для работы с досками"""

    def __init__(
        self,
        session: AsyncSession,
        clock: Clock = system_clock,
        ttl_hours: int = None
    ):
        self.session = session
        self.clock = clock
        self.ttl_hours = ttl_hours if ttl_hours is not None else settings.board_ttl_hours
        self.board_repository = BoardRepository(session)
        self.note_repository = NoteRepository(session)
        self.drawing_repository = DrawingRepository(session)

    async def get_or_create_board(self, board_id: str) -> Board:
        """Получение доски с обновлением времени обращения или создание новой"""
        board = Board.create_board(board_id, self.clock.now_ms())
        stored_board, created = await self.board_repository.upsert(board)
        await self.session.commit()

        if created:
            logger.info(f"Board {board_id} created")
        return stored_board

    async def get_board(self, board_id: str) -> Optional[Board]:
        """Получение доски со стикерами и штрихами.

        Время обращения не обновляется. Для отсутствующей доски возвращается None.
        """
        board = await self.board_repository.get_by_id(board_id)

        if not board:
            return None

        board.notes = await self.note_repository.get_by_board(board_id)
        board.drawings = await self.drawing_repository.get_by_board(board_id)
        return board

    async def cleanup_old_boards(self, now: Optional[int] = None) -> int:
        """Удаление досок, к которым не обращались дольше ttl_hours.

        Вместе с доской удаляются все её стикеры и штрихи.
        Возвращает количество удалённых досок.
        """
        if now is None:
            now = self.clock.now_ms()
        cutoff = stale_cutoff(now, self.ttl_hours)

        old_boards = await self.board_repository.get_accessed_before(cutoff)

        for board in old_boards:
            notes_deleted = await self.note_repository.delete_by_board(board.id)
            drawings_deleted = await self.drawing_repository.delete_by_board(board.id)
            await self.board_repository.delete(board.row_id)
            logger.info(
                f"Board {board.id} removed with {notes_deleted} notes "
                f"and {drawings_deleted} drawings"
            )

        await self.session.commit()

        logger.info(f"Cleanup removed {len(old_boards)} boards older than {cutoff}")
        return len(old_boards)
