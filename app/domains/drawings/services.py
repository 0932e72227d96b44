import logging
from typing import List, Dict
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import Clock, system_clock
from app.core.errors import DrawingNotFoundError
from app.db.repositories.drawing_repository import DrawingRepository
from app.domains.drawings.entities import Drawing

logger = logging.getLogger(__name__)


class DrawingService:
    """Сервис для работы со штрихами. Штрихи не редактируются"""

    def __init__(self, session: AsyncSession, clock: Clock = system_clock):
        self.session = session
        self.clock = clock
        self.drawing_repository = DrawingRepository(session)

    async def create_drawing(
        self,
        board_id: str,
        points: List[Dict[str, float]],
        color: str,
        stroke_width: float
    ) -> Drawing:
        """Создание штриха"""
        drawing = Drawing.create_drawing(
            board_id=board_id,
            points=points,
            color=color,
            stroke_width=stroke_width,
            now=self.clock.now_ms()
        )
        created_drawing = await self.drawing_repository.create(drawing)
        await self.session.commit()

        if not created_drawing.point_count:
            logger.warning(f"Empty drawing {created_drawing.id} stored on board {board_id}")
        logger.info(f"Drawing {created_drawing.id} created on board {board_id}")
        return created_drawing

    async def get_drawings(self, board_id: str) -> List[Drawing]:
        """Получение штрихов доски"""
        return await self.drawing_repository.get_by_board(board_id)

    async def delete_drawing(self, drawing_id: str) -> None:
        """Удаление штриха"""
        drawing = await self.drawing_repository.get_by_id(drawing_id)

        if not drawing:
            raise DrawingNotFoundError()

        await self.drawing_repository.delete(drawing.row_id)
        await self.session.commit()

        logger.info(f"Drawing {drawing_id} deleted from board {drawing.board_id}")
