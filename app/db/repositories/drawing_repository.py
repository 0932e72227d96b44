from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete

from app.db.models.drawing import Drawing as DrawingModel

if TYPE_CHECKING:
    from app.domains.drawings.entities import Drawing


class DrawingRepository:
    """Репозиторий для работы со штрихами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, drawing: "Drawing") -> "Drawing":
        """Создание нового штриха"""
        db_drawing = DrawingModel(
            id=drawing.id,
            board_id=drawing.board_id,
            points=drawing.points,
            color=drawing.color,
            stroke_width=drawing.stroke_width,
            created_at=drawing.created_at
        )

        self.session.add(db_drawing)
        await self.session.flush()
        return self._to_domain(db_drawing)

    async def get_by_id(self, drawing_id: str) -> Optional["Drawing"]:
        """Получение штриха по id"""
        result = await self.session.execute(
            select(DrawingModel).where(DrawingModel.id == drawing_id)
            .limit(1)
            .execution_options(populate_existing=True)
        )
        db_drawing = result.scalars().first()
        return self._to_domain(db_drawing) if db_drawing else None

    async def get_by_board(self, board_id: str) -> List["Drawing"]:
        """Получение всех штрихов доски"""
        result = await self.session.execute(
            select(DrawingModel)
            .where(DrawingModel.board_id == board_id)
            .execution_options(populate_existing=True)
        )
        db_drawings = result.scalars().all()
        return [self._to_domain(drawing) for drawing in db_drawings]

    async def delete(self, row_id: int) -> bool:
        """Удаление штриха по внутреннему идентификатору"""
        result = await self.session.execute(
            delete(DrawingModel).where(DrawingModel.row_id == row_id)
        )
        return result.rowcount > 0

    async def delete_by_board(self, board_id: str) -> int:
        """Удаление всех штрихов доски"""
        result = await self.session.execute(
            delete(DrawingModel).where(DrawingModel.board_id == board_id)
        )
        return result.rowcount

    def _to_domain(self, db_drawing: DrawingModel) -> "Drawing":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.drawings.entities import Drawing

        return Drawing(
            id=db_drawing.id,
            board_id=db_drawing.board_id,
            points=list(db_drawing.points),
            color=db_drawing.color,
            stroke_width=db_drawing.stroke_width,
            created_at=db_drawing.created_at,
            row_id=db_drawing.row_id
        )
