from typing import Optional, List, Tuple, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.dialects import postgresql, sqlite

from app.db.models.board import Board as BoardModel

if TYPE_CHECKING:
    from app.domains.boards.entities import Board


# Диалекты с поддержкой INSERT ... ON CONFLICT DO NOTHING
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class BoardRepository:
    """Репозиторий для работы с досками"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def upsert(self, board: "Board") -> Tuple["Board", bool]:
        """Создание доски или обновление last_accessed_at существующей.

        Вставка условная по уникальному индексу boards.id, поэтому дубль
        доски не появится. created_at существующей доски не меняется.
        Возвращает сохранённую доску и признак того, что она была создана.
        """
        insert = _UPSERT_INSERTS.get(self.session.bind.dialect.name)

        if insert is not None:
            stmt = insert(BoardModel.__table__).values(
                id=board.id,
                created_at=board.created_at,
                last_accessed_at=board.last_accessed_at
            ).on_conflict_do_nothing(index_elements=["id"])
            result = await self.session.execute(stmt)
            created = result.rowcount > 0
        else:
            created = await self._insert(board)

        if not created:
            await self.session.execute(
                update(BoardModel)
                .where(BoardModel.id == board.id)
                .values(last_accessed_at=board.last_accessed_at)
            )

        return await self.get_by_id(board.id), created

    async def _insert(self, board: "Board") -> bool:
        """Запасной путь для диалектов без ON CONFLICT"""
        try:
            async with self.session.begin_nested():
                self.session.add(BoardModel(
                    id=board.id,
                    created_at=board.created_at,
                    last_accessed_at=board.last_accessed_at
                ))
        except IntegrityError:
            return False
        return True

    async def get_by_id(self, board_id: str) -> Optional["Board"]:
        """Получение доски по id"""
        result = await self.session.execute(
            select(BoardModel).where(BoardModel.id == board_id)
            .limit(1)
            .execution_options(populate_existing=True)
        )
        db_board = result.scalars().first()
        return self._to_domain(db_board) if db_board else None

    async def get_accessed_before(self, cutoff: int) -> List["Board"]:
        """Доски, к которым не обращались с момента cutoff"""
        result = await self.session.execute(
            select(BoardModel)
            .where(BoardModel.last_accessed_at < cutoff)
            .execution_options(populate_existing=True)
        )
        db_boards = result.scalars().all()
        return [self._to_domain(board) for board in db_boards]

    async def delete(self, row_id: int) -> bool:
        """Удаление доски по внутреннему идентификатору"""
        result = await self.session.execute(
            delete(BoardModel).where(BoardModel.row_id == row_id)
        )
        return result.rowcount > 0

    def _to_domain(self, db_board: BoardModel) -> "Board":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.boards.entities import Board

        return Board(
            id=db_board.id,
            created_at=db_board.created_at,
            last_accessed_at=db_board.last_accessed_at,
            row_id=db_board.row_id
        )
