from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete

from app.db.models.note import Note as NoteModel

if TYPE_CHECKING:
    from app.domains.notes.entities import Note


class NoteRepository:
    """Репозиторий для работы со стикерами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, note: "Note") -> "Note":
        """Создание нового стикера"""
        db_note = NoteModel(
            id=note.id,
            board_id=note.board_id,
            text=note.text,
            x=note.x,
            y=note.y,
            color=note.color,
            created_at=note.created_at,
            updated_at=note.updated_at
        )

        self.session.add(db_note)
        await self.session.flush()
        return self._to_domain(db_note)

    async def get_by_id(self, note_id: str) -> Optional["Note"]:
        """Получение стикера по id"""
        result = await self.session.execute(
            select(NoteModel).where(NoteModel.id == note_id)
            .limit(1)
            .execution_options(populate_existing=True)
        )
        db_note = result.scalars().first()
        return self._to_domain(db_note) if db_note else None

    async def get_by_board(self, board_id: str) -> List["Note"]:
        """Получение всех стикеров доски"""
        result = await self.session.execute(
            select(NoteModel)
            .where(NoteModel.board_id == board_id)
            .execution_options(populate_existing=True)
        )
        db_notes = result.scalars().all()
        return [self._to_domain(note) for note in db_notes]

    async def patch(self, row_id: int, **fields) -> None:
        """Частичное обновление: пишутся только переданные поля"""
        await self.session.execute(
            update(NoteModel)
            .where(NoteModel.row_id == row_id)
            .values(**fields)
        )

    async def delete(self, row_id: int) -> bool:
        """Удаление стикера по внутреннему идентификатору"""
        result = await self.session.execute(
            delete(NoteModel).where(NoteModel.row_id == row_id)
        )
        return result.rowcount > 0

    async def delete_by_board(self, board_id: str) -> int:
        """Удаление всех стикеров доски"""
        result = await self.session.execute(
            delete(NoteModel).where(NoteModel.board_id == board_id)
        )
        return result.rowcount

    def _to_domain(self, db_note: NoteModel) -> "Note":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.notes.entities import Note

        return Note(
            id=db_note.id,
            board_id=db_note.board_id,
            text=db_note.text,
            x=db_note.x,
            y=db_note.y,
            color=db_note.color,
            created_at=db_note.created_at,
            updated_at=db_note.updated_at,
            row_id=db_note.row_id
        )
