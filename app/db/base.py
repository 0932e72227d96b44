from sqlalchemy import Column, Integer

from app.core.db import Base


class BaseModel(Base):
    """Абстрактная модель: внутренний идентификатор строки хранилища.

    row_id не покидает слой хранения. Доменные сущности адресуются
    строковым полем id, а row_id используется только для точечных
    patch/delete после поиска.
    """
    __abstract__ = True

    row_id = Column(Integer, primary_key=True, autoincrement=True)
