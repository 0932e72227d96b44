from sqlalchemy import Column, String, BigInteger

from app.db.base import BaseModel


class Board(BaseModel):
    __tablename__ = "boards"

    # Уникальность id исключает дубли досок при одновременном первом обращении
    id = Column(String(255), unique=True, index=True, nullable=False)
    created_at = Column(BigInteger, nullable=False)
    last_accessed_at = Column(BigInteger, nullable=False, index=True)
