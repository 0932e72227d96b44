from sqlalchemy import Column, String, Text, Float, BigInteger

from app.db.base import BaseModel


class Note(BaseModel):
    __tablename__ = "notes"

    id = Column(String(36), unique=True, index=True, nullable=False)
    # Связь с доской по строке, без внешнего ключа
    board_id = Column(String(255), index=True, nullable=False)
    text = Column(Text, nullable=False, default="")
    x = Column(Float, nullable=False)
    y = Column(Float, nullable=False)
    color = Column(String(64), nullable=False)
    created_at = Column(BigInteger, nullable=False)
    updated_at = Column(BigInteger, nullable=False)
