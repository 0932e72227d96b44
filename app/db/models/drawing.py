from sqlalchemy import Column, String, Float, BigInteger, JSON

from app.db.base import BaseModel


class Drawing(BaseModel):
    __tablename__ = "drawings"

    id = Column(String(36), unique=True, index=True, nullable=False)
    board_id = Column(String(255), index=True, nullable=False)
    points = Column(JSON, nullable=False)  # [{"x": ..., "y": ...}, ...] в порядке рисования
    color = Column(String(64), nullable=False)
    stroke_width = Column(Float, nullable=False)
    created_at = Column(BigInteger, nullable=False)
