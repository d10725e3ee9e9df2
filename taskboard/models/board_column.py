"""
Board Column Model
"""
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from taskboard.database import Base


class BoardColumn(Base):
    __tablename__ = "board_columns"

    id = Column(String(32), primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    board_id = Column(String(32), ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    board = relationship("Board", back_populates="board_columns")
    tasks = relationship("Task", back_populates="board_column", cascade="all, delete-orphan")
