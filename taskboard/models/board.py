"""
Board Model
"""
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from taskboard.database import Base


class Board(Base):
    __tablename__ = "boards"

    id = Column(String(32), primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    user_id = Column(String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    user = relationship("User", back_populates="boards")
    board_columns = relationship(
        "BoardColumn", back_populates="board", cascade="all, delete-orphan", order_by="BoardColumn.created_at"
    )
