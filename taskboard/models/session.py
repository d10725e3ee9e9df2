"""
Session Model

Login sessions are issued by the authentication service; this table is only
read to resolve a bearer token to its user.
"""
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from taskboard.database import Base


class Session(Base):
    __tablename__ = "sessions"

    id = Column(String(32), primary_key=True, index=True)
    session_token = Column(String(255), unique=True, nullable=False, index=True)
    user_id = Column(String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    expires = Column(DateTime(timezone=True), nullable=False)

    # Relationships
    user = relationship("User", back_populates="sessions")
