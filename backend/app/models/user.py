"""Application user. id is the auth provider's user id (Supabase auth.users.id)."""
from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func

from app.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True)
    email = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False, default="")
    role = Column(String(16), nullable=False, server_default="user")  # user | expert
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
