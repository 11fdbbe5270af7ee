# models/users.py
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func

from eventfence.db import Base


class User(Base):
    """Usuarios emitidos por el proveedor de identidad; aquí solo se leen"""
    __tablename__ = "users"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255))
    role = Column(String(32), nullable=False, default="user")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
