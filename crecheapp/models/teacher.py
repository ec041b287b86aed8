"""
Modelo SQLAlchemy dos docentes.
A coluna senha guarda apenas o hash bcrypt.
"""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from crecheapp.database import Base


class Teacher(Base):
    __tablename__ = "docentes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(255), nullable=False)
    identificador = Column(String(100), unique=True, nullable=False)
    senha = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    avatar = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
