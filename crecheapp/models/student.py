"""
Modelo SQLAlchemy da tabela alunos.
O vínculo com turmas fica em turma_alunos (ver school_class.py).
"""

from sqlalchemy import Column, Date, DateTime, Integer, String, Text, func

from crecheapp.database import Base


class Student(Base):
    __tablename__ = "alunos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(255), nullable=False)
    cpf = Column(String(20), unique=True, nullable=False)       # Apenas dígitos
    matricula = Column(String(50), unique=True, nullable=False)
    data_nascimento = Column(Date, nullable=True)
    avatar = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
