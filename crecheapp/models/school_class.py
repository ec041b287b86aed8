"""
Modelos SQLAlchemy das turmas e do vínculo turma ↔ alunos.
Nomeado school_class para evitar conflito com a palavra-chave 'class'.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, func

from crecheapp.database import Base


class SchoolClass(Base):
    __tablename__ = "turmas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(255), nullable=False)
    ano = Column(String(10), nullable=False)
    foto = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())


class ClassStudent(Base):
    """Associação turma ↔ alunos (muitos-para-muitos)."""
    __tablename__ = "turma_alunos"
    __table_args__ = (UniqueConstraint("turma_id", "aluno_id", name="unique_turma_aluno"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    turma_id = Column(Integer, ForeignKey("turmas.id", ondelete="CASCADE"), nullable=False)
    aluno_id = Column(Integer, ForeignKey("alunos.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
