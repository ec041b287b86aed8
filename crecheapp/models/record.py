"""
Modelo SQLAlchemy dos registros diários (alimentação, comportamento, presença).
Um único registro por aluno e por data.
"""

from sqlalchemy import Column, Date, DateTime, Integer, String, Text, UniqueConstraint, func

from crecheapp.database import Base

AVALIACOES = ("Ótimo", "Bom", "Regular", "Ruim")
PRESENCAS = ("Presente", "Ausente")


class DailyRecord(Base):
    __tablename__ = "registros"
    __table_args__ = (UniqueConstraint("aluno_id", "data", name="unique_aluno_data"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    aluno_id = Column(Integer, nullable=False, index=True)
    turma_id = Column(Integer, nullable=False)
    data = Column(Date, nullable=False, index=True)
    alimentacao = Column(String(50), nullable=True)    # Ótimo, Bom, Regular, Ruim
    comportamento = Column(String(50), nullable=True)  # Ótimo, Bom, Regular, Ruim
    presenca = Column(String(50), default="Presente")  # Presente, Ausente
    observacoes = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
