"""
Modelos SQLAlchemy ligados aos usuários autenticados:
aceite dos termos de uso e histórico de sessões emitidas.
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, UniqueConstraint, func

from crecheapp.database import Base


class TermsAcceptance(Base):
    __tablename__ = "termos_aceitos"
    __table_args__ = (UniqueConstraint("user_type", "user_id", name="unique_user_terms"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_type = Column(String(20), nullable=False)  # aluno, docente
    user_id = Column(Integer, nullable=False)
    aceito = Column(Boolean, default=False)
    data_aceite = Column(DateTime, server_default=func.now())
    ip_address = Column(String(45), nullable=True)


class LoginSession(Base):
    """
    Registro de cada token emitido no login.
    Os tokens são JWT autossuficientes: esta tabela serve de histórico e
    nunca é consultada na validação. As linhas expiradas são removidas pelo scheduler.
    """
    __tablename__ = "sessoes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_type = Column(String(20), nullable=False)  # aluno, docente
    user_id = Column(Integer, nullable=False)
    token = Column(String(500), nullable=False)
    remember_me = Column(Boolean, default=False)
    expires_at = Column(DateTime, nullable=True, index=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
