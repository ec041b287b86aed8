"""
Modelos SQLAlchemy dos comunicados, seus destinatários e rascunhos.
Somente o esquema existe por enquanto; o envio não é tratado pela API.
"""

from sqlalchemy import Column, Date, DateTime, Integer, String, Text, func

from crecheapp.database import Base


class Announcement(Base):
    __tablename__ = "comunicados"

    id = Column(Integer, primary_key=True, autoincrement=True)
    docente_id = Column(Integer, nullable=False)
    title = Column(String(255), nullable=False)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    destinatarios = Column(Text, nullable=False)
    cc = Column(Text, nullable=True)
    bcc = Column(Text, nullable=True)
    icon = Column(String(10), default="📝")
    tipo = Column(String(20), default="default")  # default, urgent, info
    data_evento = Column(Date, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())


class AnnouncementRecipient(Base):
    __tablename__ = "comunicado_destinatarios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    comunicado_id = Column(Integer, nullable=False)
    tipo = Column(String(20), nullable=False)  # aluno, docente, geral
    destinatario_id = Column(Integer, nullable=True)
    created_at = Column(DateTime, server_default=func.now())


class Draft(Base):
    __tablename__ = "rascunhos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    docente_id = Column(Integer, nullable=False)
    title = Column(String(255), nullable=True)
    subject = Column(String(255), nullable=True)
    message = Column(Text, nullable=True)
    destinatarios = Column(Text, nullable=True)
    cc = Column(Text, nullable=True)
    bcc = Column(Text, nullable=True)
    icon = Column(String(10), default="📝")
    saved_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
