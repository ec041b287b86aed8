"""
Modelo SQLAlchemy dos eventos do calendário.
"""

from sqlalchemy import Column, Date, DateTime, Integer, String, UniqueConstraint, func

from crecheapp.database import Base

EVENT_COLORS = ("red", "blue", "green", "yellow", "purple", "orange")


class CalendarEvent(Base):
    __tablename__ = "calendario_events"
    __table_args__ = (UniqueConstraint("teacher_id", "date", name="unique_teacher_date"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    teacher_id = Column(Integer, nullable=True)  # NULL = evento geral
    date = Column(Date, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    color = Column(String(20), default="blue")
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
