"""
Serviço dos eventos do calendário.
Cada docente tem no máximo um evento por data; só o dono altera ou exclui o evento.
"""

import calendar
import datetime as dt
import logging
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from crecheapp.exceptions import ConflictError, NotFoundError, PermissionDenied, ValidationError
from crecheapp.models.event import CalendarEvent
from crecheapp.schemas.event import EventCreate, EventResponse, EventUpdate

logger = logging.getLogger(__name__)

DUPLICATE_DATE = "Já existe um evento deste docente nesta data."


def month_range(year: int, month: int) -> Tuple[dt.date, dt.date]:
    """Primeiro e último dia do mês (intervalo fechado, anos bissextos incluídos)."""
    if not 1 <= month <= 12:
        raise ValidationError("Mês inválido: informe um valor entre 1 e 12.")
    if not dt.MINYEAR <= year <= dt.MAXYEAR:
        raise ValidationError("Ano inválido.")
    last_day = calendar.monthrange(year, month)[1]
    return dt.date(year, month, 1), dt.date(year, month, last_day)


def get_month_events(
    db: Session, year: int, month: int, teacher_id: Optional[int] = None
) -> List[EventResponse]:
    """Eventos do mês, ordenados por data, opcionalmente filtrados pelo docente."""
    start, end = month_range(year, month)

    query = select(CalendarEvent).where(CalendarEvent.date.between(start, end))
    if teacher_id is not None:
        query = query.where(CalendarEvent.teacher_id == teacher_id)

    events = db.execute(
        query.order_by(CalendarEvent.date, CalendarEvent.id)
    ).scalars().all()
    return [EventResponse.model_validate(e) for e in events]


def create_event(db: Session, data: EventCreate, teacher_id: int) -> EventResponse:
    _check_free_date(db, teacher_id, data.date)

    event = CalendarEvent(teacher_id=teacher_id, date=data.date, title=data.title, color=data.color)
    db.add(event)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(DUPLICATE_DATE)
    db.refresh(event)

    logger.info("Evento criado: %s (%s) docente=%s", event.title, event.date, teacher_id)
    return EventResponse.model_validate(event)


def update_event(db: Session, event_id: int, data: EventUpdate, teacher_id: int) -> EventResponse:
    event = _get_owned_event(db, event_id, teacher_id)

    update_data = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
    if "date" in update_data and update_data["date"] != event.date:
        _check_free_date(db, teacher_id, update_data["date"])

    for field, value in update_data.items():
        setattr(event, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(DUPLICATE_DATE)
    db.refresh(event)
    return EventResponse.model_validate(event)


def delete_event(db: Session, event_id: int, teacher_id: int) -> None:
    event = _get_owned_event(db, event_id, teacher_id)
    db.delete(event)
    db.commit()
    logger.info("Evento excluído: %s docente=%s", event_id, teacher_id)


def _get_owned_event(db: Session, event_id: int, teacher_id: int) -> CalendarEvent:
    event = db.get(CalendarEvent, event_id)
    if event is None:
        raise NotFoundError("Evento não encontrado.")
    if event.teacher_id != teacher_id:
        raise PermissionDenied("Este evento pertence a outro docente.")
    return event


def _check_free_date(db: Session, teacher_id: int, day: dt.date) -> None:
    existing = db.execute(
        select(CalendarEvent.id).where(
            CalendarEvent.teacher_id == teacher_id,
            CalendarEvent.date == day,
        )
    ).scalar()
    if existing is not None:
        raise ConflictError(DUPLICATE_DATE)
