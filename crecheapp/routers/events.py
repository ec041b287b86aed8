"""
Router dos eventos do calendário.
A leitura é pública; as rotas de escrita exigem o token de um docente.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from crecheapp.database import get_db
from crecheapp.schemas.event import EventCreate, EventResponse, EventUpdate
from crecheapp.security import TokenPayload, require_teacher
from crecheapp.services import event_service

router = APIRouter(prefix="/api/events", tags=["Calendário"])


@router.get("", response_model=List[EventResponse], summary="Eventos de um mês")
def list_events(
    year: int,
    month: int,
    teacher_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    """Eventos entre o primeiro e o último dia do mês, opcionalmente de um único docente."""
    return event_service.get_month_events(db, year, month, teacher_id)


@router.post("", response_model=EventResponse, status_code=201, summary="Criar um evento")
def create_event(
    data: EventCreate,
    db: Session = Depends(get_db),
    user: TokenPayload = Depends(require_teacher),
):
    """O docente autenticado é o dono do evento. 409 se ele já tiver um evento nessa data."""
    return event_service.create_event(db, data, teacher_id=user.sub)


@router.put("/{event_id}", response_model=EventResponse, summary="Alterar um evento")
def update_event(
    event_id: int,
    data: EventUpdate,
    db: Session = Depends(get_db),
    user: TokenPayload = Depends(require_teacher),
):
    return event_service.update_event(db, event_id, data, teacher_id=user.sub)


@router.delete("/{event_id}", status_code=204, summary="Excluir um evento")
def delete_event(
    event_id: int,
    db: Session = Depends(get_db),
    user: TokenPayload = Depends(require_teacher),
):
    event_service.delete_event(db, event_id, teacher_id=user.sub)
