"""
Serviço dos registros diários (alimentação, comportamento, presença, observações).
Um aluno tem no máximo um registro por data.
"""

import datetime as dt
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from crecheapp.exceptions import ConflictError, NotFoundError
from crecheapp.models.record import DailyRecord
from crecheapp.models.school_class import SchoolClass
from crecheapp.models.student import Student
from crecheapp.schemas.record import RecordCreate, RecordResponse, RecordUpdate

logger = logging.getLogger(__name__)

# Colunas NOT NULL: um null explícito no PUT é ignorado
_NOT_NULL_FIELDS = {"turma_id", "data", "presenca"}


def create_record(db: Session, data: RecordCreate) -> int:
    """
    Cria o registro do dia e retorna o id gerado.
    NotFoundError se o aluno ou a turma não existirem,
    ConflictError se o aluno já tiver um registro nessa data.
    """
    if db.get(Student, data.aluno_id) is None:
        raise NotFoundError("Aluno não encontrado.")
    if db.get(SchoolClass, data.turma_id) is None:
        raise NotFoundError("Turma não encontrada.")

    _check_free_date(db, data.aluno_id, data.data)

    record = DailyRecord(**data.model_dump())
    db.add(record)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Já existe um registro para este aluno nesta data.")
    db.refresh(record)

    logger.info("Registro criado: aluno=%s data=%s", data.aluno_id, data.data)
    return record.id


def get_student_records(
    db: Session,
    student_id: int,
    inicio: Optional[dt.date] = None,
    fim: Optional[dt.date] = None,
) -> List[RecordResponse]:
    """Registros do aluno, do mais recente ao mais antigo, opcionalmente limitados a [inicio, fim]."""
    query = select(DailyRecord).where(DailyRecord.aluno_id == student_id)
    if inicio is not None:
        query = query.where(DailyRecord.data >= inicio)
    if fim is not None:
        query = query.where(DailyRecord.data <= fim)

    records = db.execute(
        query.order_by(DailyRecord.data.desc())
    ).scalars().all()
    return [RecordResponse.model_validate(r) for r in records]


def update_record(db: Session, record_id: int, data: RecordUpdate) -> Optional[RecordResponse]:
    """Atualiza os campos enviados. Retorna None se o registro não existir."""
    record = db.get(DailyRecord, record_id)
    if record is None:
        return None

    update_data = {
        field: value
        for field, value in data.model_dump(exclude_unset=True).items()
        if value is not None or field not in _NOT_NULL_FIELDS
    }

    if "turma_id" in update_data and db.get(SchoolClass, update_data["turma_id"]) is None:
        raise NotFoundError("Turma não encontrada.")
    if "data" in update_data and update_data["data"] != record.data:
        _check_free_date(db, record.aluno_id, update_data["data"])

    for field, value in update_data.items():
        setattr(record, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Já existe um registro para este aluno nesta data.")
    db.refresh(record)
    return RecordResponse.model_validate(record)


def _check_free_date(db: Session, student_id: int, day: dt.date) -> None:
    existing = db.execute(
        select(DailyRecord.id).where(
            DailyRecord.aluno_id == student_id,
            DailyRecord.data == day,
        )
    ).scalar()
    if existing is not None:
        raise ConflictError("Já existe um registro para este aluno nesta data.")
