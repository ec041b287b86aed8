"""
Router dos registros diários.
"""

import datetime as dt
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from crecheapp.database import get_db
from crecheapp.schemas.record import RecordCreate, RecordCreated, RecordResponse, RecordUpdate
from crecheapp.services import record_service

router = APIRouter(prefix="/registros", tags=["Registros diários"])


@router.post("", response_model=RecordCreated, status_code=201, summary="Criar um registro diário")
def create_record(data: RecordCreate, db: Session = Depends(get_db)):
    """
    Cria o registro do dia de um aluno.
    409 se o aluno já tiver um registro na mesma data.
    """
    record_id = record_service.create_record(db, data)
    return RecordCreated(id=record_id, message="Registro criado com sucesso.")


@router.get("/{aluno_id}", response_model=List[RecordResponse], summary="Registros de um aluno")
def list_student_records(
    aluno_id: int,
    inicio: Optional[dt.date] = None,
    fim: Optional[dt.date] = None,
    db: Session = Depends(get_db),
):
    """Registros do aluno, do mais recente ao mais antigo. `inicio` e `fim` limitam o período."""
    return record_service.get_student_records(db, aluno_id, inicio, fim)


@router.put("/{registro_id}", response_model=RecordResponse, summary="Atualizar um registro")
def update_record(registro_id: int, data: RecordUpdate, db: Session = Depends(get_db)):
    result = record_service.update_record(db, registro_id, data)
    if result is None:
        raise HTTPException(status_code=404, detail="Registro não encontrado.")
    return result
