"""
Schemas Pydantic dos registros diários.

Nota: datetime é importado como módulo (dt) para evitar o conflito de nomes
entre o campo `data` e os tipos de data no Pydantic v2.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, field_validator

from crecheapp.models.record import AVALIACOES, PRESENCAS


def _check_avaliacao(v: Optional[str]) -> Optional[str]:
    if v is not None and v not in AVALIACOES:
        raise ValueError(f"Valor inválido. Valores aceitos: {', '.join(AVALIACOES)}")
    return v


def _check_presenca(v: Optional[str]) -> Optional[str]:
    if v is not None and v not in PRESENCAS:
        raise ValueError(f"Valor inválido. Valores aceitos: {', '.join(PRESENCAS)}")
    return v


class RecordCreate(BaseModel):
    aluno_id: int
    turma_id: int
    data: dt.date
    alimentacao: Optional[str] = None
    comportamento: Optional[str] = None
    presenca: str = "Presente"
    observacoes: Optional[str] = None

    @field_validator("alimentacao", "comportamento")
    @classmethod
    def valid_avaliacao(cls, v: Optional[str]) -> Optional[str]:
        return _check_avaliacao(v)

    @field_validator("presenca")
    @classmethod
    def valid_presenca(cls, v: str) -> str:
        return _check_presenca(v)


class RecordUpdate(BaseModel):
    """PUT /registros/{id}: apenas os campos enviados são alterados."""
    turma_id: Optional[int] = None
    data: Optional[dt.date] = None
    alimentacao: Optional[str] = None
    comportamento: Optional[str] = None
    presenca: Optional[str] = None
    observacoes: Optional[str] = None

    @field_validator("alimentacao", "comportamento")
    @classmethod
    def valid_avaliacao(cls, v: Optional[str]) -> Optional[str]:
        return _check_avaliacao(v)

    @field_validator("presenca")
    @classmethod
    def valid_presenca(cls, v: Optional[str]) -> Optional[str]:
        return _check_presenca(v)


class RecordResponse(BaseModel):
    id: int
    aluno_id: int
    turma_id: int
    data: dt.date
    alimentacao: Optional[str]
    comportamento: Optional[str]
    presenca: Optional[str]
    observacoes: Optional[str]

    model_config = {"from_attributes": True}


class RecordCreated(BaseModel):
    id: int
    message: str
