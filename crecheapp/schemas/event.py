"""
Schemas Pydantic dos eventos do calendário.
Mesmo truque de import (dt) que em record.py por causa do campo `date`.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from crecheapp.models.event import EVENT_COLORS


def _check_color(v: Optional[str]) -> Optional[str]:
    if v is not None and v not in EVENT_COLORS:
        raise ValueError(f"Cor inválida. Valores aceitos: {', '.join(EVENT_COLORS)}")
    return v


class EventCreate(BaseModel):
    date: dt.date
    title: str = Field(max_length=255)
    color: str = "blue"

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("O título não pode ser vazio.")
        return v.strip()

    @field_validator("color")
    @classmethod
    def valid_color(cls, v: str) -> str:
        return _check_color(v)


class EventUpdate(BaseModel):
    date: Optional[dt.date] = None
    title: Optional[str] = Field(default=None, max_length=255)
    color: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("O título não pode ser vazio.")
        return v.strip() if v else v

    @field_validator("color")
    @classmethod
    def valid_color(cls, v: Optional[str]) -> Optional[str]:
        return _check_color(v)


class EventResponse(BaseModel):
    id: int
    teacher_id: Optional[int]
    date: dt.date
    title: str
    color: str

    model_config = {"from_attributes": True}
