"""
Schemas Pydantic das turmas e do vínculo turma ↔ alunos.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ClassCreate(BaseModel):
    nome: str = Field(max_length=255)
    ano: str = Field(max_length=10)

    @field_validator("ano", mode="before")
    @classmethod
    def ano_as_str(cls, v):
        # O ano pode chegar como número (2024)
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v

    @field_validator("nome", "ano")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Nome e ano são obrigatórios.")
        return v.strip()


class ClassUpdate(ClassCreate):
    """PUT /turmas/{id}: nome e ano substituídos, foto só alterada se enviada."""
    foto: Optional[str] = None


class ClassResponse(BaseModel):
    id: int
    nome: str
    ano: str
    foto: Optional[str] = None

    model_config = {"from_attributes": True}

    @field_validator("ano", mode="before")
    @classmethod
    def ano_as_str(cls, v):
        # Bancos antigos guardam o ano como INT
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v


class ClassStudentAdd(BaseModel):
    """Corpo de POST /turmas/{id}/alunos."""
    aluno_id: int


class ClassStudentResponse(BaseModel):
    """Aluno listado dentro de uma turma."""
    id: int
    nome: str
    matricula: str
    avatar: Optional[str] = None

    model_config = {"from_attributes": True}
