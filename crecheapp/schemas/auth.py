"""
Schemas Pydantic do cadastro e do login de alunos e docentes.
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


def _to_str(v):
    # A matrícula e o CPF podem chegar como números no JSON
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


def _not_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("O campo não pode ser vazio.")
    return v.strip()


class StudentRegister(BaseModel):
    """Corpo de POST /register/aluno."""
    # Tamanhos máximos iguais aos das colunas de alunos
    nome: str = Field(max_length=255)
    cpf: str
    matricula: str = Field(max_length=50)

    @field_validator("cpf", "matricula", mode="before")
    @classmethod
    def coerce_str(cls, v):
        return _to_str(v)

    @field_validator("nome", "cpf", "matricula")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return _not_blank(v)


class TeacherRegister(BaseModel):
    """Corpo de POST /register/docente."""
    nome: str = Field(max_length=255)
    identificador: str = Field(max_length=100)
    senha: str
    email: Optional[EmailStr] = None

    @field_validator("nome", "identificador")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return _not_blank(v)

    @field_validator("senha")
    @classmethod
    def senha_not_empty(cls, v: str) -> str:
        # A senha não é aparada: espaços fazem parte dela
        if not v:
            raise ValueError("A senha não pode ser vazia.")
        return v


class StudentLogin(BaseModel):
    matricula: str
    cpf: str

    @field_validator("cpf", "matricula", mode="before")
    @classmethod
    def coerce_str(cls, v):
        return _to_str(v)

    @field_validator("matricula", "cpf")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return _not_blank(v)


class TeacherLogin(BaseModel):
    identificador: str
    senha: str

    @field_validator("identificador")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return _not_blank(v)

    @field_validator("senha")
    @classmethod
    def senha_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("A senha não pode ser vazia.")
        return v


class RegisterResponse(BaseModel):
    id: int
    message: str


class UserInfo(BaseModel):
    id: int
    nome: str
    tipo: str                            # aluno, docente
    matricula: Optional[str] = None      # alunos
    identificador: Optional[str] = None  # docentes


class LoginResponse(BaseModel):
    token: str
    user: UserInfo
