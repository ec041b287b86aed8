"""
Router de cadastro e login de alunos e docentes.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from crecheapp.config import Settings
from crecheapp.database import get_db
from crecheapp.schemas.auth import (
    LoginResponse,
    RegisterResponse,
    StudentLogin,
    StudentRegister,
    TeacherLogin,
    TeacherRegister,
)
from crecheapp.security import get_settings
from crecheapp.services import auth_service, registration_service

router = APIRouter(tags=["Autenticação"])


@router.post("/register/aluno", response_model=RegisterResponse, status_code=201,
             summary="Cadastrar um aluno")
def register_student(data: StudentRegister, db: Session = Depends(get_db)):
    """
    Cadastra um aluno. O CPF é gravado apenas com os dígitos.
    409 se a matrícula ou o CPF já estiverem cadastrados.
    """
    student_id = registration_service.register_student(db, data)
    return RegisterResponse(id=student_id, message="Aluno cadastrado com sucesso!")


@router.post("/register/docente", response_model=RegisterResponse, status_code=201,
             summary="Cadastrar um docente")
def register_teacher(data: TeacherRegister, db: Session = Depends(get_db)):
    """Cadastra um docente; a senha é gravada em hash bcrypt. 409 se o identificador já existir."""
    teacher_id = registration_service.register_teacher(db, data)
    return RegisterResponse(id=teacher_id, message="Docente cadastrado com sucesso!")


@router.post("/login/aluno", response_model=LoginResponse, summary="Login de aluno")
def login_student(
    data: StudentLogin,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return auth_service.login_student(db, settings, data)


@router.post("/login/docente", response_model=LoginResponse, summary="Login de docente")
def login_teacher(
    data: TeacherLogin,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return auth_service.login_teacher(db, settings, data)
