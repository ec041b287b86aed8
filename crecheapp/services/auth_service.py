"""
Serviço de autenticação de alunos (matrícula + CPF) e docentes (identificador + senha).

Qualquer falha devolve a mesma mensagem genérica, sem indicar qual campo estava errado.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from crecheapp.config import Settings
from crecheapp.exceptions import AuthenticationError
from crecheapp.models.session import LoginSession
from crecheapp.models.student import Student
from crecheapp.models.teacher import Teacher
from crecheapp.schemas.auth import LoginResponse, StudentLogin, TeacherLogin, UserInfo
from crecheapp.security import (
    KIND_STUDENT,
    KIND_TEACHER,
    create_access_token,
    decode_access_token,
    dummy_verify,
    normalize_cpf,
    verify_password,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Credenciais inválidas."


def login_student(db: Session, settings: Settings, data: StudentLogin) -> LoginResponse:
    """Autentica um aluno pelo par exato (matrícula, CPF normalizado)."""
    student = db.execute(
        select(Student).where(
            Student.matricula == data.matricula.strip(),
            Student.cpf == normalize_cpf(data.cpf),
        )
    ).scalar()
    if student is None:
        logger.info("Login de aluno recusado: matricula=%s", data.matricula)
        raise AuthenticationError(INVALID_CREDENTIALS)

    token = create_access_token(settings, student.id, KIND_STUDENT, matricula=student.matricula)
    _record_session(db, settings, "aluno", student.id, token)

    logger.info("Login de aluno: id=%s", student.id)
    return LoginResponse(
        token=token,
        user=UserInfo(id=student.id, nome=student.nome, tipo="aluno", matricula=student.matricula),
    )


def login_teacher(db: Session, settings: Settings, data: TeacherLogin) -> LoginResponse:
    """
    Autentica um docente comparando a senha com o hash bcrypt.
    Identificador desconhecido e senha errada custam o mesmo tempo e dão a mesma resposta.
    """
    teacher = db.execute(
        select(Teacher).where(Teacher.identificador == data.identificador)
    ).scalar()

    if teacher is None:
        dummy_verify()
        logger.info("Login de docente recusado: identificador=%s", data.identificador)
        raise AuthenticationError(INVALID_CREDENTIALS)

    if not verify_password(data.senha, teacher.senha):
        logger.info("Login de docente recusado: identificador=%s", data.identificador)
        raise AuthenticationError(INVALID_CREDENTIALS)

    token = create_access_token(
        settings, teacher.id, KIND_TEACHER, identificador=teacher.identificador
    )
    _record_session(db, settings, "docente", teacher.id, token)

    logger.info("Login de docente: id=%s", teacher.id)
    return LoginResponse(
        token=token,
        user=UserInfo(
            id=teacher.id, nome=teacher.nome, tipo="docente", identificador=teacher.identificador
        ),
    )


def _record_session(db: Session, settings: Settings, user_type: str, user_id: int, token: str) -> None:
    """Guarda o token emitido no histórico de sessões (não usado na validação)."""
    expires_at = decode_access_token(settings, token).exp
    db.add(LoginSession(
        user_type=user_type,
        user_id=user_id,
        token=token,
        # Datas gravadas em UTC sem fuso, como o restante do esquema
        expires_at=expires_at.astimezone(timezone.utc).replace(tzinfo=None),
    ))
    db.commit()


def purge_expired_sessions(db: Session, now: Optional[datetime] = None) -> int:
    """Remove as sessões expiradas e retorna quantas foram apagadas."""
    now = now or datetime.now(timezone.utc).replace(tzinfo=None)
    result = db.execute(delete(LoginSession).where(LoginSession.expires_at < now))
    db.commit()
    return result.rowcount or 0
