"""
Testes unitários do serviço de autenticação e da limpeza das sessões.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy import func, select

from crecheapp.exceptions import AuthenticationError
from crecheapp.models.session import LoginSession
from crecheapp.schemas.auth import StudentLogin, StudentRegister, TeacherLogin, TeacherRegister
from crecheapp.security import decode_access_token, hash_password
from crecheapp.services.auth_service import (
    INVALID_CREDENTIALS,
    login_student,
    login_teacher,
    purge_expired_sessions,
)
from crecheapp.services.registration_service import register_student, register_teacher


# --- Helpers ---

def make_teacher_mock(senha="segredo"):
    t = MagicMock()
    t.id = 5
    t.nome = "Maria"
    t.identificador = "maria"
    t.senha = hash_password(senha)
    return t


def make_db_mock(found=None):
    db = MagicMock()
    db.execute.return_value.scalar.return_value = found
    return db


# --- login_teacher (banco mockado) ---

def test_login_teacher_sucesso(settings):
    db = make_db_mock(make_teacher_mock())
    result = login_teacher(db, settings, TeacherLogin(identificador="maria", senha="segredo"))

    assert result.user.tipo == "docente"
    assert result.user.identificador == "maria"
    payload = decode_access_token(settings, result.token)
    assert payload.sub == 5
    assert payload.kind == "teacher"
    # A sessão emitida é registrada
    assert isinstance(db.add.call_args[0][0], LoginSession)


def test_login_teacher_senha_errada(settings):
    db = make_db_mock(make_teacher_mock())
    with pytest.raises(AuthenticationError) as exc:
        login_teacher(db, settings, TeacherLogin(identificador="maria", senha="errada"))
    assert exc.value.message == INVALID_CREDENTIALS
    db.add.assert_not_called()


def test_login_teacher_desconhecido_mesma_resposta(settings):
    """Identificador desconhecido: mesma mensagem, e o bcrypt roda mesmo assim."""
    db = make_db_mock(None)
    with patch("crecheapp.services.auth_service.dummy_verify") as mock_dummy:
        with pytest.raises(AuthenticationError) as exc:
            login_teacher(db, settings, TeacherLogin(identificador="ninguem", senha="x"))
    assert exc.value.message == INVALID_CREDENTIALS
    mock_dummy.assert_called_once()


# --- login_student (banco mockado) ---

def test_login_student_desconhecido(settings):
    db = make_db_mock(None)
    with pytest.raises(AuthenticationError, match=INVALID_CREDENTIALS):
        login_student(db, settings, StudentLogin(matricula="A1", cpf="00000000000"))


# --- SQLite em memória ---

def test_login_student_cpf_formatado_ou_bruto(db, settings):
    register_student(db, StudentRegister(nome="Ana", cpf="111.222.333-44", matricula="A1"))

    raw = login_student(db, settings, StudentLogin(matricula="A1", cpf="11122233344"))
    formatted = login_student(db, settings, StudentLogin(matricula="A1", cpf="111.222.333-44"))

    assert raw.user.id == formatted.user.id
    assert raw.user.tipo == "aluno"
    payload = decode_access_token(settings, raw.token)
    assert payload.kind == "student"
    assert payload.sub == raw.user.id


def test_login_student_cpf_errado(db, settings):
    register_student(db, StudentRegister(nome="Ana", cpf="111.222.333-44", matricula="A1"))
    with pytest.raises(AuthenticationError):
        login_student(db, settings, StudentLogin(matricula="A1", cpf="00000000000"))


def test_login_teacher_registra_sessao(db, settings):
    register_teacher(db, TeacherRegister(nome="Maria", identificador="maria", senha="segredo"))
    login_teacher(db, settings, TeacherLogin(identificador="maria", senha="segredo"))

    session = db.execute(select(LoginSession)).scalar_one()
    assert session.user_type == "docente"
    assert session.expires_at > datetime.now(timezone.utc).replace(tzinfo=None)


def test_purge_expired_sessions(db):
    now = datetime(2024, 6, 1, 12, 0)
    db.add_all([
        LoginSession(user_type="aluno", user_id=1, token="a", expires_at=now - timedelta(hours=1)),
        LoginSession(user_type="docente", user_id=2, token="b", expires_at=now + timedelta(hours=1)),
    ])
    db.commit()

    removed = purge_expired_sessions(db, now=now)

    assert removed == 1
    remaining = db.execute(select(func.count()).select_from(LoginSession)).scalar()
    assert remaining == 1
