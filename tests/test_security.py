"""
Testes unitários das primitivas de autenticação (CPF, bcrypt, JWT).
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from crecheapp.exceptions import AuthenticationError
from crecheapp.security import (
    KIND_STUDENT,
    KIND_TEACHER,
    create_access_token,
    decode_access_token,
    hash_password,
    normalize_cpf,
    verify_password,
)


# --- normalize_cpf ---

def test_normalize_cpf_formatado():
    assert normalize_cpf("123.456.789-00") == "12345678900"


def test_normalize_cpf_formatado_e_bruto_iguais():
    assert normalize_cpf("123.456.789-00") == normalize_cpf("12345678900")


def test_normalize_cpf_idempotente():
    once = normalize_cpf(" 111.222.333-44 ")
    assert normalize_cpf(once) == once


def test_normalize_cpf_numero():
    assert normalize_cpf(12345678900) == "12345678900"


def test_normalize_cpf_sem_digitos():
    assert normalize_cpf("abc.-") == ""


# --- hash de senha ---

def test_hash_diferente_da_senha():
    hashed = hash_password("segredo123")
    assert hashed != "segredo123"
    assert hashed.startswith("$2")


def test_hash_salgado():
    """Dois hashes da mesma senha são diferentes (salt)."""
    assert hash_password("segredo123") != hash_password("segredo123")


def test_verify_password():
    hashed = hash_password("segredo123")
    assert verify_password("segredo123", hashed) is True
    assert verify_password("errada", hashed) is False


# --- tokens ---

def test_token_aluno_decodificado(settings):
    token = create_access_token(settings, 7, KIND_STUDENT, matricula="A1")
    payload = decode_access_token(settings, token)
    assert payload.sub == 7
    assert payload.kind == KIND_STUDENT
    assert payload.jti


def test_token_expira_em_24h(settings):
    token = create_access_token(settings, 1, KIND_TEACHER)
    payload = decode_access_token(settings, token)
    delta = payload.exp - datetime.now(timezone.utc)
    assert timedelta(hours=23, minutes=58) < delta <= timedelta(hours=24)


def test_token_claims_extras(settings):
    token = create_access_token(settings, 3, KIND_STUDENT, matricula="A1")
    claims = jwt.get_unverified_claims(token)
    assert claims["matricula"] == "A1"
    assert claims["sub"] == "3"
    assert claims["kind"] == "student"


def test_token_tipo_desconhecido(settings):
    with pytest.raises(ValueError):
        create_access_token(settings, 1, "admin")


def test_token_assinatura_invalida(settings, settings_factory):
    token = create_access_token(settings_factory(SECRET_KEY="outro"), 1, KIND_TEACHER)
    with pytest.raises(AuthenticationError):
        decode_access_token(settings, token)


def test_token_expirado(settings_factory):
    settings = settings_factory(ACCESS_TOKEN_EXPIRE_MINUTES=-1)
    token = create_access_token(settings, 1, KIND_TEACHER)
    with pytest.raises(AuthenticationError):
        decode_access_token(settings, token)


def test_token_sem_kind_rejeitado(settings):
    token = jwt.encode(
        {"sub": "1", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )
    with pytest.raises(AuthenticationError):
        decode_access_token(settings, token)


def test_token_malformado(settings):
    with pytest.raises(AuthenticationError):
        decode_access_token(settings, "nao-e-um-jwt")
