"""
Primitivas de autenticação: normalização do CPF, hash bcrypt das senhas
dos docentes e emissão/validação dos tokens JWT.
"""

import re
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel

from crecheapp.config import Settings
from crecheapp.exceptions import AuthenticationError, PermissionDenied

# Custo 10, equivalente ao bcryptjs da versão anterior (hashes existentes continuam válidos)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__default_rounds=10)

bearer_scheme = HTTPBearer(auto_error=False)

KIND_STUDENT = "student"
KIND_TEACHER = "teacher"
TOKEN_KINDS = {KIND_STUDENT, KIND_TEACHER}

_NON_DIGITS = re.compile(r"\D+")


def normalize_cpf(cpf) -> str:
    """Remove tudo que não for dígito: '111.222.333-44' -> '11122233344'."""
    return _NON_DIGITS.sub("", str(cpf))


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify() -> None:
    """Gasta o mesmo tempo de um verify para identificadores inexistentes."""
    pwd_context.dummy_verify()


class TokenPayload(BaseModel):
    """Identidade extraída de um token válido."""
    sub: int
    kind: str
    exp: datetime
    jti: Optional[str] = None


def create_access_token(settings: Settings, subject_id: int, kind: str, **claims) -> str:
    """
    Emite um JWT assinado contendo sub, kind, jti, iat e exp.
    claims extras (matricula, identificador...) são copiados no payload.
    """
    if kind not in TOKEN_KINDS:
        raise ValueError(f"Tipo de token desconhecido: {kind!r}")

    now = datetime.now(timezone.utc)
    payload = dict(claims)
    payload.update({
        "sub": str(subject_id),
        "kind": kind,
        "jti": uuid.uuid4().hex,
        "iat": now,
        "exp": now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    })
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(settings: Settings, token: str) -> TokenPayload:
    """Valida assinatura e expiração. Levanta AuthenticationError se o token for inválido."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise AuthenticationError("Token inválido ou expirado.")

    if payload.get("kind") not in TOKEN_KINDS or not str(payload.get("sub", "")).isdigit():
        raise AuthenticationError("Token inválido ou expirado.")

    return TokenPayload(
        sub=int(payload["sub"]),
        kind=payload["kind"],
        exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        jti=payload.get("jti"),
    )


def get_settings(request: Request) -> Settings:
    """Dependência FastAPI: configuração da aplicação em execução."""
    return request.app.state.settings


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> TokenPayload:
    """Dependência FastAPI: exige um header 'Authorization: Bearer <token>' válido."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("Token de acesso ausente.")
    return decode_access_token(settings, credentials.credentials)


def require_teacher(user: TokenPayload = Depends(get_current_user)) -> TokenPayload:
    if user.kind != KIND_TEACHER:
        raise PermissionDenied("Acesso restrito a docentes.")
    return user
