"""
Erros de negócio levantados pelos serviços.
O handler registrado em main.py os traduz em respostas HTTP (ver status_code de cada classe).
"""


class CrecheError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CrecheError):
    """Campo obrigatório ausente ou valor inválido."""
    status_code = 400


class AuthenticationError(CrecheError):
    """Credenciais inválidas ou token ausente/expirado."""
    status_code = 401


class PermissionDenied(CrecheError):
    status_code = 403


class NotFoundError(CrecheError):
    status_code = 404


class ConflictError(CrecheError):
    """Violação de unicidade (CPF, matrícula, identificador...)."""
    status_code = 409
