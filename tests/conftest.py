"""
Configuração compartilhada dos testes.

- client: dependência get_db substituída por um MagicMock (nenhum acesso real ao banco
  nas rotas; as migrações do startup rodam num SQLite em memória).
- db: sessão num SQLite em memória já migrado, para os testes de serviço.
- live_client: API completa sobre um SQLite em memória, para os cenários ponta a ponta.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from crecheapp.config import Settings
from crecheapp.database import Database, get_db
from crecheapp.main import create_app
from crecheapp.migrations import apply_migrations


def make_settings(**kwargs) -> Settings:
    values = {
        "DATABASE_URL": "sqlite://",
        "SECRET_KEY": "test-secret",
        "SCHEDULER_ENABLED": False,
    }
    values.update(kwargs)
    return Settings(**values)


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def client(settings, mock_db):
    """Cliente HTTP de teste com o banco mockado."""
    app = create_app(settings)
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def database():
    database = Database("sqlite://")
    apply_migrations(database.engine)
    yield database
    database.dispose()


@pytest.fixture
def db(database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def live_client(settings):
    """Cliente HTTP sobre um banco SQLite em memória de verdade."""
    app = create_app(settings)
    with TestClient(app) as c:
        yield c
