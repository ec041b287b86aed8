"""
Conexão com o banco relacional (MySQL em produção, SQLite em desenvolvimento).

O pool é criado explicitamente por create_app() e guardado em app.state.database;
nenhuma rota depende de uma conexão global implícita.
"""

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


class Database:
    """Handle de armazenamento: motor SQLAlchemy + fábrica de sessões."""

    def __init__(self, url: str, pool_size: int = 10):
        engine_kwargs = {}
        parsed = make_url(url)
        if parsed.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if parsed.database in (None, "", ":memory:"):
                # Banco em memória: uma única conexão compartilhada
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=0,
                pool_pre_ping=True,
                pool_recycle=1800,
            )

        self.url = url
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self):
        return self.SessionLocal()

    def ping(self) -> None:
        """Executa SELECT 1. Levanta a exceção do driver se o banco estiver inacessível."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request):
    """Dependência FastAPI: fornece uma sessão e a devolve ao pool em qualquer caso."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
