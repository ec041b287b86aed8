"""
Migrações versionadas do esquema relacional.

Cada migração é aplicada uma única vez, na ordem, dentro da sua própria transação,
e registrada na tabela schema_version. Todas são idempotentes: um banco criado
pelas versões anteriores da aplicação (tabelas já existentes, colunas faltando,
coluna alunos.turma_id) é adotado sem perda de dados.

Uso: apply_migrations(database.engine) no startup (ver main.lifespan).
"""

import logging
from typing import Callable, List, NamedTuple, Optional

from sqlalchemy import Column, DateTime, Integer, String, func, inspect, select, text
from sqlalchemy.engine import Connection, Engine

import crecheapp.models  # noqa: F401  registra todas as tabelas em Base.metadata
from crecheapp.database import Base

logger = logging.getLogger(__name__)


class SchemaVersion(Base):
    __tablename__ = "schema_version"

    version = Column(Integer, primary_key=True, autoincrement=False)
    descricao = Column(String(255), nullable=False)
    aplicado_em = Column(DateTime, server_default=func.now())


class Migration(NamedTuple):
    version: int
    description: str
    upgrade: Callable[[Connection], None]


def _create_tables(conn: Connection) -> None:
    Base.metadata.create_all(conn, checkfirst=True)


# Colunas ausentes nas tabelas criadas pelas primeiras versões da aplicação
LEGACY_COLUMNS = {
    "alunos": [("data_nascimento", "DATE"), ("avatar", "TEXT"), ("updated_at", "DATETIME")],
    "docentes": [("email", "VARCHAR(255)"), ("avatar", "TEXT"), ("updated_at", "DATETIME")],
    "turmas": [("foto", "TEXT"), ("updated_at", "DATETIME")],
    "registros": [("updated_at", "DATETIME")],
}


def _add_missing_columns(conn: Connection) -> None:
    """Adiciona as colunas faltantes. Coluna já existente = nada a fazer."""
    for table, columns in LEGACY_COLUMNS.items():
        existing = {c["name"] for c in inspect(conn).get_columns(table)}
        for name, ddl in columns:
            if name in existing:
                continue
            conn.execute(text(f"ALTER TABLE {table} ADD COLUMN {name} {ddl}"))
            logger.info("Coluna %s.%s adicionada", table, name)


def _copy_legacy_memberships(conn: Connection) -> None:
    """Copia o antigo vínculo alunos.turma_id para a tabela turma_alunos."""
    columns = {c["name"] for c in inspect(conn).get_columns("alunos")}
    if "turma_id" not in columns:
        return

    result = conn.execute(text(
        "INSERT INTO turma_alunos (turma_id, aluno_id) "
        "SELECT a.turma_id, a.id FROM alunos a "
        "WHERE a.turma_id IS NOT NULL "
        "AND EXISTS (SELECT 1 FROM turmas t WHERE t.id = a.turma_id) "
        "AND NOT EXISTS ("
        "  SELECT 1 FROM turma_alunos ta WHERE ta.turma_id = a.turma_id AND ta.aluno_id = a.id"
        ")"
    ))
    logger.info("%d vínculos turma-aluno copiados de alunos.turma_id", result.rowcount)


MIGRATIONS: List[Migration] = [
    Migration(1, "tabelas iniciais", _create_tables),
    Migration(2, "colunas ausentes em bancos antigos", _add_missing_columns),
    Migration(3, "vínculos alunos.turma_id -> turma_alunos", _copy_legacy_memberships),
]


def current_version(engine: Engine) -> Optional[int]:
    """Versão mais alta registrada, ou None se nenhuma migração foi aplicada."""
    with engine.connect() as conn:
        if not inspect(conn).has_table(SchemaVersion.__tablename__):
            return None
        return conn.execute(select(func.max(SchemaVersion.version))).scalar()


def apply_migrations(engine: Engine) -> int:
    """
    Aplica as migrações pendentes e retorna quantas foram aplicadas.
    Qualquer falha é registrada no log e propagada: a aplicação não deve
    subir com um esquema incompleto.
    """
    SchemaVersion.__table__.create(engine, checkfirst=True)
    current = current_version(engine) or 0

    applied = 0
    for migration in MIGRATIONS:
        if migration.version <= current:
            continue
        try:
            with engine.begin() as conn:
                migration.upgrade(conn)
                conn.execute(
                    SchemaVersion.__table__.insert().values(
                        version=migration.version,
                        descricao=migration.description,
                    )
                )
        except Exception:
            logger.error(
                "Falha na migração %d (%s)", migration.version, migration.description, exc_info=True
            )
            raise
        logger.info("Migração %d aplicada: %s", migration.version, migration.description)
        applied += 1

    if applied == 0:
        logger.info("Esquema já atualizado (versão %d)", current)
    return applied
