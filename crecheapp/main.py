"""
Ponto de entrada principal da API CrecheApp.
Inicialização: uvicorn crecheapp.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from crecheapp.config import Settings, settings as default_settings
from crecheapp.database import Database
from crecheapp.exceptions import AuthenticationError, CrecheError
from crecheapp.migrations import apply_migrations, current_version
from crecheapp.routers import auth, classes, events, records, students
from crecheapp.scheduler import start_scheduler, stop_scheduler

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Ciclo de vida: aplica as migrações (falha = a API não sobe),
    inicia o scheduler de limpeza das sessões e libera o pool no shutdown.
    """
    settings: Settings = app.state.settings
    database: Database = app.state.database

    scheduler = None
    try:
        apply_migrations(database.engine)
        if settings.SCHEDULER_ENABLED:
            scheduler = start_scheduler(database, settings.SESSION_PURGE_INTERVAL_MINUTES)
        yield
    finally:
        if scheduler is not None:
            stop_scheduler(scheduler)
        database.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Monta a aplicação: pool do banco, CORS, routers e tratamento de erros."""
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title="CrecheApp API",
        description="API administrativa da creche: alunos, docentes, turmas, registros e calendário",
        version=VERSION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database(settings.database_url, pool_size=settings.DB_POOL_SIZE)

    origins = settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Credenciais proibidas com a origem coringa
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Accept"],
    )

    app.include_router(auth.router)
    app.include_router(classes.router)
    app.include_router(students.router)
    app.include_router(records.router)
    app.include_router(events.router)

    _register_exception_handlers(app)
    _register_system_routes(app)
    return app


def _register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(CrecheError)
    async def creche_error_handler(request: Request, exc: CrecheError) -> JSONResponse:
        """Erros de negócio levantados pelos serviços: status e mensagem da exceção."""
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Campos ausentes ou inválidos: 400 com a lista dos campos em causa."""
        fields = []
        for error in exc.errors():
            loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
            fields.append(".".join(loc) or "body")
        fields = sorted(set(fields))
        return JSONResponse(
            status_code=400,
            content={"detail": f"Campos obrigatórios ausentes ou inválidos: {', '.join(fields)}"},
        )

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Erro de banco de dados: %s", exc, exc_info=True)
        return JSONResponse(status_code=500, content={"detail": "Banco de dados indisponível."})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """
        Intercepta as exceções não tratadas para que a resposta 500 passe pelo
        CORSMiddleware e nunca exponha o texto interno do erro.
        """
        logger.error("Exceção não tratada: %s", exc, exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Ocorreu um erro interno."},
        )


def _register_system_routes(app: FastAPI) -> None:

    @app.get("/api/health", tags=["Saúde"])
    def health_check(request: Request):
        """Verifica a conexão com o banco (SELECT 1). 503 se o banco estiver inacessível."""
        database: Database = request.app.state.database
        try:
            database.ping()
            version = current_version(database.engine)
        except SQLAlchemyError as exc:
            logger.warning("Health check: banco inacessível (%s)", exc)
            return JSONResponse(
                status_code=503,
                content={"status": "unhealthy", "detail": "Banco de dados não conectado."},
            )
        return {
            "status": "healthy",
            "service": "CrecheApp API",
            "version": VERSION,
            "schema_version": version,
        }

    @app.get("/api/config", tags=["Saúde"])
    def config_summary(request: Request):
        """Resumo da configuração ativa, sem nenhum segredo."""
        settings: Settings = request.app.state.settings
        return {
            "hasDatabaseUrl": bool(settings.DATABASE_URL),
            "backend": settings.backend,
            "environment": settings.ENV,
            "port": settings.PORT,
        }


app = create_app()
