"""
Configuração central da aplicação via variáveis de ambiente.
Em desenvolvimento, os valores podem vir de um arquivo .env.
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    # Banco de dados: DATABASE_URL tem prioridade sobre as variáveis discretas
    DATABASE_URL: str = ""
    DB_BACKEND: str = "sqlite"  # sqlite, mysql
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_NAME: str = "crecheapp"
    SQLITE_PATH: str = "./crecheapp.db"
    DB_POOL_SIZE: int = 10

    # JWT
    SECRET_KEY: str = "crecheapp_secret"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 24 * 60

    # HTTP
    CORS_ORIGINS: str = "*"
    PORT: int = 3000

    # Limpeza periódica da tabela sessoes
    SCHEDULER_ENABLED: bool = True
    SESSION_PURGE_INTERVAL_MINUTES: int = 60

    # Ambiente
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def database_url(self) -> str:
        """
        Resolve a URL SQLAlchemy do banco.
        URLs mysql:// (formato do Railway) recebem o driver PyMySQL.
        """
        if self.DATABASE_URL:
            url = make_url(self.DATABASE_URL)
            if url.drivername == "mysql":
                url = url.set(drivername="mysql+pymysql")
            return url.render_as_string(hide_password=False)

        if self.DB_BACKEND == "mysql":
            return URL.create(
                "mysql+pymysql",
                username=self.DB_USER,
                password=self.DB_PASSWORD or None,
                host=self.DB_HOST,
                port=self.DB_PORT,
                database=self.DB_NAME,
            ).render_as_string(hide_password=False)

        if self.DB_BACKEND == "sqlite":
            return f"sqlite:///{self.SQLITE_PATH}"

        raise ValueError(f"DB_BACKEND inválido: {self.DB_BACKEND!r} (valores aceitos: sqlite, mysql)")

    @property
    def backend(self) -> str:
        """Nome do backend relacional efetivamente usado (sqlite, mysql...)."""
        return make_url(self.database_url).get_backend_name()

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
