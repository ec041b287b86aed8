"""
Agendador APScheduler da limpeza periódica da tabela sessoes.

Os tokens são validados apenas pela assinatura e pela expiração; as linhas de
sessoes servem de histórico e são apagadas assim que expiram.
"""

import logging

from apscheduler.schedulers.background import BackgroundScheduler

from crecheapp.database import Database
from crecheapp.services.auth_service import purge_expired_sessions

logger = logging.getLogger(__name__)

JOB_ID = "purge_expired_sessions"


def purge_sessions_job(database: Database) -> None:
    """Tarefa agendada: remove as sessões expiradas."""
    db = database.session()
    try:
        removed = purge_expired_sessions(db)
        logger.info("Limpeza de sessões: %d sessões expiradas removidas", removed)
    except Exception as exc:
        logger.error("Erro na limpeza das sessões expiradas: %s", exc)
    finally:
        db.close()


def start_scheduler(database: Database, interval_minutes: int) -> BackgroundScheduler:
    """Inicia o agendador em segundo plano (chamado no startup da API)."""
    scheduler = BackgroundScheduler()
    scheduler.add_job(
        purge_sessions_job,
        trigger="interval",
        minutes=interval_minutes,
        args=[database],
        id=JOB_ID,
        replace_existing=True,
    )
    scheduler.start()
    logger.info("Scheduler iniciado: limpeza de sessões a cada %d minutos.", interval_minutes)
    return scheduler


def stop_scheduler(scheduler: BackgroundScheduler) -> None:
    """Para o agendador (chamado no shutdown da API)."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler parado.")
