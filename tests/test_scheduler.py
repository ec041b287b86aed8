"""
Testes do agendador da limpeza das sessões.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

from sqlalchemy import func, select

from crecheapp.models.session import LoginSession
from crecheapp.scheduler import JOB_ID, purge_sessions_job, start_scheduler, stop_scheduler


def test_purge_sessions_job(database):
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    db = database.session()
    db.add_all([
        LoginSession(user_type="aluno", user_id=1, token="velho", expires_at=now - timedelta(days=2)),
        LoginSession(user_type="aluno", user_id=1, token="novo", expires_at=now + timedelta(days=1)),
    ])
    db.commit()
    db.close()

    purge_sessions_job(database)

    db = database.session()
    tokens = db.execute(select(LoginSession.token)).scalars().all()
    db.close()
    assert tokens == ["novo"]


def test_purge_sessions_job_fecha_sessao_em_erro():
    database = MagicMock()
    session = database.session.return_value
    with patch("crecheapp.scheduler.purge_expired_sessions", side_effect=RuntimeError("boom")):
        purge_sessions_job(database)
    session.close.assert_called_once()


def test_start_e_stop_scheduler(database):
    scheduler = start_scheduler(database, interval_minutes=5)
    try:
        job = scheduler.get_job(JOB_ID)
        assert job is not None
        assert job.trigger.interval == timedelta(minutes=5)
    finally:
        stop_scheduler(scheduler)
    assert not scheduler.running


def test_sessoes_vazias(database):
    purge_sessions_job(database)
    db = database.session()
    assert db.execute(select(func.count()).select_from(LoginSession)).scalar() == 0
    db.close()
