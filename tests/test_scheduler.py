import asyncio
from datetime import timedelta

from todo_api.auth.session import SessionStore
from todo_api.config.background import purge_expired_sessions
from todo_api.config.scheduler import start_scheduler


def test_scheduler_registers_session_purge_job():
    store = SessionStore(ttl=timedelta(minutes=1))

    async def inspect_jobs():
        scheduler = start_scheduler(store, interval_minutes=5)
        try:
            return scheduler.get_jobs()
        finally:
            scheduler.shutdown(wait=False)

    jobs = asyncio.run(inspect_jobs())

    assert len(jobs) == 1
    assert jobs[0].name == "expired_sessions_cleanup"
    assert jobs[0].func is purge_expired_sessions
    assert jobs[0].args == (store,)
