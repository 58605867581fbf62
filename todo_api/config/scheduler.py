from apscheduler.schedulers.asyncio import AsyncIOScheduler
from todo_api.auth.session import SessionStore
from todo_api.config.background import purge_expired_sessions
from todo_api.config.settings import settings
import logging

logger = logging.getLogger(__name__)

def start_scheduler(session_store: SessionStore, interval_minutes: int = None) -> AsyncIOScheduler:
    """
    Start the scheduler for periodic tasks.

    Must be called from a running event loop; jobs run on that loop, the same
    one that serves requests, so they share the session store safely.
    """
    scheduler = AsyncIOScheduler()

    try:
        scheduler.add_job(
            purge_expired_sessions,
            'interval',
            minutes=interval_minutes or settings.SESSION_CLEANUP_INTERVAL_MINUTES,
            args=[session_store],
            name="expired_sessions_cleanup"
        )

        scheduler.start()
        logger.info("Scheduler started successfully")
        return scheduler
    except Exception as e:
        logger.error(f"Error starting scheduler: {str(e)}")
        raise
