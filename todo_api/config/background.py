import logging
from todo_api.auth.session import SessionStore

logger = logging.getLogger(__name__)

async def purge_expired_sessions(session_store: SessionStore) -> int:
    """Remove sessions whose TTL has elapsed"""
    try:
        removed = await session_store.purge_expired()
        if removed:
            logger.info(f"Purged {removed} expired session(s)")
        return removed
    except Exception as e:
        logger.error(f"Error in session purge task: {str(e)}")
        return 0
