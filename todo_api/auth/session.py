import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from fastapi_sessions.backends.implementations import InMemoryBackend
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class SessionData(BaseModel):
    user_id: str
    email: str
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or datetime.utcnow()) >= self.expires_at


class SessionStore:
    """
    Server-side sessions keyed by user id, kept in a fastapi-sessions backend.

    One entry per user: logging in again overwrites the previous entry.
    Entries expire after ``ttl`` and are evicted either when read or by
    ``purge_expired``, which the scheduler calls periodically. All access
    happens on the application's event loop.
    """

    def __init__(self, ttl: timedelta, clock: Callable[[], datetime] = datetime.utcnow):
        self.ttl = ttl
        self._clock = clock
        self._backend = InMemoryBackend[str, SessionData]()

    async def create(self, user_id: str, email: str) -> SessionData:
        now = self._clock()
        session = SessionData(
            user_id=user_id,
            email=email,
            created_at=now,
            expires_at=now + self.ttl,
        )
        if await self._backend.read(user_id) is None:
            await self._backend.create(user_id, session)
        else:
            await self._backend.update(user_id, session)
        logger.info(f"Session created for user {user_id}")
        return session

    async def get(self, user_id: str) -> Optional[SessionData]:
        """Return the live session for user_id, evicting it if expired"""
        session = await self._backend.read(user_id)
        if session is None:
            return None
        if session.is_expired(self._clock()):
            await self._backend.delete(user_id)
            logger.info(f"Session for user {user_id} expired")
            return None
        return session

    async def update_email(self, user_id: str, email: str) -> Optional[SessionData]:
        """Keep a live session's email in step with the user's profile"""
        session = await self.get(user_id)
        if session is None:
            return None
        session.email = email
        await self._backend.update(user_id, session)
        return session

    async def delete(self, user_id: str) -> bool:
        if await self._backend.read(user_id) is None:
            return False
        await self._backend.delete(user_id)
        logger.info(f"Session removed for user {user_id}")
        return True

    async def purge_expired(self) -> int:
        """Evict every expired session and return how many were removed"""
        now = self._clock()
        expired = [uid for uid, s in list(self._backend.data.items()) if s.is_expired(now)]
        for uid in expired:
            await self._backend.delete(uid)
        return len(expired)

    def clear(self) -> None:
        self._backend.data.clear()

    def __len__(self) -> int:
        return len(self._backend.data)

    def __contains__(self, user_id: str) -> bool:
        session = self._backend.data.get(user_id)
        return session is not None and not session.is_expired(self._clock())
