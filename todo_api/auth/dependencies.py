from fastapi import Depends, Header, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional
from todo_api.auth.session import SessionData, SessionStore
from todo_api.auth.utils import verify_session_token
from todo_api.config.errors import Unauthorized
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

def get_session_store(request: Request) -> SessionStore:
    """The session store owned by the running application"""
    return request.app.state.session_store

def get_optional_user_id(x_user_id: Optional[str] = Header(default=None)) -> Optional[str]:
    """Owner id from the x-user-id header, used to scope todo operations"""
    if x_user_id is None or not x_user_id.strip():
        return None
    return x_user_id.strip()

def resolve_identity(
    credentials: Optional[HTTPAuthorizationCredentials],
    x_user_id: Optional[str],
) -> Optional[str]:
    """
    Work out which user the caller claims to be.

    A bearer token takes precedence over the x-user-id header. An invalid
    token is rejected outright rather than falling back to the header.
    """
    if credentials is not None:
        try:
            payload = verify_session_token(credentials.credentials)
        except ValueError as e:
            logger.warning(f"Rejected session token: {e}")
            raise Unauthorized("Invalid or expired session.")
        return payload["sub"]
    return x_user_id

async def get_current_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    x_user_id: Optional[str] = Depends(get_optional_user_id),
    session_store: SessionStore = Depends(get_session_store),
) -> SessionData:
    """Require a live session for the calling user"""
    user_id = resolve_identity(credentials, x_user_id)
    if user_id is None:
        raise Unauthorized("Authentication required.")

    session = await session_store.get(user_id)
    if session is None:
        raise Unauthorized("Invalid or expired session.")
    return session
