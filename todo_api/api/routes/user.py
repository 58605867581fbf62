from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Optional
from todo_api.api.routing import AppRoute
from todo_api.database.connection import get_db
from todo_api.schemas.user import UserCreate, UserLogin, UserUpdate, UserResponse
from todo_api.schemas.token import LoginResponse, LogoutResponse
from todo_api.auth.session import SessionData, SessionStore
from todo_api.auth.dependencies import (
    security,
    get_current_session,
    get_optional_user_id,
    get_session_store,
    resolve_identity,
)
from todo_api.auth.utils import create_session_token
from todo_api.config.errors import Unauthorized
from todo_api.repositories import users as user_repository
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/user", tags=["User"], route_class=AppRoute)

# Routes touching the session store are async so the store is only used from
# the event loop; their blocking store calls go through the threadpool.

@router.get("", response_model=UserResponse)
def get_current_user(
    session: SessionData = Depends(get_current_session),
    db: Session = Depends(get_db)
):
    """
    Get the logged-in user's profile
    """
    return user_repository.get_user(db, session.user_id)

@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(user: UserCreate, db: Session = Depends(get_db)):
    """
    Register a new user

    - **username**: required
    - **email**: required, must not already be registered
    - **password**: required
    """
    return user_repository.register_user(db, user.username, user.email, user.password)

@router.post("/login", response_model=LoginResponse)
async def login(
    user_credentials: UserLogin,
    db: Session = Depends(get_db),
    session_store: SessionStore = Depends(get_session_store)
):
    """
    Login user and open a session

    Returns the user, a `sessionId` to send back as the `x-user-id` header,
    and a signed `token` usable as `Authorization: Bearer <token>`.
    """
    user = await run_in_threadpool(
        user_repository.authenticate_user, db, user_credentials.email, user_credentials.password
    )

    session = await session_store.create(user.id, user.email)
    token = create_session_token(user.id)
    logger.info(f"User {user.id} logged in")

    return LoginResponse(
        user=UserResponse.model_validate(user),
        session_id=session.user_id,
        token=token,
    )

@router.post("/logout", response_model=LogoutResponse)
async def logout(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    x_user_id: Optional[str] = Depends(get_optional_user_id),
    session_store: SessionStore = Depends(get_session_store)
):
    """
    Logout user by removing their session

    Succeeds even when the caller sends no identity or a stale one.
    """
    try:
        user_id = resolve_identity(credentials, x_user_id)
    except Unauthorized:
        user_id = None

    if user_id is not None and await session_store.delete(user_id):
        logger.info(f"User {user_id} logged out")

    return LogoutResponse(message="Successfully logged out", token=None)

@router.put("/update", response_model=UserResponse)
async def update_user(
    user_update: UserUpdate,
    session: SessionData = Depends(get_current_session),
    db: Session = Depends(get_db),
    session_store: SessionStore = Depends(get_session_store)
):
    """
    Update the logged-in user's information
    Allows updating (each optional):
    - Username
    - Email
    - Password
    """
    user = await run_in_threadpool(
        user_repository.update_user,
        db,
        session.user_id,
        username=user_update.username,
        email=user_update.email,
        password=user_update.password,
    )
    if user.email != session.email:
        await session_store.update_email(session.user_id, user.email)
    return UserResponse.model_validate(user)
