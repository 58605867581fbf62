from passlib.context import CryptContext
from jose import jwt
from datetime import datetime, timedelta
from typing import Optional
from todo_api.config.settings import settings

SESSION_TOKEN_TYPE = "session"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def hash_password(password: str) -> str:
    """Hash a password using bcrypt"""
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    return pwd_context.verify(plain_password, hashed_password)

def create_session_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed token identifying the session of user_id"""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.SESSION_TTL_MINUTES)

    to_encode = {
        "sub": user_id,
        "type": SESSION_TOKEN_TYPE,
        "exp": datetime.utcnow() + expires_delta,
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def verify_session_token(token: str) -> dict:
    """Verify a session token and return its payload"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise ValueError("Token has expired")
    except jwt.JWTError as e:
        raise ValueError(f"Invalid token: {str(e)}")

    if payload.get("type") != SESSION_TOKEN_TYPE:
        raise ValueError(f"Expected token type {SESSION_TOKEN_TYPE}, got {payload.get('type')}")
    if not payload.get("sub"):
        raise ValueError("Token has no subject")
    return payload
