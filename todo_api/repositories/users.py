from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import Optional
from todo_api.auth.utils import hash_password, verify_password
from todo_api.config.errors import Conflict, NotFound, Unauthorized, ValidationError
from todo_api.models.user import User, UserStatus
from todo_api.repositories.common import store_errors
import logging

logger = logging.getLogger(__name__)

def _present(value) -> bool:
    return isinstance(value, str) and value.strip() != ""

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    with store_errors(db, "looking up user by email"):
        return db.query(User).filter(User.email == email).first()

def get_user(db: Session, user_id: str) -> User:
    """
    Get user by ID or raise NotFound.

    Args:
        db: Database session
        user_id: ID of the user to retrieve

    Returns:
        User: User object if found

    Raises:
        NotFound: if no user has this ID
    """
    with store_errors(db, "fetching user"):
        user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFound("User not found.")
    return user

def _commit_user(db: Session, user: User, action: str) -> None:
    """Commit pending user changes, reporting an email collision as Conflict"""
    with store_errors(db, action):
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.warning(f"Email collision while {action}")
            raise Conflict("Email already in use.")
        db.refresh(user)

def register_user(
    db: Session,
    username: Optional[str],
    email: Optional[str],
    password: Optional[str],
) -> User:
    """
    Register a new user with status "active".

    The lookup below gives a friendly error in the common case; the unique
    index on users.email is what actually guarantees uniqueness.
    """
    if not (_present(username) and _present(email) and _present(password)):
        raise ValidationError("Username, email and password are required.")

    if get_user_by_email(db, email):
        raise Conflict("Email already in use.")

    new_user = User(
        username=username,
        email=email,
        hashed_password=hash_password(password),
        status=UserStatus.ACTIVE,
    )
    db.add(new_user)
    _commit_user(db, new_user, "registering user")
    logger.info(f"Registered user {new_user.id}")
    return new_user

def authenticate_user(db: Session, email: Optional[str], password: Optional[str]) -> User:
    """Return the user whose email and password match, or raise Unauthorized"""
    if not (_present(email) and _present(password)):
        raise ValidationError("Email and password are required.")

    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.hashed_password):
        logger.warning("Rejected login attempt")
        raise Unauthorized("Invalid email or password.")
    return user

def update_user(
    db: Session,
    user_id: str,
    username: Optional[str] = None,
    email: Optional[str] = None,
    password: Optional[str] = None,
) -> User:
    """Overwrite only the supplied, non-blank fields of a user's profile"""
    user = get_user(db, user_id)

    if _present(username):
        user.username = username
    if _present(email):
        user.email = email
    if _present(password):
        user.hashed_password = hash_password(password)

    _commit_user(db, user, "updating user")
    return user
