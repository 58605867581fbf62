from contextlib import contextmanager
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from todo_api.config.errors import InternalError
import logging

logger = logging.getLogger(__name__)

@contextmanager
def store_errors(db: Session, action: str):
    """
    Roll back and convert driver errors raised while performing ``action``.

    The driver detail is logged here and never reaches the caller.
    """
    try:
        yield
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Store error while {action}")
        raise InternalError()
