from sqlalchemy.orm import Session
from typing import List, Optional
from todo_api.config.errors import NotFound, ValidationError
from todo_api.models.todo import Todo
from todo_api.repositories.common import store_errors
import logging

logger = logging.getLogger(__name__)

def _scoped_query(db: Session, todo_id: str, user_id: Optional[str]):
    query = db.query(Todo).filter(Todo.id == todo_id)
    if user_id is not None:
        query = query.filter(Todo.user_id == user_id)
    return query

def create_todo(db: Session, content: Optional[str], user_id: Optional[str] = None) -> Todo:
    """Create a todo owned by user_id (if given) with status False"""
    if not isinstance(content, str) or not content.strip():
        raise ValidationError("Todo item is required.")

    new_todo = Todo(content=content.strip(), user_id=user_id, status=False)
    with store_errors(db, "creating todo item"):
        db.add(new_todo)
        db.commit()
        db.refresh(new_todo)
    return new_todo

def list_todos(db: Session, user_id: Optional[str] = None) -> List[Todo]:
    """All todos, or only those owned by user_id, newest first"""
    with store_errors(db, "fetching todo items"):
        query = db.query(Todo)
        if user_id is not None:
            query = query.filter(Todo.user_id == user_id)
        return query.order_by(Todo.created_at.desc()).all()

def update_todo_status(db: Session, todo_id: str, status, user_id: Optional[str] = None) -> Todo:
    """
    Set the completion status of a todo.

    When user_id is given only a todo owned by that user matches, so other
    users' todos are reported as not found.
    """
    if not isinstance(status, bool):
        raise ValidationError("Invalid status value.")

    with store_errors(db, "updating todo item"):
        todo = _scoped_query(db, todo_id, user_id).first()
        if not todo:
            raise NotFound("Todo item not found.")
        todo.status = status
        db.commit()
        db.refresh(todo)
    return todo

def delete_todo(db: Session, todo_id: str, user_id: Optional[str] = None) -> None:
    """Delete a todo, scoped to user_id when given"""
    with store_errors(db, "deleting todo item"):
        deleted = _scoped_query(db, todo_id, user_id).delete(synchronize_session=False)
        db.commit()
    if not deleted:
        raise NotFound("Todo item not found.")
    logger.info(f"Deleted todo {todo_id}")
