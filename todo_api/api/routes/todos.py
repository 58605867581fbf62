from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from todo_api.database.connection import get_db
from todo_api.schemas.todo import TodoCreate, TodoStatusUpdate, TodoResponse, MessageResponse
from todo_api.auth.dependencies import get_optional_user_id
from todo_api.api.routing import AppRoute
from todo_api.repositories import todos as todo_repository

router = APIRouter(prefix="/api/todos", tags=["Todos"], route_class=AppRoute)

@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
def create_todo(
    todo: TodoCreate,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_optional_user_id)
):
    """
    Create a new todo
    - **content**: Todo text (required, cannot be empty)

    The todo is owned by the user named in the `x-user-id` header, if any.
    """
    return todo_repository.create_todo(db, todo.content, user_id)

@router.get("", response_model=List[TodoResponse])
def get_todos(
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_optional_user_id)
):
    """
    Get todos, newest first
    - Only the caller's todos when `x-user-id` is sent, otherwise all todos
    """
    return todo_repository.list_todos(db, user_id)

@router.patch("/{todo_id}", response_model=TodoResponse)
def update_todo_status(
    todo_id: str,
    todo_update: TodoStatusUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_optional_user_id)
):
    """
    Update the completion status of a todo
    - **todo_id**: ID of the todo to update
    - **status**: New completion status (boolean)
    """
    return todo_repository.update_todo_status(db, todo_id, todo_update.status, user_id)

@router.delete("/{todo_id}", response_model=MessageResponse)
def delete_todo(
    todo_id: str,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_optional_user_id)
):
    """
    Delete a todo
    - **todo_id**: ID of the todo to delete
    """
    todo_repository.delete_todo(db, todo_id, user_id)
    return {"message": "Todo item deleted successfully."}
