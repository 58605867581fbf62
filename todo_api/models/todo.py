from sqlalchemy import Column, String, Boolean, DateTime
from todo_api.database.connection import Base
from todo_api.models.ids import generate_id
from datetime import datetime

class Todo(Base):
    """Todo table to store todo items"""
    __tablename__ = "todos"

    id = Column(String(32), primary_key=True, default=generate_id)
    content = Column(String, nullable=False)
    # Owner reference is advisory; legacy todos may have no owner
    user_id = Column(String(32), nullable=True, index=True)
    status = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Todo(id={self.id}, user_id={self.user_id}, status={self.status})>"
