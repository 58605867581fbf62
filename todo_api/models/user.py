from enum import Enum
from sqlalchemy import Column, String, DateTime, Enum as SQLEnum
from todo_api.database.connection import Base
from todo_api.models.ids import generate_id
from datetime import datetime

class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"

class User(Base):
    """User table to store user information"""
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=generate_id)
    username = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    image = Column(String, nullable=True)
    status = Column(
        SQLEnum(UserStatus, values_callable=lambda e: [member.value for member in e]),
        default=UserStatus.ACTIVE,
        nullable=False
    )
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, onupdate=datetime.utcnow)

