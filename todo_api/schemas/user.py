from pydantic import BaseModel, ConfigDict, Field
from todo_api.models.user import UserStatus
from typing import Optional
from datetime import datetime

# Presence of required fields is checked by the user repository so that a
# missing field is reported with the same message as a blank one.

class UserCreate(BaseModel):
    """Schema for registering a new user"""
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

class UserLogin(BaseModel):
    """Schema for user login"""
    email: Optional[str] = None
    password: Optional[str] = None

class UserUpdate(BaseModel):
    """Schema for updating user information (all fields optional)"""
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

class UserResponse(BaseModel):
    """Schema for user response, never includes password material"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
    image: Optional[str] = None
    status: UserStatus
    created_at: Optional[datetime] = Field(default=None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, serialization_alias="updatedAt")
