from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator
from typing import Optional
from datetime import datetime

class TodoCreate(BaseModel):
    """Schema for creating a new todo"""
    content: Optional[str] = None

    @field_validator('content')
    @classmethod
    def strip_content(cls, v):
        return v.strip() if v is not None else v

class TodoStatusUpdate(BaseModel):
    """Schema for updating a todo's completion status"""
    # Strict so that "true" or 1 are rejected instead of coerced
    status: Optional[StrictBool] = None

class TodoResponse(BaseModel):
    """Schema for todo response"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    content: str
    user_id: Optional[str] = Field(default=None, serialization_alias="userId")
    status: bool
    created_at: Optional[datetime] = Field(default=None, serialization_alias="createdAt")

class MessageResponse(BaseModel):
    message: str
