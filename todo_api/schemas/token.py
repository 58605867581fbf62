from pydantic import BaseModel, Field
from typing import Optional
from todo_api.schemas.user import UserResponse

class LoginResponse(BaseModel):
    """Schema for a successful login"""
    user: UserResponse
    session_id: str = Field(serialization_alias="sessionId")
    token: str
    token_type: str = Field(default="bearer", serialization_alias="tokenType")

class LogoutResponse(BaseModel):
    """Schema for logout"""
    message: str
    token: Optional[str] = None
