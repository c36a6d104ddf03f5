from pydantic import BaseModel, EmailStr


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    username: str
    email: EmailStr


class CurrentUser(BaseModel):
    """Identity resolved from a verified access token"""
    id: str
    username: str
