from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class PostCreateRequest(BaseModel):
    """DTO for post creation request (emptiness is checked by the use case)"""
    title: Optional[str] = None
    content: Optional[str] = None


class PostUpdateRequest(BaseModel):
    """DTO for post update request; absent or empty fields keep their value"""
    title: Optional[str] = None
    content: Optional[str] = None


class PostResponse(BaseModel):
    """DTO for post response, annotated with the caller's like state"""
    id: str
    title: str
    content: str
    author_id: str
    author_name: str
    like_count: int = 0
    liked_by_caller: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MessageResponse(BaseModel):
    """DTO for plain confirmation responses"""
    message: str
