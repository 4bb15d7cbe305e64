# growth-tracker/growth_tracker/schemas/chat.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from growth_tracker.db.models import MessageType


class ChatSessionCreate(BaseModel):
    user_id: int
    title: Optional[str] = None


class ChatSession(BaseModel):
    id: int
    user_id: int
    title: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ChatMessageCreate(BaseModel):
    session_id: int
    message_type: MessageType
    content: str = Field(min_length=1)

    class Config:
        use_enum_values = True


class ChatMessage(BaseModel):
    id: int
    session_id: int
    message_type: MessageType
    content: str
    created_at: datetime

    class Config:
        from_attributes = True
