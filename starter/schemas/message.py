from pydantic import BaseModel, Field
from typing import Literal, Optional
from datetime import datetime

ChatRole = Literal["system", "user", "assistant", "tool"]

class MessageBase(BaseModel):
    role: ChatRole
    content: str = Field(min_length=1)
    token_count: Optional[int] = Field(default=None, ge=0)

class MessageCreate(MessageBase):
    """Body of POST /conversations/{id}/messages; the conversation comes from the path."""
    pass

class MessageCreateInternal(MessageBase): # Used by CRUD operations internally
    conversation_id: str

class Message(MessageBase):
    id: str
    conversation_id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
