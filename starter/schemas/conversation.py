from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class ConversationBase(BaseModel):
    title: Optional[str] = Field(default=None, max_length=255)
    provider: str = Field(max_length=50)
    model: str = Field(max_length=100)

class ConversationCreate(ConversationBase):
    """
    Schema for data provided by the client when starting a conversation.
    - user_id is derived from the verified Clerk session token, never from the body.
    """
    pass

class Conversation(ConversationBase): # Full schema for returning conversation data to the client
    id: str
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
