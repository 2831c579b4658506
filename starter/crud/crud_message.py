from sqlalchemy.orm import Session
from typing import List

from starter.db.base_class import utcnow
from starter.models.conversation import Conversation
from starter.models.message import Message
from starter.schemas.message import MessageCreateInternal

def insert_message(db: Session, *, obj_in: MessageCreateInternal) -> Message:
    """
    Insert a new chat message and return the stored row.
    The parent conversation's updated_at is bumped so it sorts first in listings.
    """
    db_obj = Message(**obj_in.model_dump())
    db.add(db_obj)
    db.query(Conversation).filter(Conversation.id == obj_in.conversation_id).update(
        {Conversation.updated_at: utcnow()}, synchronize_session=False
    )
    db.commit()
    db.refresh(db_obj)
    return db_obj

def list_messages(db: Session, *, conversation_id: str) -> List[Message]:
    return (
        db.query(Message)
        .filter(Message.conversation_id == conversation_id)
        .order_by(Message.created_at.asc())
        .all()
    )
