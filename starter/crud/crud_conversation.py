from sqlalchemy.orm import Session
from typing import Optional, List

from starter.models.conversation import Conversation
from starter.schemas.conversation import ConversationCreate

def create_conversation(db: Session, *, user_id: Optional[str], obj_in: ConversationCreate) -> Conversation:
    """
    Create a new conversation owned by user_id.
    """
    db_obj = Conversation(user_id=user_id, **obj_in.model_dump())
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    return db_obj

def get_conversation(db: Session, conversation_id: str) -> Optional[Conversation]:
    return db.query(Conversation).filter(Conversation.id == conversation_id).first()

def get_conversation_for_user(db: Session, *, conversation_id: str, user_id: str) -> Optional[Conversation]:
    """
    Get a conversation only if it belongs to user_id.
    Returns None for both "does not exist" and "belongs to someone else".
    """
    return (
        db.query(Conversation)
        .filter(Conversation.id == conversation_id, Conversation.user_id == user_id)
        .first()
    )

def list_conversations_by_user(db: Session, *, user_id: str) -> List[Conversation]:
    """
    List all conversations that belong to user_id, most recently updated first.
    The user_id filter stands in for the row-level security policy on the hosted database.
    """
    return (
        db.query(Conversation)
        .filter(Conversation.user_id == user_id)
        .order_by(Conversation.updated_at.desc())
        .all()
    )
