from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from starter.crud import crud_conversation, crud_message
from starter.schemas.conversation import Conversation, ConversationCreate
from starter.schemas.message import Message, MessageCreate, MessageCreateInternal
from starter.db.session import get_db
from starter.core.dependencies import get_current_user_id
from starter.core.errors import NotFoundError

router = APIRouter()


def _get_owned_conversation_or_404(db: Session, conversation_id: str, user_id: str):
    conversation = crud_conversation.get_conversation_for_user(db, conversation_id=conversation_id, user_id=user_id)
    if not conversation: # Someone else's conversation looks exactly like a missing one
        raise NotFoundError("Conversation not found")
    return conversation


@router.get("/", response_model=List[Conversation])
def read_my_conversations(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Retrieve the conversations of the signed-in user, most recently updated first.
    """
    return crud_conversation.list_conversations_by_user(db, user_id=user_id)


@router.post("/", response_model=Conversation, status_code=201)
def create_new_conversation(
    conversation_in: ConversationCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return crud_conversation.create_conversation(db, user_id=user_id, obj_in=conversation_in)


@router.get("/{conversation_id}/messages", response_model=List[Message])
def read_conversation_messages(
    conversation_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    _get_owned_conversation_or_404(db, conversation_id, user_id)
    return crud_message.list_messages(db, conversation_id=conversation_id)


@router.post("/{conversation_id}/messages", response_model=Message, status_code=201)
def create_conversation_message(
    conversation_id: str,
    message_in: MessageCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Append a message to one of the signed-in user's conversations.
    """
    _get_owned_conversation_or_404(db, conversation_id, user_id)
    message_data = MessageCreateInternal(conversation_id=conversation_id, **message_in.model_dump())
    return crud_message.insert_message(db, obj_in=message_data)
