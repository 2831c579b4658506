import pytest
from sqlalchemy.orm import Session

from starter.crud import crud_conversation
from starter.schemas.conversation import ConversationCreate

pytestmark = pytest.mark.crud


def _create(db: Session, user_id, title="Chat"):
    return crud_conversation.create_conversation(
        db, user_id=user_id, obj_in=ConversationCreate(title=title, provider="openai", model="gpt-4o-mini")
    )


def test_create_conversation(db_session: Session):
    conversation = _create(db_session, "user_alice", title="First chat")
    assert conversation.id
    assert conversation.user_id == "user_alice"
    assert conversation.title == "First chat"
    assert conversation.provider == "openai"
    assert conversation.created_at is not None
    assert conversation.updated_at is not None


def test_get_conversation(db_session: Session):
    conversation = _create(db_session, "user_alice")
    fetched = crud_conversation.get_conversation(db_session, conversation.id)
    assert fetched is not None
    assert fetched.id == conversation.id
    assert crud_conversation.get_conversation(db_session, "does-not-exist") is None


def test_get_conversation_for_user_checks_owner(db_session: Session):
    conversation = _create(db_session, "user_alice")
    assert crud_conversation.get_conversation_for_user(db_session, conversation_id=conversation.id, user_id="user_alice")
    assert crud_conversation.get_conversation_for_user(db_session, conversation_id=conversation.id, user_id="user_bob") is None


def test_list_conversations_by_user_only_returns_owned(db_session: Session):
    _create(db_session, "user_alice", title="A1")
    _create(db_session, "user_bob", title="B1")
    _create(db_session, None, title="anonymous")

    conversations = crud_conversation.list_conversations_by_user(db_session, user_id="user_alice")

    assert [c.title for c in conversations] == ["A1"]


def test_list_conversations_by_user_newest_first(db_session: Session):
    first = _create(db_session, "user_alice", title="older")
    second = _create(db_session, "user_alice", title="newer")

    conversations = crud_conversation.list_conversations_by_user(db_session, user_id="user_alice")

    assert [c.id for c in conversations] == [second.id, first.id]
