# growth-tracker/growth_tracker/services/chat.py
from sqlalchemy.orm import Session

from growth_tracker.core.exceptions import NotFound
from growth_tracker.core.logging import get_logger
from growth_tracker.db import models, repository
from growth_tracker.schemas import chat as chat_schema
from growth_tracker.services import assistant

logger = get_logger(__name__)


def create_chat_session(db: Session, session_in: chat_schema.ChatSessionCreate) -> models.ChatSession:
    if repository.find_user_by_id(db, session_in.user_id) is None:
        raise NotFound(f"User with id {session_in.user_id} does not exist")

    chat_session = models.ChatSession(user_id=session_in.user_id, title=session_in.title)
    db.add(chat_session)
    db.commit()
    db.refresh(chat_session)
    return chat_session


def _append(db: Session, chat_session: models.ChatSession, message_type: str, content: str) -> models.ChatMessage:
    message = models.ChatMessage(session_id=chat_session.id, message_type=message_type, content=content)
    db.add(message)
    chat_session.updated_at = models.utcnow()
    db.commit()
    db.refresh(message)
    return message


def get_chat_messages(db: Session, session_id: int):
    return (
        db.query(models.ChatMessage)
        .filter(models.ChatMessage.session_id == session_id)
        .order_by(models.ChatMessage.created_at.asc(), models.ChatMessage.id.asc())
        .all()
    )


async def create_chat_message(db: Session, message_in: chat_schema.ChatMessageCreate) -> models.ChatMessage:
    """
    Stores a message and, for user turns, lets the assistant answer.
    The assistant reply is stored as its own message; the created
    message is what gets returned.
    """
    chat_session = db.get(models.ChatSession, message_in.session_id)
    if chat_session is None:
        raise NotFound(f"Chat session with id {message_in.session_id} does not exist")

    message = _append(db, chat_session, message_in.message_type, message_in.content)

    if message.message_type == models.MessageType.USER.value and assistant.is_enabled():
        reply = await assistant.generate_reply(get_chat_messages(db, chat_session.id))
        if reply:
            _append(db, chat_session, models.MessageType.ASSISTANT.value, reply)
        else:
            logger.warning("No assistant reply stored for session %s", chat_session.id)

    return message
