# growth-tracker/growth_tracker/api/v1/endpoints/chat.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from growth_tracker.db import session
from growth_tracker.schemas import chat as chat_schema
from growth_tracker.services import chat as chat_service

router = APIRouter()


@router.post("/sessions", response_model=chat_schema.ChatSession, status_code=status.HTTP_201_CREATED)
def create_chat_session(session_in: chat_schema.ChatSessionCreate, db: Session = Depends(session.get_db)):
    return chat_service.create_chat_session(db, session_in)


@router.get("/sessions/{session_id}/messages", response_model=List[chat_schema.ChatMessage])
def get_chat_messages_by_session(session_id: int, db: Session = Depends(session.get_db)):
    """ Messages of one session in the order they were written. """
    return chat_service.get_chat_messages(db, session_id)


@router.post("/messages", response_model=chat_schema.ChatMessage, status_code=status.HTTP_201_CREATED)
async def create_chat_message(message_in: chat_schema.ChatMessageCreate, db: Session = Depends(session.get_db)):
    """
    Stores a chat message. User messages get an assistant reply appended
    to the session when the assistant is configured.
    """
    return await chat_service.create_chat_message(db, message_in)
