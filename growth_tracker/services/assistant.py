# growth-tracker/growth_tracker/services/assistant.py
from typing import List, Optional

import httpx

from growth_tracker.core.config import settings
from growth_tracker.core.logging import get_logger
from growth_tracker.db import models

logger = get_logger(__name__)

SYSTEM_PROMPT = (
    "You are a career growth coach inside an HR goal-tracking tool. "
    "Help the employee shape clear, measurable goals, reflect on achievements "
    "and plan next steps. Keep answers short and practical."
)

_ROLE_FOR_TYPE = {
    models.MessageType.USER.value: "user",
    models.MessageType.ASSISTANT.value: "assistant",
}


def is_enabled() -> bool:
    return bool(settings.ASSISTANT_API_KEY)


def build_conversation(history: List[models.ChatMessage]) -> List[dict]:
    messages = [{"role": "system", "content": SYSTEM_PROMPT}]
    for message in history:
        messages.append({"role": _ROLE_FOR_TYPE[message.message_type], "content": message.content})
    return messages


async def generate_reply(history: List[models.ChatMessage]) -> Optional[str]:
    """
    Asks the chat-completions API for the next assistant turn.
    Returns None when the assistant is disabled or the call fails.
    """
    if not is_enabled():
        return None

    headers = {
        "Authorization": f"Bearer {settings.ASSISTANT_API_KEY}",
        "Content-Type": "application/json",
    }
    payload = {
        "model": settings.ASSISTANT_MODEL,
        "messages": build_conversation(history),
    }

    async with httpx.AsyncClient() as client:
        try:
            response = await client.post(
                settings.ASSISTANT_API_URL,
                headers=headers,
                json=payload,
                timeout=settings.ASSISTANT_TIMEOUT_SECONDS,
            )
            response.raise_for_status()
            content = response.json()["choices"][0]["message"]["content"]
            if not isinstance(content, str):
                logger.error("Assistant reply had no text content: %r", content)
                return None
            return content.strip() or None

        except httpx.HTTPStatusError as http_err:
            logger.error("Assistant API returned %s: %s", http_err.response.status_code, http_err.response.text)
            return None
        except (httpx.RequestError, ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            logger.error("Assistant call or parsing failed: %s", e)
            return None
