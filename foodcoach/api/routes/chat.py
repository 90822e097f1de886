import logging

from fastapi import APIRouter, HTTPException

from foodcoach.ai.errors import ConfigurationError
from foodcoach.ai.service import generate_chat_response
from foodcoach.utilities.constants import CHAT_FAILED_MESSAGE, WELCOME_MESSAGE
from foodcoach.utilities.validators import ChatRequest

router = APIRouter(prefix="/api/chat", tags=["chat"])
logger = logging.getLogger(__name__)


@router.get("/welcome")
def welcome():
    """Opening message shown before the user has said anything."""
    return {"role": "assistant", "text": WELCOME_MESSAGE}


@router.post("")
def chat(body: ChatRequest):
    try:
        reply = generate_chat_response(body.turns())
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception:
        logger.exception("Chat generation failed")
        raise HTTPException(status_code=502, detail=CHAT_FAILED_MESSAGE)
    return {"reply": reply}
