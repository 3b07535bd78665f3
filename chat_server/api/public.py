# chat_server/api/public.py

from pydantic import BaseModel, Field
from fastapi import APIRouter, Depends, Query

from chat_server.api.deps import get_current_user, get_services
from chat_server.core.entities import Message
from chat_server.services import Services


MESSAGE_SENT = "message sent"
MESSAGES_RECEIVED = "messages received"
MESSAGES_NOT_FOUND = "no messages found"


router = APIRouter(prefix="/v1/public", tags=["public"])


class SendMessageRequest(BaseModel):
    content: str = Field(..., min_length=1)


class SendMessageResponse(BaseModel):
    response: str


class ShowMessagesResponse(BaseModel):
    response: str
    messages: list[str]


def messages_response(messages: list[Message]) -> dict:
    return {
        "response": MESSAGES_RECEIVED if messages else MESSAGES_NOT_FOUND,
        "messages": [m.content for m in messages],
    }


@router.post("/messages", response_model=SendMessageResponse)
def send_public_message(
    req: SendMessageRequest,
    sender: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    services.public.send_public_message(Message(sender=sender, recipient="", content=req.content))
    return {"response": MESSAGE_SENT}


@router.get("/messages", response_model=ShowMessagesResponse)
def show_public_messages(
    limit: int = Query(..., ge=1),
    offset: int = Query(0, ge=0),
    _: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    return messages_response(services.public.get_public_messages(limit, offset))
