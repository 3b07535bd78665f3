# chat_server/api/private.py

from pydantic import BaseModel
from fastapi import APIRouter, Depends, Query

from chat_server.api.deps import get_current_user, get_services
from chat_server.api.public import (
    MESSAGE_SENT,
    SendMessageRequest,
    SendMessageResponse,
    ShowMessagesResponse,
    messages_response,
)
from chat_server.core.entities import Message
from chat_server.services import Services


USERS_RECEIVED = "users received"


router = APIRouter(prefix="/v1/private", tags=["private"])


class ViewUsersResponse(BaseModel):
    response: str
    users: list[str]


@router.post("/messages", response_model=SendMessageResponse)
def send_private_message(
    req: SendMessageRequest,
    username: str = Query(..., min_length=1),
    sender: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    """
    Sends a private message from the caller to `username`.
    """
    services.private.send_private_message(Message(sender=sender, recipient=username, content=req.content))
    return {"response": MESSAGE_SENT}


@router.get("/messages", response_model=ShowMessagesResponse)
def show_private_messages(
    username: str = Query(..., min_length=1),
    limit: int = Query(..., ge=1),
    offset: int = Query(0, ge=0),
    sender: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    """
    Returns a page of the conversation between the caller and `username`,
    whichever of the two sent each message.
    """
    return messages_response(services.private.get_private_messages(sender, username, limit, offset))


@router.get("/users", response_model=ViewUsersResponse)
def view_user_list(
    username: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    return {"response": USERS_RECEIVED, "users": services.private.view_users(username)}
