# chat_server/api/auth.py

from pydantic import BaseModel, Field
from fastapi import APIRouter, Depends, status

from chat_server.api.deps import get_current_user, get_services
from chat_server.services import Services


USER_CREATED = "user created"


router = APIRouter(prefix="/v1/auth", tags=["auth"])


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterResponse(BaseModel):
    response: str
    token: str


class User(BaseModel):
    username: str


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(req: RegisterRequest, services: Services = Depends(get_services)):
    """
    Registers a new user. Under bearer auth `token` is a signed JWT valid for
    twelve hours; under basic auth it is the username itself.
    """
    token = services.auth.create_user(req.username, req.password)
    return {"response": USER_CREATED, "token": token}


@router.get("/me", response_model=User)
def read_users_me(current_user: str = Depends(get_current_user)):
    return {"username": current_user}
