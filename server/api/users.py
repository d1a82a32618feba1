# server/api/users.py

import logging
from pydantic import BaseModel, ConfigDict
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from database import get_db
from core.users import list_users
from api.auth import authenticator


logger = logging.getLogger(__name__)

router = APIRouter()


class UserRecord(BaseModel):
    """
    A stored user row, returned as-is (password included).
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    password: str


class CurrentUser(BaseModel):
    id: int
    username: str


@router.get("/users", response_model=list[UserRecord])
def read_users(decoded_user: dict = Depends(authenticator), db: Session = Depends(get_db)):
    logger.info("Listing users for %s", {"id": decoded_user.get("id"), "username": decoded_user.get("username")})
    return list_users(db)


@router.get("/users/me", response_model=CurrentUser)
def read_users_me(decoded_user: dict = Depends(authenticator)):
    return {"id": decoded_user["id"], "username": decoded_user["username"]}
