# server/api/auth.py

import logging
from jose import ExpiredSignatureError, JWTError
from fastapi import APIRouter, HTTPException, status, Depends, Body, Header, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from database import get_db
from core.security import create_access_token, decode_access_token
from core.users import find_user_by_username, create_user


logger = logging.getLogger(__name__)

router = APIRouter()


# -------------------------------
# Authentication Dependency
# -------------------------------

def authenticator(request: Request, authorization: str | None = Header(default=None)) -> dict:
    """
    Guards a route behind a valid access token.
    A missing header is rejected with 401, an invalid or expired one with 403.
    The decoded claims are stored on `request.state.decoded_user` and returned.
    """
    if not authorization:
        logger.info("Rejected %s %s: missing token", request.method, request.url.path)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    token = authorization
    scheme, _, rest = authorization.strip().partition(" ")
    if scheme.lower() == "bearer" and rest.strip():
        token = rest.strip()

    try:
        decoded_user = decode_access_token(token)
    except ExpiredSignatureError:
        logger.info("Rejected %s %s: expired token", request.method, request.url.path)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    except JWTError:
        logger.info("Rejected %s %s: invalid token", request.method, request.url.path)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")

    request.state.decoded_user = decoded_user
    return decoded_user


# -------------------------------
# Account Endpoints
# -------------------------------

@router.post("/login")
def login(username: str = Body(...), password: str = Body(...), db: Session = Depends(get_db)):
    """
    Returns a signed access token as a bare JSON string.
    Unknown usernames get 404, wrong passwords get 400.
    """
    user = find_user_by_username(db, username)
    if not user:
        logger.info("Login failed for %r: username not found", username)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content="Username not found")
    if user.password != password:
        logger.info("Login failed for %r: invalid password", username)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content="Invalid password")

    return create_access_token(data={"id": user.id, "username": user.username})


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(username: str = Body(...), password: str = Body(...), db: Session = Depends(get_db)):
    new_user = create_user(db, username, password)
    logger.info("Registered user %r (id=%s)", new_user.username, new_user.id)
    return {"message": f"User ({new_user.username}) created."}
