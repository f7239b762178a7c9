# gamevault/api/auth.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from gamevault.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from gamevault.database import get_db
from gamevault.errors import AuthenticationError, PersistenceError, ValidationError
from gamevault.models.user import User as UserModel


logger = logging.getLogger(__name__)

COOKIE_NAME = "token"

router = APIRouter()


class Credentials(BaseModel):
    username: str | None = None
    password: str | None = None


class RegisteredUser(BaseModel):
    id: int
    username: str


class Message(BaseModel):
    message: str


def _require_credentials(credentials: Credentials) -> tuple[str, str]:
    if not credentials.username or not credentials.password:
        raise ValidationError("username and password are required")
    return credentials.username, credentials.password


def authenticate_user(request: Request, db: Session, username: str, password: str) -> UserModel:
    pwd_context = request.app.state.pwd_context
    try:
        user = db.query(UserModel).filter(UserModel.username == username).first()
    except SQLAlchemyError as e:
        logger.error("User lookup failed: %s", e)
        raise PersistenceError("Login failed") from e

    if user is None:
        # keep the response time close to a real password check
        pwd_context.dummy_verify()
        logger.info("Login rejected for %r: no such user", username)
        raise AuthenticationError("Invalid username or password")
    if not verify_password(pwd_context, password, user.hashed_password):
        logger.info("Login rejected for %r: wrong password", username)
        raise AuthenticationError("Invalid username or password")
    return user


def get_current_user(request: Request) -> dict:
    """
    Gate for protected routes: verifies the session cookie and
    attaches the decoded identity to the request.
    """
    try:
        identity = decode_access_token(request.app.state.settings, request.cookies.get(COOKIE_NAME))
    except AuthenticationError as e:
        logger.info("Token rejected on %s: %s", request.url.path, e.message)
        raise AuthenticationError("Invalid token") from e
    request.state.user = identity
    return identity


@router.post("/register", response_model=RegisteredUser, status_code=status.HTTP_201_CREATED)
def register(request: Request, credentials: Credentials, db: Session = Depends(get_db)):
    username, password = _require_credentials(credentials)
    try:
        hashed = get_password_hash(request.app.state.pwd_context, password)
    except ValueError as e:
        raise ValidationError("password contains characters that cannot be stored") from e
    new_user = UserModel(username=username, hashed_password=hashed)
    try:
        db.add(new_user)
        db.commit()
        db.refresh(new_user)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Registration of %r failed: %s", username, e)
        raise PersistenceError("Registration failed") from e

    logger.info("Registered user %r (id=%s)", new_user.username, new_user.id)
    return {"id": new_user.id, "username": new_user.username}


@router.post("/login", response_model=Message)
def login(request: Request, response: Response, credentials: Credentials, db: Session = Depends(get_db)):
    settings = request.app.state.settings
    username, password = _require_credentials(credentials)
    user = authenticate_user(request, db, username, password)

    token = create_access_token(settings, data={"id": user.id, "username": user.username})
    response.set_cookie(
        COOKIE_NAME,
        token,
        max_age=settings.access_token_expire_minutes * 60,
        path="/",
        secure=settings.cookie_secure,
        httponly=True,
        samesite="strict",
    )
    logger.info("User %r logged in", user.username)
    return {"message": "Login successful"}


@router.post("/logout", response_model=Message)
def logout(request: Request, response: Response):
    response.delete_cookie(
        COOKIE_NAME,
        path="/",
        secure=request.app.state.settings.cookie_secure,
        httponly=True,
        samesite="strict",
    )
    return {"message": "Logout successful"}
