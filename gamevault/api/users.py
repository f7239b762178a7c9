# gamevault/api/users.py

import logging
from datetime import datetime
from pydantic import BaseModel
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from gamevault.api.auth import get_current_user
from gamevault.database import get_db
from gamevault.errors import PersistenceError
from gamevault.models.user import User as UserModel


logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])


class UserOut(BaseModel):
    id: int
    username: str
    created_at: datetime


@router.get("/users", response_model=list[UserOut])
def list_users(db: Session = Depends(get_db)):
    """
    Lists every registered user, oldest first. No pagination.
    """
    try:
        users = (
            db.query(UserModel.id, UserModel.username, UserModel.created_at)
            .order_by(UserModel.created_at.asc(), UserModel.id.asc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.error("Listing users failed: %s", e)
        raise PersistenceError("Could not fetch users") from e

    return [{"id": u.id, "username": u.username, "created_at": u.created_at} for u in users]
