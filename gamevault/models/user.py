# gamevault/models/user.py

from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime
from . import Base


def _utcnow():
    return datetime.now(timezone.utc)


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for registered users.
    Stores the username and the bcrypt hash of the password, never the password itself.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
