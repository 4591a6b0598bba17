import uuid

from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func

from vitals_api.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String(100), nullable=False)
    email = Column(String(254), unique=True, nullable=False, index=True)
    password_hash = Column(String(60), nullable=False)  # bcrypt, never plaintext
    created_at = Column(DateTime(timezone=True), server_default=func.now())
