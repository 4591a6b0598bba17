"""
Auth module: password hashing, JWT creation/validation and the
get_current_user FastAPI dependency.

Tokens are stateless HS256 JWTs carrying the user id in ``sub``. There is no
revocation list: a token stays valid until its ``exp``.
"""

import logging
import time
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import bcrypt
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from vitals_api.config import Settings
from vitals_api.database import get_db
from vitals_api.models.user import User

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
BCRYPT_ROUNDS = 10
# bcrypt only looks at the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72

bearer_scheme = HTTPBearer(auto_error=False, bearerFormat="JWT", scheme_name="bearerAuth")


@dataclass
class UserPrincipal:
    """Resolved identity attached to each authenticated request."""
    id: str
    username: str
    email: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_user(cls, user: User) -> "UserPrincipal":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
        )


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    raw = password.encode("utf-8")
    if len(raw) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(raw, password_hash.encode("utf-8"))


def create_token(user_id: str, settings: Settings) -> str:
    """Create a signed JWT for the given user id."""
    now = int(time.time())
    payload = {
        "sub": user_id,
        "iat": now,
        "exp": now + settings.jwt_expires_in,
        # Distinguishes tokens issued within the same second.
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=ALGORITHM)


def decode_token(token: str, settings: Settings) -> Optional[str]:
    """Decode and validate a JWT. Returns the user id, or None if invalid/expired."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.debug("Rejected token: %s", e)
        return None
    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        return None
    return user_id


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> UserPrincipal:
    """
    FastAPI dependency guarding protected routes.

    Raises 401 when the Authorization header is missing, is not a Bearer
    credential, or carries an invalid/expired token. On success the principal
    is also stored on ``request.state.user``.
    """
    if credentials is None:
        raise HTTPException(
            status_code=401,
            detail="No token, authorization denied",
            headers={"WWW-Authenticate": "Bearer"},
        )

    settings: Settings = request.app.state.settings
    user_id = decode_token(credentials.credentials, settings)
    user = await db.get(User, user_id) if user_id else None
    if user is None:
        raise HTTPException(
            status_code=401,
            detail="Token is not valid",
            headers={"WWW-Authenticate": "Bearer"},
        )

    principal = UserPrincipal.from_user(user)
    request.state.user = principal
    return principal
