import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from vitals_api.auth import create_token, hash_password, verify_password
from vitals_api.config import Settings
from vitals_api.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from vitals_api.models.user import User
from vitals_api.schemas.auth import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str):
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def register(db: AsyncSession, settings: Settings, data: RegisterRequest) -> str:
    """Create a user and return a fresh token. Raises UserAlreadyExistsError."""
    if await get_user_by_email(db, data.email) is not None:
        raise UserAlreadyExistsError()

    user = User(
        username=data.username,
        email=data.email,
        password_hash=await run_in_threadpool(hash_password, data.password),
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email.
        await db.rollback()
        raise UserAlreadyExistsError()

    logger.info("Registered user %s", user.id)
    return create_token(user.id, settings)


async def login(db: AsyncSession, settings: Settings, data: LoginRequest) -> str:
    """Verify credentials and return a fresh token. Raises InvalidCredentialsError."""
    user = await get_user_by_email(db, data.email)
    if user is None or not await run_in_threadpool(verify_password, data.password, user.password_hash):
        logger.info("Failed login attempt")
        raise InvalidCredentialsError()

    logger.info("User %s logged in", user.id)
    return create_token(user.id, settings)
