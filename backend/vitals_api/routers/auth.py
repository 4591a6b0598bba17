from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from vitals_api.database import get_db
from vitals_api.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from vitals_api.services import auth_service

router = APIRouter()


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=201,
    summary="Register a new user",
    responses={400: {"description": "User already exists or invalid body"}},
)
async def register(request: Request, body: RegisterRequest, db: AsyncSession = Depends(get_db)):
    token = await auth_service.register(db, request.app.state.settings, body)
    return TokenResponse(token=token)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Log in and receive a bearer token",
    responses={400: {"description": "Invalid credentials"}},
)
async def login(request: Request, body: LoginRequest, db: AsyncSession = Depends(get_db)):
    token = await auth_service.login(db, request.app.state.settings, body)
    return TokenResponse(token=token)
