import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class VitalsApiError(Exception):
    status_code = 500
    message = "Server error"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class PatientNotFoundError(VitalsApiError):
    status_code = 404
    message = "Patient not found"

    def __init__(self, patient_id: str):
        self.patient_id = patient_id
        super().__init__()


class UserAlreadyExistsError(VitalsApiError):
    status_code = 400
    message = "User already exists"


class InvalidCredentialsError(VitalsApiError):
    # Same message for unknown email and wrong password.
    status_code = 400
    message = "Invalid credentials"


async def vitals_api_error_handler(request: Request, exc: VitalsApiError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Server error"})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Something went wrong!"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(VitalsApiError, vitals_api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
