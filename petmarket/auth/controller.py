# petmarket/auth/controller.py
from fastapi import APIRouter, Request
from starlette import status

from . import models
from . import service
from ..core.config import settings
from ..core.exceptions import PetMarketError, ServerError
from ..core.rate_limiter import limiter
from ..database.core import DbSession
from ..logging import logger

router = APIRouter(tags=['auth'])


@router.post("/signup", status_code=status.HTTP_200_OK)
@limiter.limit(settings.SIGNUP_RATE_LIMIT)
async def signup(
    request: Request,
    db: DbSession,
    signup_request: models.SignupRequest
):
    """Register a new account keyed by email."""
    try:
        service.signup_user(db, signup_request.email, signup_request.password)
        return {"message": "Saved successfully"}
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Signup failed: {e}")
        db.rollback()
        raise ServerError(str(e))


@router.post("/login", response_model=models.LoginResponse, status_code=status.HTTP_200_OK)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    db: DbSession,
    login_request: models.LoginRequest
):
    """Check credentials and issue a bearer token."""
    try:
        return service.login_user(db, login_request.username, login_request.password)
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Login error: {e}")
        raise ServerError(str(e))
