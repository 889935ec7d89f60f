# petmarket/auth/service.py

from datetime import timedelta, datetime, timezone
from typing import Annotated, Optional
from uuid import uuid4
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from email_validator import validate_email, EmailNotValidError
import jwt
from jwt import PyJWTError

from ..entities.user import User
from . import models
from ..core.config import settings
from ..core.exceptions import (
    AuthenticationError,
    EmailAlreadyExistsError,
    ForbiddenError,
    InvalidEmailFormatError,
    InvalidPasswordError,
    UserNotFoundError,
)
from ..logging import logger
from ..utils.password_utils import verify_password, get_password_hash

# --- Configuration ---
SECRET_KEY = settings.SECRET_KEY
ALGORITHM = settings.ALGORITHM
ACCESS_TOKEN_EXPIRE_HOURS = settings.ACCESS_TOKEN_EXPIRE_HOURS

if settings.SECRET_KEY_IS_DEFAULT:
    logger.warning("ENCODING_SECRET_KEY is not set; using the development signing secret")

oauth2_bearer = OAuth2PasswordBearer(tokenUrl='/login')


def is_valid_email(email: str) -> bool:
    """Shape check only; no DNS lookups. The `.test` domain is accepted."""
    try:
        validate_email(email, check_deliverability=False, test_environment=True)
        return True
    except EmailNotValidError:
        return False


def signup_user(db: Session, email: str, password: str) -> User:
    """Creates a credential for `email` after the shape and uniqueness checks."""
    if not is_valid_email(email):
        logger.warning(f"Signup rejected, invalid email format: {email!r}")
        raise InvalidEmailFormatError(email)

    existing_user = db.query(User).filter(User.username == email).first()
    if existing_user:
        logger.warning(f"Signup rejected, email already registered: {email}")
        raise EmailAlreadyExistsError(email)

    user = User(id=str(uuid4()), username=email, password_hash=get_password_hash(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race against a concurrent signup for the same email
        db.rollback()
        raise EmailAlreadyExistsError(email)
    db.refresh(user)

    logger.info(f"Successfully registered user: {email}")
    return user


def authenticate_user(db: Session, username: str, password: str) -> User:
    """Returns the matching user or raises UserNotFoundError / InvalidPasswordError."""
    user = db.query(User).filter(User.username == username).first()
    if not user:
        logger.warning(f"Login attempt for unknown user: {username}")
        raise UserNotFoundError("User not found.")

    if not verify_password(password, user.password_hash):
        logger.warning(f"Wrong password for user: {username}")
        raise InvalidPasswordError()

    return user


def create_access_token(email: str, user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Creates a signed JWT access token with a unique ID (jti)."""
    if expires_delta is None:
        expires_delta = timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS)
    expire = datetime.now(timezone.utc) + expires_delta
    encode = {
        'sub': email,
        'id': str(user_id),
        'exp': expire,
        'scope': 'access_token',
        'jti': str(uuid4()),
    }
    return jwt.encode(encode, SECRET_KEY, algorithm=ALGORITHM)


def login_user(db: Session, username: str, password: str) -> models.LoginResponse:
    user = authenticate_user(db, username, password)
    token = create_access_token(email=user.username, user_id=user.id)
    logger.info(f"User logged in: {username}")
    return models.LoginResponse(message='Login success.', token=token, userId=user.id)


def verify_token(token: str) -> models.TokenData:
    """Decodes and verifies an access token."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except PyJWTError as e:
        logger.warning(f"JWT decode error: {e}")
        raise AuthenticationError(technical_details=str(e))

    if payload.get('scope') != 'access_token':
        raise AuthenticationError(technical_details="Invalid token scope")

    user_id = payload.get('id')
    if not user_id:
        raise AuthenticationError(technical_details="User ID not found in token.")

    return models.TokenData(user_id=user_id, email=payload.get('sub'))


def get_current_user(token: Annotated[str, Depends(oauth2_bearer)]) -> models.TokenData:
    """FastAPI dependency to get the current user from a token."""
    return verify_token(token)


CurrentUser = Annotated[models.TokenData, Depends(get_current_user)]


def ensure_same_user(current_user: models.TokenData, claimed_user_id: Optional[str]) -> str:
    """
    Older clients still send `userId` in the body. The token decides the
    identity; a body value naming someone else is rejected.
    """
    if claimed_user_id and claimed_user_id != current_user.user_id:
        logger.warning(f"Body userId {claimed_user_id} does not match token user {current_user.user_id}")
        raise ForbiddenError("userId does not match the authenticated user")
    return current_user.user_id
