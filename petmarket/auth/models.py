from typing import Optional
from pydantic import BaseModel


class SignupRequest(BaseModel):
    email: str
    password: str


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    message: str
    token: str
    userId: str


class TokenData(BaseModel):
    user_id: str
    email: Optional[str] = None
