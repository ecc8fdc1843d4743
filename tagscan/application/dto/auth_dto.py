from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    email: EmailStr
    password: str = Field(min_length=6, max_length=256)
    full_name: Optional[str] = Field(default=None, max_length=200)


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: EmailStr
    password: str = Field(min_length=1, max_length=256)


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    access_token: str
    token_type: str = "bearer"


class AuthStatusResponse(BaseModel):
    """DTO describing the caller's login and verification state"""
    logged_in: bool = True
    is_verified: bool
    email: EmailStr
    user_id: str
    message: Optional[str] = None
