from typing import Optional

from pydantic import BaseModel, EmailStr


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    email: EmailStr
    full_name: Optional[str] = None
    is_verified: bool = False
    role: str = "user"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
