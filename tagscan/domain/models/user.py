from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..constants.user_fields import UserRoles


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    email: str
    hashed_password: str
    full_name: Optional[str] = None
    is_verified: bool = False
    role: str = UserRoles.USER
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self):
        """Business validations"""
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
        if self.role not in UserRoles.ALL:
            raise ValueError(f"Unknown role: {self.role}")

    @property
    def is_admin(self) -> bool:
        return self.role == UserRoles.ADMIN
