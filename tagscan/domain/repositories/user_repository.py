from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """
    Storage contract for scanner accounts.

    Used by registration/login (lookup by email), token resolution and the
    live connection gateway (lookup by ID), and admin verification (save).
    """

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Look up an account by email; matching is case-insensitive"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Look up an account by ID; malformed IDs yield None"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new account (no ID) or overwrite an existing one, returning the stored copy"""
        pass
