from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from ..models.asset_tag import AssetTagRecord


class AssetTagRepository(ABC):
    """Repository interface - defines contract for asset tag data access"""

    @abstractmethod
    async def create(self, record: AssetTagRecord) -> AssetTagRecord:
        """Insert a new record and return it with its ID set"""
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: str) -> Optional[AssetTagRecord]:
        """Get record by ID"""
        pass

    @abstractmethod
    async def list(
        self,
        owner_user_id: Optional[str],
        room_number: Optional[str] = None,
        start_utc: Optional[datetime] = None,
        end_utc: Optional[datetime] = None,
    ) -> List[AssetTagRecord]:
        """List records newest first; owner_user_id=None lists every user's records"""
        pass

    @abstractmethod
    async def delete_many(self, owner_user_id: str, tag_ids: Sequence[str]) -> int:
        """Delete the given records owned by the user, returning the deleted count"""
        pass

    @abstractmethod
    async def update(
        self,
        tag_id: str,
        asset_tag: Optional[str] = None,
        asset_url: Optional[str] = None,
        room_number: Optional[str] = None,
    ) -> Optional[AssetTagRecord]:
        """Update editable fields, returning the updated record or None if absent"""
        pass
