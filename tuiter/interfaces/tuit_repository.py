"""Tuit repository interface"""
from abc import ABC, abstractmethod
from typing import Optional, List, Dict
from tuiter.domain.tuit import Tuit


class ITuitRepository(ABC):
    """Interface for tuit data access"""

    @abstractmethod
    async def find_all_tuits(self) -> List[Tuit]:
        """Get all tuits"""
        pass

    @abstractmethod
    async def find_tuit_by_id(self, tuit_id: str) -> Optional[Tuit]:
        """Get tuit by ID"""
        pass

    @abstractmethod
    async def create_tuit(self, fields: Dict) -> Tuit:
        """Create new tuit with zeroed counters"""
        pass

    @abstractmethod
    async def update_tuit(self, tuit_id: str, patch: Dict) -> Optional[Tuit]:
        """Merge patch into tuit, returning the result (None if not found)"""
        pass

    @abstractmethod
    async def delete_tuit(self, tuit_id: str) -> bool:
        """Delete tuit"""
        pass
