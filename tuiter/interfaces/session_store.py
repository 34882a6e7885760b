"""Session store interface"""
from abc import ABC, abstractmethod
from typing import Optional
from tuiter.domain.session import Session


class ISessionStore(ABC):
    """Server-side sessions keyed by the cookie token"""

    @abstractmethod
    async def create(self) -> Session:
        """Open a new anonymous session"""
        pass

    @abstractmethod
    async def get(self, session_id: str) -> Optional[Session]:
        """Get a live session (None if unknown or expired)"""
        pass

    @abstractmethod
    async def save(self, session: Session) -> Session:
        """Persist the session's current-user binding"""
        pass

    @abstractmethod
    async def destroy(self, session_id: str) -> bool:
        """Remove the session entirely"""
        pass
