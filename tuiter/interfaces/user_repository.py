"""User repository interface"""
from abc import ABC, abstractmethod
from typing import Optional, List, Dict
from tuiter.domain.user import User


class IUserRepository(ABC):
    """Interface for user data access"""

    @abstractmethod
    async def find_all_users(self) -> List[User]:
        """Get all users"""
        pass

    @abstractmethod
    async def find_users_by_type(self, user_type: str) -> List[User]:
        """Get users with the given role tag"""
        pass

    @abstractmethod
    async def find_user_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def find_user_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        pass

    @abstractmethod
    async def find_user_by_credentials(self, username: str, password: str) -> Optional[User]:
        """Get user whose username AND password both match"""
        pass

    @abstractmethod
    async def create_user(self, fields: Dict) -> User:
        """Create new user"""
        pass

    @abstractmethod
    async def update_user(self, user_id: str, patch: Dict) -> Optional[User]:
        """Merge patch into user, returning the result (None if not found)"""
        pass

    @abstractmethod
    async def delete_user(self, user_id: str) -> bool:
        """Delete user"""
        pass
