"""User access layer over a record store"""
import logging
from typing import Optional, List, Dict

from tuiter.interfaces.record_store import IRecordStore
from tuiter.interfaces.user_repository import IUserRepository
from tuiter.domain.user import User
from tuiter.errors import ConflictError
from tuiter.utils.crypto import hash_password, verify_password, dummy_password_hash
from tuiter.utils.patch import validate_patch

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('username', 'password')


class UserRepository(IUserRepository):
    """User lookups and mutations. Backing-agnostic: the store is injected."""

    def __init__(self, store: IRecordStore):
        self.store = store

    async def find_all_users(self) -> List[User]:
        items = await self.store.find_all()
        return [User.from_item(item) for item in items]

    async def find_users_by_type(self, user_type: str) -> List[User]:
        items = await self.store.find({'user_type': user_type})
        return [User.from_item(item) for item in items]

    async def find_user_by_id(self, user_id: str) -> Optional[User]:
        item = await self.store.find_by_id(user_id)
        return User.from_item(item) if item else None

    async def find_user_by_username(self, username: str) -> Optional[User]:
        item = await self.store.find_one({'username': username})
        return User.from_item(item) if item else None

    async def find_user_by_credentials(self, username: str, password: str) -> Optional[User]:
        """Username must match exactly and the password must verify against its hash."""
        user = await self.find_user_by_username(username)
        if not user:
            verify_password(password, dummy_password_hash())
            return None

        if not verify_password(password, user.password):
            return None

        return user

    async def create_user(self, fields: Dict) -> User:
        """
        Create new user.

        Assigns an id when ``user_id`` is absent and stores the password as a
        bcrypt hash.

        Raises:
            ConflictError: If the username or the supplied id is already taken
            ValueError: If ``fields`` names an unknown attribute or nulls
                username/password
        """
        item = validate_patch(User, fields, not_null=REQUIRED_FIELDS)

        username = item.get('username')
        if await self.find_user_by_username(username):
            raise ConflictError(f"Username already taken: {username}")

        item['password'] = hash_password(item.get('password') or '')

        created = await self.store.create(item)
        logger.info(f"Created user {created['user_id']} ({username})")
        return User.from_item(created)

    async def update_user(self, user_id: str, patch: Dict) -> Optional[User]:
        """
        Shallow-merge ``patch`` into the user; untouched fields keep their values.

        Returns:
            The merged user, or None if ``user_id`` does not exist

        Raises:
            ConflictError: If the patch renames the user onto a taken username
            ValueError: If the patch nulls username or password
        """
        patch = validate_patch(User, patch, immutable=('user_id',), not_null=REQUIRED_FIELDS)

        if 'username' in patch:
            other = await self.find_user_by_username(patch['username'])
            if other and other.user_id != user_id:
                raise ConflictError(f"Username already taken: {patch['username']}")

        if 'password' in patch:
            patch['password'] = hash_password(patch['password'])

        if not await self.store.update_by_id(user_id, patch):
            return None

        return await self.find_user_by_id(user_id)

    async def delete_user(self, user_id: str) -> bool:
        deleted = await self.store.delete_by_id(user_id)
        if deleted:
            logger.info(f"Deleted user {user_id}")
        return deleted
