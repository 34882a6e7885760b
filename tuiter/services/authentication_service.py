"""Authentication service (business logic)"""
import logging
from typing import Optional, Dict, Tuple

from tuiter.interfaces.user_repository import IUserRepository
from tuiter.interfaces.session_store import ISessionStore
from tuiter.domain.user import User
from tuiter.domain.session import Session
from tuiter.errors import ConflictError, ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Session-bound current-user tracking (DIP - depends on interfaces).

    A session is ANONYMOUS while no user is bound and AUTHENTICATED once
    register/login binds one. Every method takes the caller's session token
    (``None`` when the client sent no cookie). Register and login always
    return a new session and destroy the one the caller held.
    """

    def __init__(self, user_repository: IUserRepository, session_store: ISessionStore):
        self.user_repository = user_repository
        self.session_store = session_store

    async def _get_session(self, session_id: Optional[str]) -> Optional[Session]:
        if not session_id:
            return None
        return await self.session_store.get(session_id)

    async def _bind(self, session_id: Optional[str], user: User) -> Session:
        """Bind ``user`` as the current user in a freshly issued session.

        The caller's old token is destroyed, so a token handed out before
        login never becomes an authenticated one.
        """
        if session_id:
            await self.session_store.destroy(session_id)
        session = await self.session_store.create()
        session.current_user = user
        return await self.session_store.save(session)

    async def register(self, session_id: Optional[str], fields: Dict) -> Tuple[User, Session]:
        """
        Create a user and log them in.

        Raises:
            ConflictError: If the username is already taken
        """
        username = fields.get('username')
        if await self.user_repository.find_user_by_username(username):
            logger.warning(f"Registration rejected, username taken: {username}")
            raise ConflictError(f"Username already taken: {username}")

        user = await self.user_repository.create_user(fields)
        session = await self._bind(session_id, user)
        logger.info(f"Registered user {user.user_id} ({username})")
        return user, session

    async def login(
        self,
        session_id: Optional[str],
        username: Optional[str],
        password: Optional[str]
    ) -> Tuple[User, Session]:
        """
        Authenticate with username/password and bind the user.

        Raises:
            ForbiddenError: If either credential is missing or they don't match
        """
        if not username or not password:
            raise ForbiddenError("Username and password are required")

        user = await self.user_repository.find_user_by_credentials(username, password)
        if not user:
            logger.warning(f"Failed login for {username}")
            raise ForbiddenError("Invalid credentials")

        session = await self._bind(session_id, user)
        logger.info(f"User {user.user_id} logged in")
        return user, session

    async def profile(self, session_id: Optional[str]) -> User:
        """
        Get the user bound to the session.

        Raises:
            NotFoundError: If the session is anonymous, unknown or expired
        """
        session = await self._get_session(session_id)
        if session is None or not session.is_authenticated():
            raise NotFoundError("No user logged in")
        return session.current_user

    async def logout(self, session_id: Optional[str]) -> None:
        """Destroy the session itself; a fresh one is opened on next login."""
        if session_id:
            await self.session_store.destroy(session_id)

    async def update(
        self,
        session_id: Optional[str],
        user_id: str,
        patch: Dict
    ) -> Tuple[User, Session]:
        """
        Update the logged-in user's own record and re-bind the result.

        Raises:
            ForbiddenError: If nobody is logged in or ``user_id`` is someone else
            NotFoundError: If the user no longer exists
        """
        session = await self._get_session(session_id)
        if session is None or not session.is_authenticated():
            raise ForbiddenError("Not logged in")

        if session.current_user.user_id != user_id:
            logger.warning(
                f"User {session.current_user.user_id} attempted to update {user_id}"
            )
            raise ForbiddenError("Cannot update another user")

        user = await self.user_repository.update_user(user_id, patch)
        if not user:
            raise NotFoundError(f"User not found: {user_id}")

        session.current_user = user
        session = await self.session_store.save(session)
        return user, session

    async def refresh_current_user(self, session_id: Optional[str], user: User) -> bool:
        """
        Re-snapshot the session's current user if it is ``user``.

        Used after a plain user update so the session doesn't keep serving a
        stale copy. Returns True if the session was refreshed.
        """
        session = await self._get_session(session_id)
        if session is None or not session.is_authenticated():
            return False
        if session.current_user.user_id != user.user_id:
            return False

        session.current_user = user
        await self.session_store.save(session)
        return True
