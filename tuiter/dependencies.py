"""FastAPI dependencies backed by the DI container."""

from tuiter.container import get_container
from tuiter.interfaces.user_repository import IUserRepository
from tuiter.interfaces.tuit_repository import ITuitRepository
from tuiter.services.authentication_service import AuthenticationService


def get_user_repository() -> IUserRepository:
    """
    Get user repository from container.

    Returns:
        IUserRepository: User access layer bound to the configured backing
    """
    return get_container().user_repository()


def get_tuit_repository() -> ITuitRepository:
    """
    Get tuit repository from container.

    Returns:
        ITuitRepository: Tuit access layer bound to the configured backing
    """
    return get_container().tuit_repository()


def get_authentication_service() -> AuthenticationService:
    """
    Get authentication service from container.

    Returns:
        AuthenticationService: Wired with the user repository and session store
    """
    return get_container().authentication_service()
