"""Business logic services."""

from .authentication_service import AuthenticationService

__all__ = ["AuthenticationService"]
