"""Session cookie helpers.

The cookie carries only the opaque session id; everything else lives in the
session store.
"""
from typing import Optional
from fastapi import Request, Response

from tuiter.config import settings
from tuiter.domain.session import Session


def get_session_id(request: Request) -> Optional[str]:
    """FastAPI dependency: the caller's session token, if any."""
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def set_session_cookie(response: Response, session: Session) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session.session_id,
        max_age=settings.SESSION_TTL_SECONDS,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite=settings.SESSION_COOKIE_SAMESITE
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite=settings.SESSION_COOKIE_SAMESITE
    )
