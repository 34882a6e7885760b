"""Session authentication endpoints (register, login, profile, logout, update)."""

from fastapi import APIRouter, HTTPException, Depends, Response
from typing import Optional
import logging

from tuiter.errors import TuiterError
from tuiter.models.requests import RegisterRequest, LoginRequest, AuthUpdateRequest
from tuiter.models.responses import UserResponse, StatusResponse
from tuiter.services.authentication_service import AuthenticationService
from tuiter.dependencies import get_authentication_service
from tuiter.middleware.session import get_session_id, set_session_cookie, clear_session_cookie

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["auth"])


@router.post("/register", response_model=UserResponse)
async def register(
    request: RegisterRequest,
    response: Response,
    session_id: Optional[str] = Depends(get_session_id),
    service: AuthenticationService = Depends(get_authentication_service)
):
    """Create a user and bind it to the caller's session."""
    logger.info(f"Registration: {request.username}")

    try:
        user, session = await service.register(
            session_id,
            request.model_dump(exclude_none=True)
        )
        set_session_cookie(response, session)
        return UserResponse.from_domain(user)
    except HTTPException:
        raise
    except TuiterError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    except ValueError as e:
        logger.error(f"Registration error: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected registration error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/login", response_model=UserResponse)
async def login(
    request: LoginRequest,
    response: Response,
    session_id: Optional[str] = Depends(get_session_id),
    service: AuthenticationService = Depends(get_authentication_service)
):
    """Login with username/password."""
    logger.info(f"Login attempt: {request.username}")

    try:
        user, session = await service.login(session_id, request.username, request.password)
        set_session_cookie(response, session)
        return UserResponse.from_domain(user)
    except HTTPException:
        raise
    except TuiterError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected login error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/profile", response_model=UserResponse)
async def profile(
    session_id: Optional[str] = Depends(get_session_id),
    service: AuthenticationService = Depends(get_authentication_service)
):
    """Return the user bound to the session (404 when anonymous)."""
    try:
        user = await service.profile(session_id)
        return UserResponse.from_domain(user)
    except HTTPException:
        raise
    except TuiterError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected profile error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/logout", response_model=StatusResponse)
async def logout(
    response: Response,
    session_id: Optional[str] = Depends(get_session_id),
    service: AuthenticationService = Depends(get_authentication_service)
):
    """Destroy the session."""
    try:
        await service.logout(session_id)
        clear_session_cookie(response)
        return StatusResponse(status="success")
    except Exception as e:
        logger.error(f"Unexpected logout error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.put("/update/{user_id}", response_model=UserResponse)
async def update(
    user_id: str,
    request: AuthUpdateRequest,
    response: Response,
    session_id: Optional[str] = Depends(get_session_id),
    service: AuthenticationService = Depends(get_authentication_service)
):
    """Update the logged-in user's own record and refresh the session copy."""
    logger.info(f"Profile update for {user_id}")

    try:
        user, session = await service.update(
            session_id,
            user_id,
            request.user.model_dump(exclude_unset=True)
        )
        set_session_cookie(response, session)
        return UserResponse.from_domain(user)
    except HTTPException:
        raise
    except TuiterError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    except ValueError as e:
        logger.error(f"Profile update error: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected profile update error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
