"""User CRUD endpoints."""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Optional
import logging

from tuiter.errors import TuiterError
from tuiter.interfaces.user_repository import IUserRepository
from tuiter.models.requests import UserCreateRequest, UserUpdateRequest
from tuiter.models.responses import UserResponse, StatusResponse
from tuiter.services.authentication_service import AuthenticationService
from tuiter.dependencies import get_user_repository, get_authentication_service
from tuiter.middleware.session import get_session_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def find_users(
    username: Optional[str] = Query(None),
    password: Optional[str] = Query(None),
    user_type: Optional[str] = Query(None, alias="type"),
    users: IUserRepository = Depends(get_user_repository)
):
    """
    List users.

    - ``username`` + ``password``: credential check, single user or 404
    - ``username``: lookup, single user or 404
    - ``type``: users with that role tag
    - nothing: every user
    """
    try:
        if username and password:
            user = await users.find_user_by_credentials(username, password)
            if not user:
                raise HTTPException(status_code=404, detail="User not found")
            return UserResponse.from_domain(user)

        if username:
            user = await users.find_user_by_username(username)
            if not user:
                raise HTTPException(status_code=404, detail="User not found")
            return UserResponse.from_domain(user)

        if user_type:
            found = await users.find_users_by_type(user_type)
        else:
            found = await users.find_all_users()
        return [UserResponse.from_domain(u) for u in found]
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to list users: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{user_id}", response_model=UserResponse)
async def find_user_by_id(
    user_id: str,
    users: IUserRepository = Depends(get_user_repository)
):
    try:
        user = await users.find_user_by_id(user_id)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")
        return UserResponse.from_domain(user)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to get user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("", response_model=UserResponse)
async def create_user(
    request: UserCreateRequest,
    users: IUserRepository = Depends(get_user_repository)
):
    try:
        user = await users.create_user(request.model_dump(exclude_none=True))
        return UserResponse.from_domain(user)
    except HTTPException:
        raise
    except TuiterError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to create user: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    request: UserUpdateRequest,
    session_id: Optional[str] = Depends(get_session_id),
    users: IUserRepository = Depends(get_user_repository),
    auth: AuthenticationService = Depends(get_authentication_service)
):
    """Merge the sent fields into the user; refreshes the session if it is the caller."""
    try:
        user = await users.update_user(user_id, request.model_dump(exclude_unset=True))
        if not user:
            raise HTTPException(status_code=404, detail="User not found")
        await auth.refresh_current_user(session_id, user)
        return UserResponse.from_domain(user)
    except HTTPException:
        raise
    except TuiterError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to update user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.delete("/{user_id}", response_model=StatusResponse)
async def delete_user(
    user_id: str,
    users: IUserRepository = Depends(get_user_repository)
):
    try:
        if not await users.delete_user(user_id):
            raise HTTPException(status_code=404, detail="User not found")
        return StatusResponse(status="success", id=user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to delete user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
