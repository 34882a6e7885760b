"""Pydantic models for API requests and responses."""

from .requests import (
    UserCreateRequest,
    RegisterRequest,
    LoginRequest,
    UserUpdateRequest,
    AuthUpdateRequest,
    TuitCreateRequest,
    TuitUpdateRequest
)
from .responses import UserResponse, TuitResponse, StatusResponse

__all__ = [
    "UserCreateRequest",
    "RegisterRequest",
    "LoginRequest",
    "UserUpdateRequest",
    "AuthUpdateRequest",
    "TuitCreateRequest",
    "TuitUpdateRequest",
    "UserResponse",
    "TuitResponse",
    "StatusResponse"
]
