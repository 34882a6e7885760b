"""API request models

Field aliases are the wire names used by the web client (camelCase, ``_id``).
Update models have every field optional; handlers turn them into patches with
``model_dump(exclude_unset=True)`` so only fields the client sent are merged.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class UserCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(None, alias="_id")
    username: str
    password: str
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    user_type: Optional[str] = Field(None, alias="type")


class RegisterRequest(UserCreateRequest):
    pass


class LoginRequest(BaseModel):
    # Optional so a missing field is answered with 403, not a validation error
    username: Optional[str] = None
    password: Optional[str] = None


class UserUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    user_type: Optional[str] = Field(None, alias="type")


class AuthUpdateRequest(BaseModel):
    user: UserUpdateRequest


class TuitCreateRequest(BaseModel):
    """New tuit content. Engagement and author fields are set server-side."""
    model_config = ConfigDict(populate_by_name=True)

    body: str = Field("", alias="tuit")
    topic: Optional[str] = None
    title: Optional[str] = None


class TuitUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    body: Optional[str] = Field(None, alias="tuit")
    topic: Optional[str] = None
    title: Optional[str] = None
    user_name: Optional[str] = Field(None, alias="userName")
    handle: Optional[str] = None
    image: Optional[str] = None
    time: Optional[str] = None
    likes: Optional[int] = None
    dislikes: Optional[int] = None
    replies: Optional[int] = None
    retuits: Optional[int] = None
    liked: Optional[bool] = None
    disliked: Optional[bool] = None
