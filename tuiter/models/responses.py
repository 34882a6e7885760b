"""API response models"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from tuiter.domain.user import User
from tuiter.domain.tuit import Tuit


class UserResponse(BaseModel):
    """Public view of a user (the password hash is never sent)."""
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="_id")
    username: str
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    user_type: Optional[str] = Field(None, alias="type")

    @classmethod
    def from_domain(cls, user: User):
        return cls(
            user_id=user.user_id,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            user_type=user.user_type
        )


class TuitResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tuit_id: str = Field(alias="_id")
    body: str = Field(alias="tuit")
    topic: Optional[str] = None
    title: Optional[str] = None
    user_name: Optional[str] = Field(None, alias="userName")
    handle: Optional[str] = None
    image: Optional[str] = None
    time: Optional[str] = None
    likes: int
    dislikes: int
    replies: int
    retuits: int
    liked: bool
    disliked: bool

    @classmethod
    def from_domain(cls, tuit: Tuit):
        return cls(**tuit.to_item())


class StatusResponse(BaseModel):
    status: str
    id: Optional[str] = None
