from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional


class FriendshipCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: int
    friend_user_id: int


class Friendship(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    user_id: int
    friend_user_id: int
    created_at: Optional[datetime] = None


class FriendshipPair(BaseModel):
    """Both directed edges written by a single AddFriend call"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    friend: Friendship
    reciprocal_friend: Friendship
