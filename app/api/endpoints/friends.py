from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.database import get_db
from app.schemas.friendship import Friendship, FriendshipCreate, FriendshipPair
from app.services.friendship import FriendshipService

router = APIRouter()


@router.post("/AddFriend", response_model=FriendshipPair)
async def add_friend(
    request_data: FriendshipCreate,
    db: AsyncSession = Depends(get_db)
):
    """Make two users friends (writes both directions)"""
    service = FriendshipService(db)
    return await service.add_friend(request_data.user_id, request_data.friend_user_id)


@router.get("/{user_id}", response_model=List[Friendship])
async def get_friends(
    user_id: int,
    db: AsyncSession = Depends(get_db)
):
    """List the friendships a user has"""
    service = FriendshipService(db)
    return await service.get_friends(user_id)
