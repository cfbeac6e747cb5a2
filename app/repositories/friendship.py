from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import or_, and_, select
from sqlalchemy.exc import IntegrityError
from typing import List, Optional, Tuple

from app.models.friendship import Friendship
from app.repositories.user import is_storable_id


class FriendshipRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def friendship_exists(self, user1_id: int, user2_id: int) -> bool:
        """Check for an edge between two users in either direction"""
        if not (is_storable_id(user1_id) and is_storable_id(user2_id)):
            return False
        stmt = select(Friendship.user_id).where(
            or_(
                and_(Friendship.user_id == user1_id, Friendship.friend_user_id == user2_id),
                and_(Friendship.user_id == user2_id, Friendship.friend_user_id == user1_id)
            )
        ).limit(1)
        result = await self.db.execute(stmt)
        return result.first() is not None

    async def create_pair(self, user_id: int, friend_user_id: int) -> Optional[Tuple[Friendship, Friendship]]:
        """Write both directed edges in one commit.

        Returns None when the commit hits an integrity violation (the pair was
        inserted concurrently, or a referenced user vanished); nothing is kept.
        """
        friend = Friendship(user_id=user_id, friend_user_id=friend_user_id)
        reciprocal_friend = Friendship(user_id=friend_user_id, friend_user_id=user_id)

        try:
            self.db.add_all([friend, reciprocal_friend])
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            return None

        await self.db.refresh(friend)
        await self.db.refresh(reciprocal_friend)
        return friend, reciprocal_friend

    async def get_friends(self, user_id: int) -> List[Friendship]:
        """Get every outgoing edge of a user"""
        if not is_storable_id(user_id):
            return []
        stmt = select(Friendship).where(Friendship.user_id == user_id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
