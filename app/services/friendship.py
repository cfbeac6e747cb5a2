import logging

from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.repositories.friendship import FriendshipRepository
from app.repositories.user import UserRepository
from app.schemas.friendship import Friendship, FriendshipPair
from app.utils.exceptions import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

FRIENDSHIP_EXISTS = "Friendship already exists."


class FriendshipService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = FriendshipRepository(db)
        self.user_repo = UserRepository(db)

    async def add_friend(self, user_id: int, friend_user_id: int) -> FriendshipPair:
        """Create a friendship as two directed edges committed together"""
        if user_id == friend_user_id:
            raise ValidationError("Cannot add yourself as a friend")

        await self._ensure_users_exist(user_id, friend_user_id)

        if await self.repo.friendship_exists(user_id, friend_user_id):
            logger.info("Friendship between %s and %s already exists", user_id, friend_user_id)
            raise ConflictError(FRIENDSHIP_EXISTS)

        pair = await self.repo.create_pair(user_id, friend_user_id)
        if pair is None:
            logger.warning("Integrity violation adding friendship %s <-> %s", user_id, friend_user_id)
            # A user deleted since the first check is a missing user, otherwise the pair won a race
            await self._ensure_users_exist(user_id, friend_user_id)
            raise ConflictError(FRIENDSHIP_EXISTS)

        friend, reciprocal_friend = pair
        logger.info("Users %s and %s are now friends", user_id, friend_user_id)
        return FriendshipPair(
            friend=Friendship.model_validate(friend),
            reciprocal_friend=Friendship.model_validate(reciprocal_friend)
        )

    async def _ensure_users_exist(self, *user_ids: int) -> None:
        for uid in user_ids:
            if not await self.user_repo.get_by_id(uid):
                raise NotFoundError("User not found")

    async def get_friends(self, user_id: int) -> List[Friendship]:
        """Get outgoing edges of a user; empty for users without friends"""
        friends = await self.repo.get_friends(user_id)
        return [Friendship.model_validate(friend) for friend in friends]
