import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.user import UserRepository
from app.schemas.user import UserCreate
from app.models.user import User
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = UserRepository(db)

    async def create_user(self, user_data: UserCreate) -> User:
        """Create a user; the id is always assigned by the database"""
        user = await self.repo.create(user_data)
        logger.info("Created user %s", user.user_id)
        return user

    async def get_user(self, user_id: int) -> User:
        user = await self.repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user
