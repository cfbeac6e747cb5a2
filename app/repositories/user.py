from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.models.user import User
from app.schemas.user import UserCreate
from app.core.security import get_password_hash

# users.user_id is an INTEGER identity; nothing outside this range is ever assigned
MAX_ID = 2**31 - 1


def is_storable_id(user_id: int) -> bool:
    return 1 <= user_id <= MAX_ID


class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user_data: UserCreate) -> User:
        """Create a new user"""
        db_user = User(
            username=user_data.username,
            hashed_password=get_password_hash(user_data.password),
        )
        self.db.add(db_user)
        await self.db.commit()
        await self.db.refresh(db_user)
        return db_user

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        if not is_storable_id(user_id):
            return None
        query = select(User).filter(User.user_id == user_id)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()
