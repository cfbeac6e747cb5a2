from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.user import User, UserCreate
from app.services.user import UserService

router = APIRouter()


@router.post("/AddUser", response_model=User)
async def add_user(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create a user and return it with its assigned id"""
    service = UserService(db)
    return await service.create_user(user_data)


@router.get("/{user_id}", response_model=User)
async def get_user(
    user_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Get a user by id"""
    service = UserService(db)
    return await service.get_user(user_id)
