from fastapi import APIRouter

from app.api.endpoints import users, friends

api_router = APIRouter()

# Include routers
api_router.include_router(users.router, prefix="/User", tags=["users"])
api_router.include_router(friends.router, prefix="/Friend", tags=["friends"])
