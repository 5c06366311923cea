from fastapi import APIRouter

from src.app.api.api_v1.endpoints import roles, user_roles, users

api_router = APIRouter()
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(user_roles.router, prefix="/users", tags=["user roles"])
api_router.include_router(roles.router, prefix="/roles", tags=["roles"])
