from fastapi import APIRouter
from dashboard.api.routers import auth, users, projects, stats, health

api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(stats.router, prefix="/stats", tags=["stats"])
api_router.include_router(health.router, prefix="/health", tags=["health"])
