from fastapi import APIRouter

from src.cobrew.api.v1 import applications, auth, messages, profiles, projects

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth.router)
api_router.include_router(profiles.router)
api_router.include_router(projects.router)
api_router.include_router(applications.router)
api_router.include_router(messages.router)
