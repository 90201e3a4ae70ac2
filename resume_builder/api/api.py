# File: resume_builder/api/api.py
from fastapi import APIRouter

from resume_builder.api.endpoints import health, resumes

api_router = APIRouter(prefix="/api")
api_router.include_router(resumes.router, prefix="/resumes", tags=["resumes"])
api_router.include_router(health.router, prefix="/health", tags=["health"])
