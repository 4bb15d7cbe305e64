# growth-tracker/growth_tracker/api/v1/api.py
from fastapi import APIRouter
from growth_tracker.api.v1.endpoints import (
    achievements, analytics, chat, dashboard, goals, integrations, team, users
)

api_router = APIRouter()

api_router.include_router(users.router, prefix="/users", tags=["Users"])
api_router.include_router(dashboard.router, prefix="/users", tags=["Dashboard"])
api_router.include_router(goals.router, prefix="/goals", tags=["Goals"])
api_router.include_router(achievements.router, prefix="/achievements", tags=["Achievements"])
api_router.include_router(chat.router, prefix="/chat", tags=["Chat"])
api_router.include_router(team.router, prefix="/team-memberships", tags=["Team"])
api_router.include_router(integrations.router, prefix="/integrations", tags=["Integrations"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["Analytics"])
