# ============================================================================
# Main API Router
# ============================================================================
from fastapi import APIRouter

from prepflow.api.v1 import quiz_sessions, quiz_analytics

api_router = APIRouter()

# Session lifecycle (start, answer, complete, delete)
api_router.include_router(quiz_sessions.router)
# Statistics, trends and weak areas
api_router.include_router(quiz_analytics.router)
