# ============================================================================
# API Dependencies
# ============================================================================
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from prepflow.core.database import get_db
from prepflow.services.quiz import QuizSessionRepository, QuizSessionRecorder
from prepflow.services.analytics import QuizHistoryService


async def get_session_repository(db: AsyncSession = Depends(get_db)) -> QuizSessionRepository:
    return QuizSessionRepository(db)


async def get_quiz_history(
    repository: QuizSessionRepository = Depends(get_session_repository)
) -> QuizHistoryService:
    """Analytics service bound to the request's database session"""
    return QuizHistoryService(repository)


async def get_session_recorder(db: AsyncSession = Depends(get_db)) -> QuizSessionRecorder:
    return QuizSessionRecorder(db)
