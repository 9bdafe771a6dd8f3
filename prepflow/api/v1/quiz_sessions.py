# ============================================================================
# Quiz Session Endpoints
# ============================================================================
from fastapi import APIRouter, Depends, Query
from typing import Optional, List
from uuid import UUID

from prepflow.api.deps import get_quiz_history, get_session_recorder, get_session_repository
from prepflow.config import get_settings
from prepflow.core.exceptions import QuizSessionNotFound
from prepflow.models.quiz import QuizCategory
from prepflow.schemas.quiz import (
    StartQuizRequest, RecordAnswerRequest, QuizSessionSummary,
    QuizSessionDetail, QuizQuestionResponse
)
from prepflow.services.quiz import QuizSessionRepository, QuizSessionRecorder
from prepflow.services.analytics import QuizHistoryService

settings = get_settings()

router = APIRouter(prefix="/quiz/sessions", tags=["quiz-sessions"])

@router.post("", response_model=QuizSessionDetail, status_code=201)
async def start_quiz_session(
    request: StartQuizRequest,
    recorder: QuizSessionRecorder = Depends(get_session_recorder)
):
    """Start a new quiz session"""
    return await recorder.start_session(
        category=request.category,
        topic_title=request.topic_title,
        total_questions=request.total_questions
    )

@router.get("", response_model=List[QuizSessionSummary])
async def list_quiz_sessions(
    category: Optional[QuizCategory] = None,
    history: QuizHistoryService = Depends(get_quiz_history)
):
    """All sessions, newest first"""
    return await history.get_all_sessions(category)

@router.get("/recent", response_model=List[QuizSessionSummary])
async def recent_quiz_sessions(
    limit: int = Query(settings.DEFAULT_RECENT_LIMIT, ge=1, le=100),
    category: Optional[QuizCategory] = None,
    history: QuizHistoryService = Depends(get_quiz_history)
):
    """Most recent completed sessions"""
    return await history.get_recent_sessions(limit=limit, category=category)

@router.get("/{session_id}", response_model=QuizSessionDetail)
async def get_quiz_session(
    session_id: UUID,
    repository: QuizSessionRepository = Depends(get_session_repository)
):
    session = await repository.get_session(session_id)
    if session is None:
        raise QuizSessionNotFound(str(session_id))
    return session

@router.post("/{session_id}/answers", response_model=QuizQuestionResponse, status_code=201)
async def record_answer(
    session_id: UUID,
    request: RecordAnswerRequest,
    recorder: QuizSessionRecorder = Depends(get_session_recorder)
):
    """Store a graded answer in an in-progress session"""
    return await recorder.record_answer(session_id=session_id, **request.model_dump())

@router.post("/{session_id}/complete", response_model=QuizSessionDetail)
async def complete_quiz_session(
    session_id: UUID,
    recorder: QuizSessionRecorder = Depends(get_session_recorder)
):
    return await recorder.complete_session(session_id)

@router.delete("/{session_id}", status_code=204)
async def delete_quiz_session(
    session_id: UUID,
    recorder: QuizSessionRecorder = Depends(get_session_recorder)
):
    """Delete a session and its question records"""
    await recorder.delete_session(session_id)
