# ============================================================================
# Quiz Analytics Endpoints
# ============================================================================
from fastapi import APIRouter, Depends, Query
from typing import Optional, List

from prepflow.api.deps import get_quiz_history
from prepflow.config import get_settings
from prepflow.models.quiz import QuizCategory
from prepflow.schemas.quiz import (
    OverallStats, CategoryStats, WeakArea, CommonMistake, TopicPerformance,
    ImprovementTrendResponse, BestScoreResponse
)
from prepflow.services.analytics import QuizHistoryService

settings = get_settings()

router = APIRouter(prefix="/quiz/analytics", tags=["quiz-analytics"])

@router.get("/overview", response_model=OverallStats)
async def overall_stats(history: QuizHistoryService = Depends(get_quiz_history)):
    return await history.get_overall_stats()

@router.get("/categories", response_model=List[CategoryStats])
async def category_stats(history: QuizHistoryService = Depends(get_quiz_history)):
    """Stats for every category, including ones without quizzes"""
    return await history.get_category_stats()

@router.get("/weak-areas", response_model=List[WeakArea])
async def weak_areas(
    category: Optional[QuizCategory] = None,
    history: QuizHistoryService = Depends(get_quiz_history)
):
    """Weakest topics first"""
    return await history.get_weak_areas(category)

@router.get("/common-mistakes", response_model=List[CommonMistake])
async def common_mistakes(
    limit: int = Query(settings.DEFAULT_MISTAKE_LIMIT, ge=1, le=100),
    history: QuizHistoryService = Depends(get_quiz_history)
):
    return await history.get_common_mistakes(limit)

@router.get("/trend", response_model=ImprovementTrendResponse)
async def improvement_trend(
    category: Optional[QuizCategory] = None,
    count: int = Query(settings.DEFAULT_TREND_COUNT, ge=1, le=100),
    history: QuizHistoryService = Depends(get_quiz_history)
):
    """Recent session averages, oldest first, for charting"""
    scores = await history.get_improvement_trend(category=category, count=count)
    return ImprovementTrendResponse(category=category, scores=scores)

@router.get("/best-score/{category}", response_model=BestScoreResponse)
async def best_score(
    category: QuizCategory,
    history: QuizHistoryService = Depends(get_quiz_history)
):
    return BestScoreResponse(
        category=category,
        best_score=await history.get_best_score(category)
    )

@router.get("/topics", response_model=List[TopicPerformance])
async def topic_performance(
    category: Optional[QuizCategory] = None,
    history: QuizHistoryService = Depends(get_quiz_history)
):
    return await history.get_topic_performance(category)
