# ============================================================================
# Quiz History Service
# ============================================================================
"""
Query API over the quiz history.

Each call fetches its own snapshot from the repository and hands it to the
pure analytics functions, so two calls may see slightly different data but
none of them ever writes to the store.
"""
from typing import List, Optional
import logging

from prepflow.models.quiz import QuizSession
from prepflow.schemas.quiz import (
    OverallStats, CategoryStats, WeakArea, CommonMistake, TopicPerformance
)
from prepflow.services.quiz.session_repository import QuizSessionRepository, CategoryFilter
from prepflow.services.analytics.aggregation import (
    compute_overall_stats, compute_category_stats, best_score
)
from prepflow.services.analytics.mistakes import common_mistakes
from prepflow.services.analytics.trend import improvement_trend
from prepflow.services.analytics.weak_areas import find_weak_areas, topic_performance

logger = logging.getLogger(__name__)


class QuizHistoryService:
    """Quiz history lookups and analytics for the presentation layer"""
    
    def __init__(self, repository: QuizSessionRepository):
        self.repository = repository
    
    # ------------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------------
    async def get_all_sessions(self, category: Optional[CategoryFilter] = None) -> List[QuizSession]:
        """All sessions, newest first"""
        return await self.repository.fetch_sessions(category=category)
    
    async def get_recent_sessions(
        self,
        limit: int = 5,
        category: Optional[CategoryFilter] = None
    ) -> List[QuizSession]:
        """Most recent completed sessions, newest first"""
        return await self.repository.fetch_sessions(
            category=category, completed_only=True, limit=limit
        )
    
    # ------------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------------
    async def get_overall_stats(self) -> OverallStats:
        sessions = await self._completed()
        return compute_overall_stats(sessions)
    
    async def get_category_stats(self) -> List[CategoryStats]:
        sessions = await self._completed()
        return compute_category_stats(sessions)
    
    async def get_best_score(self, category: CategoryFilter) -> Optional[float]:
        sessions = await self._completed(category)
        return best_score(sessions, category)
    
    # ------------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------------
    async def get_weak_areas(self, category: Optional[CategoryFilter] = None) -> List[WeakArea]:
        sessions = await self._completed(category)
        return find_weak_areas(sessions, category)
    
    async def get_common_mistakes(self, limit: int = 10) -> List[CommonMistake]:
        sessions = await self._completed()
        return common_mistakes(sessions, limit)
    
    async def get_topic_performance(self, category: Optional[CategoryFilter] = None) -> List[TopicPerformance]:
        sessions = await self._completed(category)
        return topic_performance(sessions, category)
    
    async def get_improvement_trend(
        self,
        category: Optional[CategoryFilter] = None,
        count: int = 10
    ) -> List[float]:
        """Session averages oldest first, capped to the newest `count`"""
        sessions = await self.repository.fetch_sessions(
            category=category, completed_only=True, sort_descending=False
        )
        return improvement_trend(sessions, category, count)
    
    async def _completed(self, category: Optional[CategoryFilter] = None) -> List[QuizSession]:
        sessions = await self.repository.fetch_sessions(category=category, completed_only=True)
        logger.debug(f"Analysing {len(sessions)} completed sessions (category={category})")
        return sessions
