# ============================================================================
# Quiz Session Repository
# ============================================================================
"""
Read access to the quiz session store.

Every fetch returns a fully loaded snapshot (sessions plus their question
records) so analytics can run over it without touching the database again.
Storage failures never escape this class: they are logged and surface as an
empty result, so stats screens always have something to render.
"""
from typing import List, Optional, Union
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload
from sqlalchemy import select
from uuid import UUID
import logging

from prepflow.models.quiz import QuizSession, QuizCategory, category_value

logger = logging.getLogger(__name__)

CategoryFilter = Union[QuizCategory, str]


class QuizSessionRepository:
    """Fetches quiz sessions from the store"""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def fetch_sessions(
        self,
        category: Optional[CategoryFilter] = None,
        completed_only: bool = False,
        sort_descending: bool = True,
        limit: Optional[int] = None
    ) -> List[QuizSession]:
        """
        Fetch sessions ordered by start time.
        
        Args:
            category: Exact category match, None for all categories
            completed_only: Skip sessions that have no completion time
            sort_descending: Newest first when True, oldest first otherwise
            limit: Cap applied after filtering and sorting
        """
        order = QuizSession.started_at.desc() if sort_descending else QuizSession.started_at.asc()
        query = (
            select(QuizSession)
            .options(selectinload(QuizSession.questions))
            .order_by(order)
        )
        
        if category is not None:
            query = query.where(QuizSession.category == category_value(category))
        if completed_only:
            query = query.where(QuizSession.completed_at.is_not(None))
        if limit is not None:
            query = query.limit(max(limit, 0))
        
        try:
            result = await self.db.execute(query)
            sessions = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Error fetching quiz sessions: {e}")
            return []
        
        logger.debug(
            f"Fetched {len(sessions)} sessions "
            f"(category={category}, completed_only={completed_only})"
        )
        return sessions
    
    async def get_session(self, session_id: UUID) -> Optional[QuizSession]:
        """Fetch one session with its questions, None if missing"""
        query = (
            select(QuizSession)
            .options(selectinload(QuizSession.questions))
            .where(QuizSession.id == session_id)
        )
        try:
            result = await self.db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching quiz session {session_id}: {e}")
            return None
