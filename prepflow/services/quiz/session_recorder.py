# ============================================================================
# Quiz Session Recorder
# ============================================================================
"""
Write side of the quiz flow: a session is started, graded answers are
appended one by one, then it is completed and its average score fixed.
Completed sessions are never modified again.
"""
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy import select
from uuid import UUID
import logging

from prepflow.core.exceptions import (
    QuizSessionNotFound, QuizSessionCompleted, QuizSessionFull, InvalidScore, UnknownCategory
)
from prepflow.models.quiz import QuizSession, QuizQuestionRecord, QuizCategory, utcnow

logger = logging.getLogger(__name__)

MIN_SCORE = 1
MAX_SCORE = 10


class QuizSessionRecorder:
    """Creates, fills, completes and deletes quiz sessions"""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def start_session(
        self,
        category: QuizCategory,
        topic_title: Optional[str] = None,
        total_questions: int = 5
    ) -> QuizSession:
        category_type = QuizCategory.from_value(category)
        if category_type is None:
            raise UnknownCategory(str(category))
        
        session = QuizSession(
            category=category_type.value,
            topic_title=topic_title,
            started_at=utcnow(),
            total_questions=total_questions,
            average_score=0.0,
            questions_answered=0,
            questions=[]
        )
        self.db.add(session)
        await self.db.flush()
        
        logger.info(f"Started {session.category} quiz session {session.id}")
        return session
    
    async def record_answer(
        self,
        session_id: UUID,
        question_text: str,
        score: int,
        topic: str = "",
        hint: str = "",
        key_points: Optional[List[str]] = None,
        user_answer: str = "",
        feedback: str = "",
        covered_points: Optional[List[str]] = None,
        missed_points: Optional[List[str]] = None
    ) -> QuizQuestionRecord:
        """Append a graded question to an in-progress session"""
        if not MIN_SCORE <= score <= MAX_SCORE:
            raise InvalidScore(score)
        
        session = await self._get_open_session(session_id)
        if session.questions_answered >= session.total_questions:
            raise QuizSessionFull(str(session_id), session.total_questions)
        
        record = QuizQuestionRecord(
            position=len(session.questions),
            question_text=question_text,
            hint=hint,
            key_points=list(key_points or []),
            user_answer=user_answer,
            score=score,
            feedback=feedback,
            covered_points=list(covered_points or []),
            missed_points=list(missed_points or []),
            answered_at=utcnow(),
            topic=topic
        )
        session.questions.append(record)
        session.questions_answered = len(session.questions)
        await self.db.flush()
        
        logger.debug(f"Recorded answer {record.position + 1}/{session.total_questions} for session {session_id}")
        return record
    
    async def complete_session(self, session_id: UUID) -> QuizSession:
        """Close a session and fix its average score"""
        session = await self._get_open_session(session_id)
        
        scores = [q.score for q in session.questions]
        session.average_score = sum(scores) / len(scores) if scores else 0.0
        session.questions_answered = len(scores)
        session.completed_at = utcnow()
        await self.db.flush()
        
        logger.info(
            f"Completed quiz session {session_id}: "
            f"{session.questions_answered} questions, average {session.average_score:.1f}"
        )
        return session
    
    async def delete_session(self, session_id: UUID) -> None:
        """Delete a session together with its question records"""
        session = await self._get_session(session_id)
        await self.db.delete(session)
        await self.db.flush()
        logger.info(f"Deleted quiz session {session_id}")
    
    async def _get_session(self, session_id: UUID) -> QuizSession:
        result = await self.db.execute(
            select(QuizSession)
            .options(selectinload(QuizSession.questions))
            .where(QuizSession.id == session_id)
        )
        session = result.scalar_one_or_none()
        if session is None:
            raise QuizSessionNotFound(str(session_id))
        return session
    
    async def _get_open_session(self, session_id: UUID) -> QuizSession:
        session = await self._get_session(session_id)
        if session.is_completed:
            raise QuizSessionCompleted(str(session_id))
        return session
