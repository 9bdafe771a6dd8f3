# ============================================================================
# Quiz History Service Tests
# ============================================================================
import pytest
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from prepflow.models.quiz import QuizCategory
from prepflow.schemas.quiz import PerformanceTrend
from prepflow.services.quiz.session_repository import QuizSessionRepository
from prepflow.services.analytics.quiz_history import QuizHistoryService

@pytest.fixture
def history(db_session):
    return QuizHistoryService(QuizSessionRepository(db_session))

class TestSessionRepository:
    """Tests for fetching sessions from the store"""
    
    @pytest.mark.asyncio
    async def test_sorting_and_filters(self, db_session, store_sessions, session_factory):
        await store_sessions([
            session_factory(category="LLD", day=0, average_score=5.0),
            session_factory(category="HLD", day=1, average_score=6.0, completed=False),
            session_factory(category="LLD", day=2, average_score=7.0),
            session_factory(category="DSA", day=3, average_score=8.0),
        ])
        repository = QuizSessionRepository(db_session)
        
        newest_first = await repository.fetch_sessions()
        oldest_first = await repository.fetch_sessions(sort_descending=False)
        lld = await repository.fetch_sessions(category=QuizCategory.LLD)
        completed = await repository.fetch_sessions(completed_only=True)
        
        assert [s.average_score for s in newest_first] == [8.0, 7.0, 6.0, 5.0]
        assert [s.average_score for s in oldest_first] == [5.0, 6.0, 7.0, 8.0]
        assert [s.average_score for s in lld] == [7.0, 5.0]
        assert all(s.is_completed for s in completed)
        assert len(completed) == 3
    
    @pytest.mark.asyncio
    async def test_limit_applies_after_filtering(self, db_session, store_sessions, session_factory):
        await store_sessions([
            session_factory(category="HLD", day=0, average_score=5.0),
            session_factory(category="HLD", day=1, average_score=6.0),
            session_factory(category="LLD", day=2, average_score=7.0),
            session_factory(category="HLD", day=3, average_score=8.0, completed=False),
        ])
        repository = QuizSessionRepository(db_session)
        
        sessions = await repository.fetch_sessions(category="HLD", completed_only=True, limit=1)
        
        assert [s.average_score for s in sessions] == [6.0]
    
    @pytest.mark.asyncio
    async def test_questions_are_loaded(self, db_session, store_sessions, session_factory):
        await store_sessions([session_factory(questions=[("Tries", 4, ["prefix"]), ("Heaps", 8, [])])])
        
        sessions = await QuizSessionRepository(db_session).fetch_sessions()
        
        assert [q.topic for q in sessions[0].questions] == ["Tries", "Heaps"]
        assert sessions[0].questions[0].missed_points == ["prefix"]
    
    @pytest.mark.asyncio
    async def test_storage_failure_returns_empty(self):
        db = MagicMock()
        db.execute = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("disk I/O error")))
        repository = QuizSessionRepository(db)
        
        assert await repository.fetch_sessions() == []
        assert await repository.get_session("missing") is None
    
    @pytest.mark.asyncio
    async def test_failure_degrades_analytics(self):
        db = MagicMock()
        db.execute = AsyncMock(side_effect=SQLAlchemyError("corrupt"))
        history = QuizHistoryService(QuizSessionRepository(db))
        
        stats = await history.get_overall_stats()
        categories = await history.get_category_stats()
        
        assert stats.total_quizzes == 0
        assert len(categories) == 3
        assert await history.get_weak_areas() == []
        assert await history.get_improvement_trend() == []

class TestQuizHistoryService:
    """Tests for the analytics query API"""
    
    @pytest.mark.asyncio
    async def test_session_lists(self, history, store_sessions, session_factory):
        await store_sessions([
            session_factory(category="LLD", day=d, average_score=float(d))
            for d in range(7)
        ] + [session_factory(category="LLD", day=10, completed=False)])
        
        everything = await history.get_all_sessions()
        recent = await history.get_recent_sessions()
        recent_two = await history.get_recent_sessions(limit=2, category=QuizCategory.LLD)
        
        assert len(everything) == 8
        assert not everything[0].is_completed
        assert [s.average_score for s in recent] == [6.0, 5.0, 4.0, 3.0, 2.0]
        assert [s.average_score for s in recent_two] == [6.0, 5.0]
    
    @pytest.mark.asyncio
    async def test_statistics(self, history, store_sessions, session_factory):
        await store_sessions([
            session_factory(category="HLD", day=0, questions=[("Caching", 4, ["ttl"]), ("Caching", 5, ["ttl"])]),
            session_factory(category="HLD", day=1, questions=[("Queues", 8, [])]),
            session_factory(category="DSA", day=2, questions=[("Graphs", 9, []), ("Graphs", 9, [])]),
        ])
        
        stats = await history.get_overall_stats()
        categories = await history.get_category_stats()
        
        assert stats.total_quizzes == 3
        assert stats.total_questions == 5
        assert stats.best_category == QuizCategory.DSA
        assert stats.worst_category == QuizCategory.HLD
        assert [c.quiz_count for c in categories] == [0, 2, 1]
        assert categories[1].average_score == pytest.approx((4.5 + 8.0) / 2)
        assert await history.get_best_score(QuizCategory.HLD) == 8.0
        assert await history.get_best_score(QuizCategory.LLD) is None
    
    @pytest.mark.asyncio
    async def test_diagnostics(self, history, store_sessions, session_factory):
        await store_sessions([
            session_factory(category="HLD", day=0, questions=[
                ("Caching", 4, ["ttl", "eviction"]), ("Caching", 5, ["ttl"]),
            ]),
            session_factory(category="LLD", day=1, questions=[
                ("SOLID", 3, ["liskov"]), ("SOLID", 2, ["liskov", "ttl"]),
            ]),
        ])
        
        weak = await history.get_weak_areas()
        weak_hld = await history.get_weak_areas(QuizCategory.HLD)
        mistakes = await history.get_common_mistakes(limit=2)
        topics = await history.get_topic_performance(QuizCategory.LLD)
        
        assert [a.topic for a in weak] == ["SOLID", "Caching"]
        assert weak[1].missed_concepts == ["ttl", "eviction"]
        assert [a.topic for a in weak_hld] == ["Caching"]
        assert [(m.concept, m.frequency) for m in mistakes] == [("ttl", 3), ("liskov", 2)]
        assert [t.topic for t in topics] == ["SOLID"]
    
    @pytest.mark.asyncio
    async def test_improvement_trend_window(self, history, store_sessions, session_factory):
        await store_sessions([
            session_factory(category="DSA", day=d, average_score=float(d % 10))
            for d in range(12)
        ])
        
        trend = await history.get_improvement_trend(category=QuizCategory.DSA, count=10)
        
        assert trend == [2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 0.0, 1.0]
    
    @pytest.mark.asyncio
    async def test_calls_are_idempotent(self, history, store_sessions, session_factory):
        await store_sessions([
            session_factory(category="LLD", day=d, questions=[("Patterns", 3 + d, ["factory"])] * 2)
            for d in range(4)
        ])
        
        assert await history.get_overall_stats() == await history.get_overall_stats()
        assert await history.get_category_stats() == await history.get_category_stats()
        assert await history.get_weak_areas() == await history.get_weak_areas()
        assert await history.get_common_mistakes() == await history.get_common_mistakes()
        assert await history.get_improvement_trend() == await history.get_improvement_trend()
        
        categories = await history.get_category_stats()
        assert categories[0].trend == PerformanceTrend.IMPROVING
