# ============================================================================
# Test Configuration & Fixtures
# ============================================================================
import pytest
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator, List, Optional, Sequence, Tuple
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from prepflow.main import app
from prepflow.core.database import Base, get_db
from prepflow.models.quiz import QuizSession, QuizQuestionRecord

# Test database URL (use SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///./test.db"

BASE_TIME = datetime(2026, 1, 5, 9, 0, tzinfo=timezone.utc)

# Create test engine
test_engine = create_async_engine(
    TEST_DATABASE_URL,
    echo=False,
    poolclass=NullPool,
)

test_session_maker = async_sessionmaker(
    test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# (topic, score, missed_points)
QuestionSpec = Tuple[str, int, Sequence[str]]

def build_session(
    category: str = "LLD",
    day: int = 0,
    questions: Sequence[QuestionSpec] = (),
    average_score: Optional[float] = None,
    completed: bool = True,
    total_questions: Optional[int] = None,
) -> QuizSession:
    """
    Build a transient quiz session.
    
    `day` offsets the start time from BASE_TIME, `average_score` defaults to
    the mean of the question scores.
    """
    started_at = BASE_TIME + timedelta(days=day)
    records = [
        QuizQuestionRecord(
            position=i,
            question_text=f"Question {i + 1} on {topic or 'anything'}",
            hint="",
            key_points=list(missed),
            user_answer="answer",
            score=score,
            feedback="",
            covered_points=[],
            missed_points=list(missed),
            answered_at=started_at + timedelta(minutes=i),
            topic=topic,
        )
        for i, (topic, score, missed) in enumerate(questions)
    ]
    if average_score is None:
        average_score = sum(r.score for r in records) / len(records) if records else 0.0
    return QuizSession(
        category=category,
        topic_title=None,
        started_at=started_at,
        completed_at=started_at + timedelta(minutes=30) if completed else None,
        total_questions=total_questions if total_questions is not None else max(len(records), 5),
        average_score=average_score,
        questions_answered=len(records),
        questions=records,
    )

@pytest.fixture
def session_factory():
    """Factory for transient quiz sessions"""
    return build_session

@pytest.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test"""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    async with test_session_maker() as session:
        yield session
    
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

@pytest.fixture
def store_sessions(db_session: AsyncSession):
    """Persist transient sessions into the test database"""
    async def _store(sessions: List[QuizSession]) -> List[QuizSession]:
        db_session.add_all(sessions)
        await db_session.commit()
        return sessions
    return _store

@pytest.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with overridden database"""
    async def override_get_db():
        yield db_session
    
    app.dependency_overrides[get_db] = override_get_db
    
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    
    app.dependency_overrides.clear()
