# ============================================================================
# Quiz History Models
# ============================================================================
from sqlalchemy import Column, String, Integer, Float, DateTime, ForeignKey
from sqlalchemy import Text, JSON, Uuid
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from typing import Optional
import uuid
import enum
from prepflow.core.database import Base

GENERAL_TOPIC = "General"

class QuizCategory(str, enum.Enum):
    """Curriculum tracks, declared in canonical order"""
    LLD = "LLD"
    HLD = "HLD"
    DSA = "DSA"

    @classmethod
    def from_value(cls, value: str) -> Optional["QuizCategory"]:
        try:
            return cls(value)
        except ValueError:
            return None

def category_value(category) -> str:
    """Plain string value of a category filter given as enum or string"""
    return category.value if isinstance(category, QuizCategory) else category

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

def normalize_topic(topic: Optional[str]) -> str:
    """Empty topics are bucketed under 'General'"""
    return topic if topic else GENERAL_TOPIC

class QuizSession(Base):
    __tablename__ = "quiz_sessions"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    category = Column(String(10), nullable=False, index=True)  # LLD, HLD, DSA
    topic_title = Column(String(255), nullable=True)  # None for a random/mixed quiz
    
    started_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    
    total_questions = Column(Integer, default=5, nullable=False)
    average_score = Column(Float, default=0.0, nullable=False)  # 0-10 scale
    questions_answered = Column(Integer, default=0, nullable=False)
    
    questions = relationship(
        "QuizQuestionRecord",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="QuizQuestionRecord.position",
    )
    
    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None
    
    @property
    def score_percentage(self) -> float:
        return (self.average_score or 0.0) / 10.0 * 100.0
    
    @property
    def category_type(self) -> Optional[QuizCategory]:
        return QuizCategory.from_value(self.category)
    
    def __repr__(self):
        state = "completed" if self.is_completed else "in_progress"
        return f"<QuizSession {self.id} {self.category} ({state})>"

class QuizQuestionRecord(Base):
    __tablename__ = "quiz_question_records"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    session_id = Column(Uuid, ForeignKey("quiz_sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, default=0, nullable=False)  # Order within the session
    
    question_text = Column(Text, nullable=False)
    hint = Column(Text, default="")
    key_points = Column(JSON, default=list)  # Expected concepts
    
    user_answer = Column(Text, default="")
    score = Column(Integer, nullable=False)  # 1-10 from the grading service
    feedback = Column(Text, default="")
    covered_points = Column(JSON, default=list)
    missed_points = Column(JSON, default=list)
    
    answered_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    topic = Column(String(255), default="")
    
    session = relationship("QuizSession", back_populates="questions")
    
    @property
    def score_percentage(self) -> float:
        return self.score / 10.0 * 100.0
    
    def __repr__(self):
        return f"<QuizQuestionRecord {self.id} ({self.score}/10)>"
