# ============================================================================
# Quiz History & Analytics Schemas
# ============================================================================
from pydantic import BaseModel, Field, computed_field
from typing import Optional, List
from datetime import datetime
from uuid import UUID
from enum import Enum

from prepflow.models.quiz import QuizCategory

class PerformanceTrend(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"
    INSUFFICIENT_DATA = "insufficient_data"

# ----------------------------------------------------------------------------
# Sessions
# ----------------------------------------------------------------------------
class StartQuizRequest(BaseModel):
    category: QuizCategory
    topic_title: Optional[str] = None
    total_questions: int = Field(5, ge=1, le=50)

class RecordAnswerRequest(BaseModel):
    question_text: str
    score: int = Field(..., ge=1, le=10)
    topic: str = ""
    hint: str = ""
    key_points: List[str] = []
    user_answer: str = ""
    feedback: str = ""
    covered_points: List[str] = []
    missed_points: List[str] = []

class QuizQuestionResponse(BaseModel):
    id: UUID
    question_text: str
    hint: str
    key_points: List[str]
    user_answer: str
    score: int
    feedback: str
    covered_points: List[str]
    missed_points: List[str]
    answered_at: datetime
    topic: str
    
    class Config:
        from_attributes = True

class QuizSessionSummary(BaseModel):
    id: UUID
    category: str
    topic_title: Optional[str]
    started_at: datetime
    completed_at: Optional[datetime]
    total_questions: int
    average_score: float
    questions_answered: int
    is_completed: bool
    score_percentage: float
    
    class Config:
        from_attributes = True

class QuizSessionDetail(QuizSessionSummary):
    questions: List[QuizQuestionResponse] = []

# ----------------------------------------------------------------------------
# Analytics
# ----------------------------------------------------------------------------
class OverallStats(BaseModel):
    total_quizzes: int = 0
    average_score: float = 0.0
    best_category: Optional[QuizCategory] = None
    worst_category: Optional[QuizCategory] = None
    total_questions: int = 0
    
    @computed_field
    @property
    def formatted_average_score(self) -> str:
        return f"{self.average_score:.1f}"

class CategoryStats(BaseModel):
    category: QuizCategory
    quiz_count: int = 0
    average_score: float = 0.0
    best_score: float = 0.0
    trend: PerformanceTrend = PerformanceTrend.INSUFFICIENT_DATA

class WeakArea(BaseModel):
    topic: str
    category: str
    average_score: float
    quiz_count: int
    missed_concepts: List[str] = []

class CommonMistake(BaseModel):
    concept: str
    frequency: int

class TopicPerformance(BaseModel):
    topic: str
    average_score: float
    attempt_count: int
    last_attempt: Optional[datetime] = None
    trend: PerformanceTrend = PerformanceTrend.INSUFFICIENT_DATA

class ImprovementTrendResponse(BaseModel):
    category: Optional[QuizCategory] = None
    scores: List[float]

class BestScoreResponse(BaseModel):
    category: QuizCategory
    best_score: Optional[float] = None
