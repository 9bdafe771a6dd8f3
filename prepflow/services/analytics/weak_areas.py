# ============================================================================
# Weak Area Detection
# ============================================================================
"""
Topic level diagnostics built from individual question records.

Unlike the session statistics, topics are scored per question: a topic's
average is the mean of the 1-10 grades of every question asked about it.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Sequence
import logging

from prepflow.models.quiz import QuizSession, category_value, normalize_topic
from prepflow.schemas.quiz import WeakArea, TopicPerformance
from prepflow.services.analytics.aggregation import mean
from prepflow.services.analytics.mistakes import most_frequent
from prepflow.services.analytics.trend import classify_trend

logger = logging.getLogger(__name__)

WEAK_AREA_SCORE_THRESHOLD = 7.0
WEAK_AREA_MIN_QUESTIONS = 2
MISSED_CONCEPTS_PER_AREA = 3


@dataclass
class TopicRecords:
    """Question data gathered for one topic"""
    topic: str
    category: str  # Category of the first session seen with this topic
    scores: List[int] = field(default_factory=list)
    missed_points: List[str] = field(default_factory=list)
    answered_at: List[datetime] = field(default_factory=list)
    
    @property
    def average_score(self) -> float:
        return mean(self.scores)
    
    @property
    def count(self) -> int:
        return len(self.scores)


def group_by_topic(sessions: Sequence[QuizSession], category=None) -> Dict[str, TopicRecords]:
    """Group question records of completed sessions by normalized topic"""
    wanted = category_value(category) if category is not None else None
    topics: Dict[str, TopicRecords] = {}
    
    for session in sessions:
        if not session.is_completed:
            continue
        if wanted is not None and session.category != wanted:
            continue
        for question in session.questions:
            topic = normalize_topic(question.topic)
            records = topics.get(topic)
            if records is None:
                records = topics[topic] = TopicRecords(topic=topic, category=session.category)
            records.scores.append(question.score)
            records.missed_points.extend(question.missed_points)
            records.answered_at.append(question.answered_at)
    
    return topics


def find_weak_areas(sessions: Sequence[QuizSession], category=None) -> List[WeakArea]:
    """Topics scoring below threshold with enough questions, weakest first"""
    weak_areas = []
    for records in group_by_topic(sessions, category).values():
        average = records.average_score
        if average >= WEAK_AREA_SCORE_THRESHOLD or records.count < WEAK_AREA_MIN_QUESTIONS:
            continue
        weak_areas.append(WeakArea(
            topic=records.topic,
            category=records.category,
            average_score=average,
            quiz_count=records.count,
            missed_concepts=most_frequent(records.missed_points, MISSED_CONCEPTS_PER_AREA)
        ))
    
    logger.debug(f"Found {len(weak_areas)} weak areas (category={category})")
    return sorted(weak_areas, key=lambda area: area.average_score)


def topic_performance(sessions: Sequence[QuizSession], category=None) -> List[TopicPerformance]:
    """Average, volume and trend of every topic, weakest first"""
    performance = []
    for records in group_by_topic(sessions, category).values():
        # Trend follows answer time, ties keep session order
        timeline = sorted(zip(records.answered_at, records.scores), key=lambda pair: pair[0])
        performance.append(TopicPerformance(
            topic=records.topic,
            average_score=records.average_score,
            attempt_count=records.count,
            last_attempt=max(records.answered_at),
            trend=classify_trend([score for _, score in timeline])
        ))
    return sorted(performance, key=lambda item: item.average_score)
