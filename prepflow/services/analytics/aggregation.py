# ============================================================================
# Quiz Statistics Aggregation
# ============================================================================
"""
Overall and per-category statistics over completed quiz sessions.

Sessions are the unit of averaging: every figure here is a mean of session
averages, not of the individual question scores.
"""
from typing import Dict, List, Optional, Sequence

from prepflow.models.quiz import QuizSession, QuizCategory, category_value
from prepflow.schemas.quiz import OverallStats, CategoryStats
from prepflow.services.analytics.trend import classify_trend

CATEGORY_TREND_WINDOW = 5


def completed_sessions(sessions: Sequence[QuizSession]) -> List[QuizSession]:
    return [s for s in sessions if s.is_completed]


def mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def _group_by_category(sessions: Sequence[QuizSession]) -> Dict[QuizCategory, List[QuizSession]]:
    """Completed sessions per category, canonical order, empty lists kept"""
    groups = {category: [] for category in QuizCategory}
    for session in completed_sessions(sessions):
        category = session.category_type
        if category is not None:
            groups[category].append(session)
    return groups


def compute_overall_stats(sessions: Sequence[QuizSession]) -> OverallStats:
    """Totals, mean score and best/worst category across completed sessions"""
    completed = completed_sessions(sessions)
    if not completed:
        return OverallStats()
    
    average_score = mean([s.average_score for s in completed])
    
    # Only categories with at least one completed quiz compete for best/worst.
    # max/min keep the first of equal candidates, i.e. canonical order.
    category_means = [
        (category, mean([s.average_score for s in group]))
        for category, group in _group_by_category(completed).items()
        if group
    ]
    best = max(category_means, key=lambda item: item[1], default=None)
    worst = min(category_means, key=lambda item: item[1], default=None)
    
    return OverallStats(
        total_quizzes=len(completed),
        average_score=average_score,
        best_category=best[0] if best else None,
        worst_category=worst[0] if worst else None,
        total_questions=sum(s.questions_answered for s in completed)
    )


def compute_category_stats(sessions: Sequence[QuizSession]) -> List[CategoryStats]:
    """One entry per category, in canonical order"""
    stats = []
    for category, group in _group_by_category(sessions).items():
        if not group:
            stats.append(CategoryStats(category=category))
            continue
        
        scores = [s.average_score for s in group]
        recent = sorted(group, key=lambda s: s.started_at)[-CATEGORY_TREND_WINDOW:]
        
        stats.append(CategoryStats(
            category=category,
            quiz_count=len(group),
            average_score=mean(scores),
            best_score=max(scores),
            trend=classify_trend([s.average_score for s in recent])
        ))
    return stats


def best_score(sessions: Sequence[QuizSession], category) -> Optional[float]:
    """Highest session average in a category, None without completed quizzes"""
    wanted = category_value(category)
    scores = [s.average_score for s in completed_sessions(sessions) if s.category == wanted]
    return max(scores) if scores else None
