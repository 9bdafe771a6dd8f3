# ============================================================================
# Score Trend Classification
# ============================================================================
"""
Direction of a score series from the slope of its least-squares line.

Points are assumed equally spaced, so x is the position in the series rather
than a timestamp.
"""
from typing import List, Optional, Sequence

from prepflow.models.quiz import QuizSession, category_value
from prepflow.schemas.quiz import PerformanceTrend

TREND_MIN_POINTS = 3
TREND_SLOPE_THRESHOLD = 0.3


def regression_slope(scores: Sequence[float]) -> Optional[float]:
    """OLS slope of score against index, None when it is undefined"""
    n = len(scores)
    sum_x = sum(range(n))
    sum_y = sum(scores)
    sum_xy = sum(i * y for i, y in enumerate(scores))
    sum_x2 = sum(i * i for i in range(n))
    
    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        return None
    return (n * sum_xy - sum_x * sum_y) / denominator


def classify_trend(scores: Sequence[float]) -> PerformanceTrend:
    """Classify a chronologically ascending score series"""
    if len(scores) < TREND_MIN_POINTS:
        return PerformanceTrend.INSUFFICIENT_DATA
    
    slope = regression_slope(scores)
    if slope is None:
        return PerformanceTrend.STABLE
    
    if slope > TREND_SLOPE_THRESHOLD:
        return PerformanceTrend.IMPROVING
    elif slope < -TREND_SLOPE_THRESHOLD:
        return PerformanceTrend.DECLINING
    return PerformanceTrend.STABLE


def improvement_trend(
    sessions: Sequence[QuizSession],
    category=None,
    count: int = 10
) -> List[float]:
    """
    Average scores of the most recent completed sessions, oldest first.
    
    When more than `count` sessions qualify the oldest ones are dropped.
    """
    if count <= 0:
        return []
    
    eligible = [s for s in sessions if s.is_completed]
    if category is not None:
        wanted = category_value(category)
        eligible = [s for s in eligible if s.category == wanted]
    
    eligible.sort(key=lambda s: s.started_at)
    return [s.average_score for s in eligible[-count:]]
