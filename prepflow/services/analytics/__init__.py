from prepflow.services.analytics.aggregation import (
    compute_overall_stats,
    compute_category_stats,
    best_score,
)
from prepflow.services.analytics.trend import (
    classify_trend,
    regression_slope,
    improvement_trend,
)
from prepflow.services.analytics.weak_areas import find_weak_areas, topic_performance
from prepflow.services.analytics.mistakes import common_mistakes
from prepflow.services.analytics.quiz_history import QuizHistoryService

__all__ = [
    "compute_overall_stats",
    "compute_category_stats",
    "best_score",
    "classify_trend",
    "regression_slope",
    "improvement_trend",
    "find_weak_areas",
    "topic_performance",
    "common_mistakes",
    "QuizHistoryService",
]
