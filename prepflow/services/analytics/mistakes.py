# ============================================================================
# Missed Concept Ranking
# ============================================================================
from collections import Counter
from typing import Iterable, List, Sequence, Tuple

from prepflow.models.quiz import QuizSession
from prepflow.schemas.quiz import CommonMistake


def rank_by_frequency(items: Iterable[str], limit: int) -> List[Tuple[str, int]]:
    """
    Most frequent items with their counts, highest first.
    
    Equal counts keep the order in which items were first seen.
    """
    if limit <= 0:
        return []
    counts = Counter(items)
    # sorted() is stable and Counter keeps first-insertion order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return ranked[:limit]


def most_frequent(items: Iterable[str], limit: int) -> List[str]:
    return [item for item, _ in rank_by_frequency(items, limit)]


def common_mistakes(sessions: Sequence[QuizSession], limit: int = 10) -> List[CommonMistake]:
    """Missed points pooled over every question of every completed session"""
    missed = (
        point
        for session in sessions
        if session.is_completed
        for question in session.questions
        for point in question.missed_points
    )
    return [
        CommonMistake(concept=concept, frequency=frequency)
        for concept, frequency in rank_by_frequency(missed, limit)
    ]
