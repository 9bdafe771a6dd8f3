# ============================================================================
# Quiz Analytics Report
# ============================================================================
"""
Print quiz statistics, category trends and weak areas to the terminal.

Usage:
    python scripts/quiz_report.py --category HLD --mistakes 5
"""

import asyncio
import argparse
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from prepflow.core.database import async_session_maker
from prepflow.models.quiz import QuizCategory
from prepflow.services.quiz import QuizSessionRepository
from prepflow.services.analytics import QuizHistoryService

async def print_report(category, mistakes_limit: int):
    async with async_session_maker() as db:
        history = QuizHistoryService(QuizSessionRepository(db))
        
        overall = await history.get_overall_stats()
        print("Overall Performance")
        print(f"  Quizzes:   {overall.total_quizzes}")
        print(f"  Questions: {overall.total_questions}")
        print(f"  Average:   {overall.formatted_average_score}/10")
        if overall.best_category:
            print(f"  Best:      {overall.best_category.value}")
            print(f"  Worst:     {overall.worst_category.value}")
        
        print("\nCategories")
        for stats in await history.get_category_stats():
            print(
                f"  {stats.category.value:<4} {stats.quiz_count:>3} quizzes  "
                f"avg {stats.average_score:4.1f}  best {stats.best_score:4.1f}  {stats.trend.value}"
            )
        
        trend = await history.get_improvement_trend(category=category)
        print("\nScore Trend")
        print("  " + (" ".join(f"{score:.1f}" for score in trend) or "no completed quizzes"))
        
        print("\nAreas to Improve")
        weak_areas = await history.get_weak_areas(category)
        if not weak_areas:
            print("  No weak areas identified yet")
        for area in weak_areas:
            concepts = ", ".join(area.missed_concepts) or "-"
            print(f"  {area.topic} ({area.category}) avg {area.average_score:.1f} over {area.quiz_count} questions: {concepts}")
        
        print("\nCommon Mistakes")
        for mistake in await history.get_common_mistakes(mistakes_limit):
            print(f"  {mistake.frequency:>3}x {mistake.concept}")

def main():
    parser = argparse.ArgumentParser(description="Print quiz analytics")
    parser.add_argument("--category", choices=[c.value for c in QuizCategory], default=None)
    parser.add_argument("--mistakes", type=int, default=10, help="Number of common mistakes to list")
    args = parser.parse_args()
    
    category = QuizCategory(args.category) if args.category else None
    asyncio.run(print_report(category, args.mistakes))

if __name__ == "__main__":
    main()
