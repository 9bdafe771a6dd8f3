# ============================================================================
# Seed Quiz History
# ============================================================================
"""
Script to fill the database with sample graded quiz sessions so the
analytics endpoints have something to show.

Usage:
    python scripts/seed_quiz_history.py --sessions 20 --seed 7
"""

import asyncio
import argparse
import random
import sys
import os

# Ensure the project root is in the python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from prepflow.core.database import async_session_maker, engine, Base
from prepflow.models.quiz import QuizCategory
from prepflow.services.quiz import QuizSessionRecorder

# Sample topics and the key points a good answer covers
SAMPLE_TOPICS = {
    QuizCategory.LLD: {
        "SOLID Principles": ["single responsibility", "open/closed", "liskov substitution", "dependency inversion"],
        "Design Patterns": ["factory", "observer", "strategy", "decorator"],
        "Parking Lot Design": ["class hierarchy", "spot allocation", "concurrency"],
    },
    QuizCategory.HLD: {
        "Caching": ["eviction policy", "ttl", "cache stampede", "write-through"],
        "Sharding": ["shard key", "rebalancing", "hot partitions"],
        "Message Queues": ["at-least-once delivery", "ordering", "backpressure"],
    },
    QuizCategory.DSA: {
        "Graphs": ["bfs", "dijkstra", "topological sort"],
        "Dynamic Programming": ["overlapping subproblems", "memoization", "state definition"],
        "Heaps": ["heapify", "top-k", "priority queue"],
    },
}

async def seed_quiz_history(num_sessions: int, questions_per_session: int, seed: int):
    """Create completed quiz sessions with random grades"""
    rng = random.Random(seed)
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    async with async_session_maker() as db:
        recorder = QuizSessionRecorder(db)
        
        for _ in range(num_sessions):
            category = rng.choice(list(QuizCategory))
            topics = SAMPLE_TOPICS[category]
            session = await recorder.start_session(category, total_questions=questions_per_session)
            
            for i in range(questions_per_session):
                topic = rng.choice(list(topics))
                key_points = topics[topic]
                score = rng.randint(2, 10)
                # Weaker answers miss more of the key points
                missed_count = round(len(key_points) * (10 - score) / 10)
                missed = rng.sample(key_points, missed_count)
                await recorder.record_answer(
                    session.id,
                    question_text=f"Question {i + 1}: explain {topic.lower()}",
                    score=score,
                    topic=topic,
                    key_points=key_points,
                    user_answer="(sample answer)",
                    feedback="Generated sample grade",
                    covered_points=[p for p in key_points if p not in missed],
                    missed_points=missed
                )
            
            await recorder.complete_session(session.id)
        
        await db.commit()
    
    print(f"Seeded {num_sessions} quiz sessions")

def main():
    parser = argparse.ArgumentParser(description="Seed sample quiz history")
    parser.add_argument("--sessions", type=int, default=15, help="Number of quiz sessions")
    parser.add_argument("--questions", type=int, default=5, help="Questions per session")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    args = parser.parse_args()
    
    asyncio.run(seed_quiz_history(args.sessions, args.questions, args.seed))

if __name__ == "__main__":
    main()
