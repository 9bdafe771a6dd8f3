from prepflow.services.quiz.session_repository import QuizSessionRepository
from prepflow.services.quiz.session_recorder import QuizSessionRecorder

__all__ = ["QuizSessionRepository", "QuizSessionRecorder"]
