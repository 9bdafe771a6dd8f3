from prepflow.models.quiz import QuizSession, QuizQuestionRecord, QuizCategory

__all__ = ["QuizSession", "QuizQuestionRecord", "QuizCategory"]
