# ============================================================================
# Custom Exceptions
# ============================================================================
from typing import Optional

class PrepFlowException(Exception):
    """Base exception for PrepFlow"""
    def __init__(
        self,
        detail: str,
        status_code: int = 400,
        error_code: Optional[str] = None
    ):
        self.detail = detail
        self.status_code = status_code
        self.error_code = error_code or "PREPFLOW_ERROR"
        super().__init__(self.detail)

class QuizSessionNotFound(PrepFlowException):
    def __init__(self, session_id: str):
        super().__init__(
            detail=f"Quiz session not found: {session_id}",
            status_code=404,
            error_code="QUIZ_SESSION_NOT_FOUND"
        )

class QuizSessionCompleted(PrepFlowException):
    def __init__(self, session_id: str):
        super().__init__(
            detail=f"Quiz session {session_id} is already completed",
            status_code=409,
            error_code="QUIZ_SESSION_COMPLETED"
        )

class QuizSessionFull(PrepFlowException):
    def __init__(self, session_id: str, total_questions: int):
        super().__init__(
            detail=f"Quiz session {session_id} already has {total_questions} answered questions",
            status_code=409,
            error_code="QUIZ_SESSION_FULL"
        )
        self.total_questions = total_questions

class InvalidScore(PrepFlowException):
    def __init__(self, score: int):
        super().__init__(
            detail=f"Score must be between 1 and 10, got {score}",
            status_code=422,
            error_code="INVALID_SCORE"
        )

class UnknownCategory(PrepFlowException):
    def __init__(self, category: str):
        super().__init__(
            detail=f"Unknown quiz category: {category}",
            status_code=422,
            error_code="UNKNOWN_CATEGORY"
        )
