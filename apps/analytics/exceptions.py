"""
Domain exceptions for analytics app.

Exception Hierarchy:
    AnalyticsServiceError (base)
    ├── EmptyQuestionError
    └── AnalystUnavailableError

Usage:
    from apps.analytics.exceptions import AnalystUnavailableError

    try:
        answer = ask_analyst(question)
    except AnalystUnavailableError as e:
        return Response({'error': str(e)}, status=502)
"""


class AnalyticsServiceError(Exception):
    """Base exception for all analytics service errors."""

    pass


class EmptyQuestionError(AnalyticsServiceError):
    """Raised when the analyst is asked a blank question."""

    pass


class AnalystUnavailableError(AnalyticsServiceError):
    """
    Raised when the language model call fails for any reason.

    The message is always the generic user-facing text; details go to the
    log only.
    """

    pass
