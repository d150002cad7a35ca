"""
Application Errors
Exceptions raised by services, games and views.
"""


class WordwiseError(Exception):
    """Base class for application errors"""


class ContentUnavailableError(WordwiseError):
    """The content service could not be reached or failed mid-request."""


class InvalidTransitionError(WordwiseError):
    """An operation was requested in a state that does not allow it."""


class SessionNotFoundError(WordwiseError):
    """No practice session of the requested kind is running."""
