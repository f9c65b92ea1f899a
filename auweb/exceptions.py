"""
Every exception that might be externally visible to users is a subclass of
AuwebException.

The parsing and prettifying core never raises: malformed input is reported
through warnings or returned verbatim. Exceptions are reserved for problems
with the user's own configuration.
"""


class AuwebException(Exception):
    """
    Base class for all exceptions thrown by auweb.
    """

    def __init__(self, message=None):
        super().__init__(message)


class OptionsError(AuwebException):
    pass
