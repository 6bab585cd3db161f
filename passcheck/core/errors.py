class PasscheckError(Exception):
    """Base class for analysis engine errors."""


class HashUnavailable(PasscheckError, RuntimeError):
    """
    The host hashlib cannot produce SHA-1.
    Fatal: raised once at startup, analysis cannot run without it.
    """


class BreachCheckFailed(PasscheckError, RuntimeError):
    """
    Range lookup failed (non-200 status, network error or timeout).
    Never means "not found".
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedBreachRecord(PasscheckError, ValueError):
    """A single range response line could not be split into SUFFIX:COUNT."""
