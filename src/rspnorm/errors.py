"""Exceptions raised by rspnorm."""


class RspNormError(Exception):
    """Base class for all rspnorm errors."""
    pass


class PolicyError(RspNormError, ValueError):
    """Raised when a language-version policy or its configuration is invalid."""
    pass
