"""
token holds the opaque API token handed to service clients.
"""
import re

from .error import ConfigError

__all__ = ("BearerToken",)


_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9\-\._~\+/]+=*")


class BearerToken:
    """An opaque bearer token. Only the character set of the value is
    checked; the token is never verified against its issuer.

    `str()` returns the raw token, `repr()` keeps it out of logs and
    tracebacks.
    """

    __slots__ = ("_value",)

    def __init__(self, value):
        # YAML types an all-digit token as an int
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str):
            raise ConfigError(
                f"apiToken should be a string, got '{type(value).__name__}'"
            )
        if not _TOKEN_PATTERN.fullmatch(value):
            raise ConfigError("apiToken is not a valid bearer token")

        object.__setattr__(self, "_value", value)

    @classmethod
    def of(cls, value):
        """Return `value` as a BearerToken, or None if it is None."""
        if value is None or isinstance(value, cls):
            return value
        return cls(value)

    @property
    def value(self):
        return self._value

    def __setattr__(self, name, value):
        raise AttributeError("BearerToken is read-only")

    def __eq__(self, other):
        if not isinstance(other, BearerToken):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash((BearerToken, self._value))

    def __str__(self):
        return self._value

    def __repr__(self):
        return "BearerToken(<redacted>)"
