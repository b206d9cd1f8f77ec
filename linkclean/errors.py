"""Exception hierarchy shared by the resolver and the cleaner.

Every error carries an explicit ``retryable`` flag.  The resolver's backoff
loop consults that flag and nothing else, so an error is only ever retried
when the code that raised it said so.
"""

from __future__ import annotations


class LinkCleanError(Exception):
    """Base class for every expected failure of the resolve-then-clean pipeline."""

    retryable: bool = False


# ---------------------------------------------------------------------------
# Cleaning errors
# ---------------------------------------------------------------------------

class CleanUrlError(LinkCleanError):
    """The URL could not be turned into a canonical form."""


class ParseError(CleanUrlError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"invalid URL: {detail}")
        self.detail = detail


class UnsupportedSchemeError(CleanUrlError):
    def __init__(self, scheme: str) -> None:
        super().__init__(f"unsupported URL scheme: {scheme!r}")
        self.scheme = scheme


class UnknownDomainError(CleanUrlError):
    def __init__(self, host: str) -> None:
        super().__init__(f"unknown domain: {host!r} is not under a public suffix")
        self.host = host


class UnsupportedHostError(CleanUrlError):
    def __init__(self, domain: str) -> None:
        super().__init__(f"unsupported host: no cleaning rule for {domain!r}")
        self.domain = domain


class UnsupportedPathError(CleanUrlError):
    def __init__(self, path: str) -> None:
        super().__init__(f"unsupported URL path: {path!r}")
        self.path = path


class PathSegmentsError(CleanUrlError):
    def __init__(self, url: str) -> None:
        super().__init__(f"URL has no hierarchical path: {url!r}")
        self.url = url


# ---------------------------------------------------------------------------
# Resolution errors
# ---------------------------------------------------------------------------

class ResolveError(LinkCleanError):
    """The share link could not be followed to its destination."""


class TransportError(ResolveError):
    """An HTTP request failed below the HTTP status level (DNS, TCP, TLS, ...)."""

    def __init__(self, url: str, cause: Exception, retryable: bool = False) -> None:
        detail = str(cause) or type(cause).__name__
        super().__init__(f"request to {url!r} failed: {detail}")
        self.url = url
        self.cause = cause
        self.retryable = retryable


class TooManyMetaRefreshError(ResolveError):
    def __init__(self, url: str, limit: int) -> None:
        super().__init__(f"too many meta refresh redirects (limit {limit}) at {url!r}")
        self.url = url
        self.limit = limit


# ---------------------------------------------------------------------------
# Bugs
# ---------------------------------------------------------------------------

class RuleInvariantError(RuntimeError):
    """A platform rule reached a URL shape it has no policy for.

    Not a :class:`LinkCleanError`: this signals a gap in a rule, not a bad
    input, and should be reported upstream rather than handled.
    """
