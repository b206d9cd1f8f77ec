"""Classify a URL by registrable domain and apply the matching platform rule."""

from __future__ import annotations

import sys

from linkclean.cleaner.domains import registrable_domain
from linkclean.cleaner.rules import PLATFORM_DOMAINS, RULES, Platform
from linkclean.cleaner.url import ParsedUrl
from linkclean.config import settings
from linkclean.errors import (
    UnknownDomainError,
    UnsupportedHostError,
    UnsupportedSchemeError,
)

_SUPPORTED_SCHEMES = ("http", "https")


def select_platform(domain: str, generic_fallback: bool = False) -> Platform:
    """Return the platform registered for *domain*.

    Raises:
        UnsupportedHostError: If no rule is registered and *generic_fallback*
            is off.
    """
    platform = PLATFORM_DOMAINS.get(domain)
    if platform is not None:
        return platform
    if generic_fallback:
        return Platform.GENERIC
    raise UnsupportedHostError(domain)


def clean_url(url: str, generic_fallback: bool = False) -> str:
    """Return the canonical, tracking-free form of *url*.

    Raises:
        ParseError: *url* is not a valid absolute URL.
        UnsupportedSchemeError: The scheme is neither http nor https.
        UnknownDomainError: The host is not under a public suffix.
        UnsupportedHostError: The domain has no cleaning rule.
        UnsupportedPathError: The platform does not recognise the path.
    """
    parsed = ParsedUrl.parse(url)

    if parsed.scheme not in _SUPPORTED_SCHEMES:
        raise UnsupportedSchemeError(parsed.scheme)

    domain = registrable_domain(parsed.host)
    if domain is None:
        raise UnknownDomainError(parsed.host)

    platform = select_platform(domain, generic_fallback=generic_fallback)
    if settings.verbose:
        print(f"[clean] {domain} -> {platform.value} rule", file=sys.stderr)

    RULES[platform](parsed)
    return str(parsed)
