"""Resolve-then-clean pipeline: share link in, canonical URL out."""

from __future__ import annotations

from typing import Optional

from linkclean.cleaner import clean_url, registrable_domain
from linkclean.cleaner.url import ParsedUrl
from linkclean.config import settings
from linkclean.resolver import resolve
from linkclean.resolver.identity import IdentityProvider, random_desktop_user_agent


def canonicalize(
    url: str,
    *,
    resolve_redirects: bool = True,
    generic_fallback: Optional[bool] = None,
    identity: IdentityProvider = random_desktop_user_agent,
) -> str:
    """Return the canonical, tracking-free form of the share link *url*.

    With *resolve_redirects* off the URL is cleaned as given, without any
    network access.  *generic_fallback* defaults to
    ``settings.generic_fallback``.

    Raises:
        LinkCleanError: Any resolution or cleaning failure.
    """
    if generic_fallback is None:
        generic_fallback = settings.generic_fallback

    resolved = resolve(url, identity=identity) if resolve_redirects else url
    return clean_url(resolved, generic_fallback=generic_fallback)


def format_url(url: str, *, strip_scheme: bool = False, strip_subdomain: bool = False) -> str:
    """Shorten an already-cleaned URL for display.

    ``strip_subdomain`` replaces the host with its registrable domain
    (``www.reddit.com`` -> ``reddit.com``); ``strip_scheme`` drops the
    leading ``https://``.
    """
    parsed = ParsedUrl.parse(url)
    if strip_subdomain:
        parsed.host = registrable_domain(parsed.host) or parsed.host

    formatted = str(parsed)
    if strip_scheme:
        formatted = formatted[len(parsed.scheme) + len("://"):]
    return formatted
