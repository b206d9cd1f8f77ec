"""Follow a share link to its final destination.

Server-side redirects are handled by the HTTP client.  Client-side
``<meta http-equiv="refresh">`` redirects are followed here, one hop at a
time, up to ``settings.max_meta_refresh_hops``.  The whole walk is retried
with exponential backoff when it fails with a retryable error.
"""

from __future__ import annotations

import sys
import time
from urllib.parse import urljoin

from linkclean.config import settings
from linkclean.errors import LinkCleanError, TooManyMetaRefreshError
from linkclean.resolver.fetcher import fetch_page
from linkclean.resolver.identity import IdentityProvider, random_desktop_user_agent
from linkclean.resolver.meta_refresh import extract_meta_refresh
from linkclean.resolver.models import ResolutionState


def _log(message: str) -> None:
    if settings.verbose:
        print(f"[resolve] {message}", file=sys.stderr)


def follow_redirects(url: str, identity: IdentityProvider = random_desktop_user_agent) -> str:
    """Run one resolution attempt and return the final URL.

    Raises:
        TransportError: A request failed.
        TooManyMetaRefreshError: More than ``settings.max_meta_refresh_hops``
            meta refresh redirects were found.
    """
    state = ResolutionState(url=url)

    while True:
        page = fetch_page(state.url, identity=identity)
        _log(f"HTTP {page.status_code}: {page.url} -> {page.final_url}")

        target = extract_meta_refresh(page.html)
        if target is None:
            return page.final_url

        if not target.startswith("http"):
            target = urljoin(page.final_url, target)

        if state.depth + 1 > settings.max_meta_refresh_hops:
            raise TooManyMetaRefreshError(state.url, settings.max_meta_refresh_hops)

        _log(f"meta refresh (hop {state.depth + 1}): {target}")
        state.advance(target)


def resolve(url: str, identity: IdentityProvider = random_desktop_user_agent) -> str:
    """Resolve *url* to its final form, retrying retryable failures with backoff.

    Each retry starts again from *url*.  Errors whose ``retryable`` flag is
    false are raised immediately, as is the last error once
    ``settings.retry_max`` retries are spent.
    """
    base_delay = settings.retry_base_delay
    max_retries = settings.retry_max

    for attempt in range(max_retries + 1):
        try:
            return follow_redirects(url, identity=identity)
        except LinkCleanError as exc:
            if not exc.retryable or attempt >= max_retries:
                raise
            delay = base_delay * (2 ** attempt)
            _log(
                f"{exc} (attempt {attempt + 1}/{max_retries}); "
                f"retrying in {delay:.1f}s …"
            )
            time.sleep(delay)

    raise AssertionError("unreachable")  # pragma: no cover
