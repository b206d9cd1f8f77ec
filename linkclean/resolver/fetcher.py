"""Single-request HTTP fetcher used by the resolver."""

from __future__ import annotations

import httpx

from linkclean.config import settings
from linkclean.errors import TransportError
from linkclean.resolver.identity import IdentityProvider, random_desktop_user_agent
from linkclean.resolver.models import FetchedPage

# Facebook only serves desktop HTML (instead of a login wall) when at least
# these three headers are present.
_DEFAULT_HEADERS = {
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;"
        "q=0.9,image/webp,*/*;q=0.8"
    ),
    "Cache-Control": "max-age=0",
    "Sec-Fetch-Mode": "navigate",
}

# Failures that may succeed on a later attempt.
_RETRYABLE = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)


def build_client(identity: IdentityProvider = random_desktop_user_agent) -> httpx.Client:
    """Return a fresh client with its own browser identity and no shared cookies."""
    headers = dict(_DEFAULT_HEADERS)
    headers["User-Agent"] = identity()
    return httpx.Client(
        headers=headers,
        timeout=settings.request_timeout,
        follow_redirects=True,
        max_redirects=settings.max_redirects,
    )


def fetch_page(url: str, identity: IdentityProvider = random_desktop_user_agent) -> FetchedPage:
    """GET *url*, following HTTP redirects, and return where it landed.

    HTTP error statuses are returned like any other response; only failures
    to complete the exchange raise.

    Raises:
        TransportError: DNS, connection, TLS, timeout, redirect-limit or URL
            errors.  ``retryable`` is set for timeouts and network errors.
    """
    try:
        with build_client(identity) as client:
            response = client.get(url)
            html = response.text
    except _RETRYABLE as exc:
        raise TransportError(url, exc, retryable=True) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise TransportError(url, exc) from exc

    return FetchedPage(
        url=url,
        final_url=str(response.url),
        status_code=response.status_code,
        html=html,
    )
