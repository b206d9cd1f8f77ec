"""Resolver package: HTTP and meta refresh redirect following."""

from linkclean.resolver.fetcher import fetch_page
from linkclean.resolver.meta_refresh import extract_meta_refresh
from linkclean.resolver.models import FetchedPage, ResolutionState
from linkclean.resolver.resolve import follow_redirects, resolve

__all__ = [
    "fetch_page",
    "extract_meta_refresh",
    "follow_redirects",
    "resolve",
    "FetchedPage",
    "ResolutionState",
]
