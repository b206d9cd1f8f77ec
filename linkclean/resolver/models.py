"""Data models for the resolver."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FetchedPage:
    """One GET request, after the client followed any HTTP redirects."""

    url: str
    final_url: str
    status_code: int
    html: str


@dataclass
class ResolutionState:
    """Where the resolver currently is: the URL to fetch and how many meta refresh hops led here."""

    url: str
    depth: int = 0

    def advance(self, target: str) -> None:
        self.url = target
        self.depth += 1
