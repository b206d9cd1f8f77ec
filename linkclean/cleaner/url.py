"""Mutable URL value used by the cleaning rules.

``urllib.parse`` does the splitting; :class:`ParsedUrl` adds the pieces the
rules need on top of it: path segments as a list, the query as an ordered
list of pairs, and a serializer that always yields an absolute URL.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit

from linkclean.errors import ParseError, PathSegmentsError

_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):(.*)$", re.DOTALL)

# Schemes whose URLs always have an authority and a hierarchical path,
# mapped to their default port.
_SPECIAL_SCHEMES: Dict[str, Optional[int]] = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

_FORBIDDEN_HOST_CHARS = frozenset(" \t\n<>\"^`{|}%")


@dataclass
class ParsedUrl:
    """Structured form of an absolute URL.

    ``path_segments`` is ``None`` for URLs without a hierarchical path
    (``mailto:``, ``data:``, ...); such URLs keep their path verbatim in
    ``opaque_path`` and reject every segment mutation.
    """

    scheme: str
    host: str = ""
    port: Optional[int] = None
    userinfo: str = ""
    path_segments: Optional[List[str]] = field(default_factory=list)
    query: List[Tuple[str, str]] = field(default_factory=list)
    fragment: Optional[str] = None
    opaque_path: str = ""
    has_authority: bool = True

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, raw: str) -> ParsedUrl:
        """Parse *raw* into a :class:`ParsedUrl`.

        Raises:
            ParseError: If *raw* has no scheme, an empty host where one is
                required, or an invalid port.
        """
        text = raw.strip()
        match = _SCHEME_RE.match(text)
        if not match:
            raise ParseError("relative URL without a base")

        scheme = match.group(1).lower()
        rest = match.group(2)

        if scheme in _SPECIAL_SCHEMES:
            # Browsers treat any run of slashes (or none) after a special
            # scheme as the start of the authority: http:host/ == http://host/
            rest = "//" + rest.lstrip("/\\")
        elif not rest.startswith("/"):
            return cls._parse_opaque(scheme, rest)

        try:
            parts = urlsplit(f"{scheme}:{rest}")
            host = parts.hostname or ""
            port = parts.port
        except ValueError as exc:
            raise ParseError(str(exc)) from exc

        if scheme in _SPECIAL_SCHEMES and not host:
            raise ParseError("empty host")
        if _FORBIDDEN_HOST_CHARS.intersection(host):
            raise ParseError(f"invalid domain character in {host!r}")
        if port is not None and port == _SPECIAL_SCHEMES.get(scheme):
            port = None

        userinfo = ""
        if "@" in parts.netloc:
            userinfo = parts.netloc.rpartition("@")[0]

        path = parts.path
        if not path and scheme in _SPECIAL_SCHEMES:
            path = "/"
        segments = path[1:].split("/") if path.startswith("/") else []

        return cls(
            scheme=scheme,
            host=host,
            port=port,
            userinfo=userinfo,
            path_segments=segments,
            query=parse_qsl(parts.query, keep_blank_values=True),
            fragment=parts.fragment if "#" in rest else None,
            has_authority=rest.startswith("//"),
        )

    @classmethod
    def _parse_opaque(cls, scheme: str, rest: str) -> ParsedUrl:
        path, _, fragment = rest.partition("#")
        path, _, query = path.partition("?")
        return cls(
            scheme=scheme,
            path_segments=None,
            query=parse_qsl(query, keep_blank_values=True),
            fragment=fragment if "#" in rest else None,
            opaque_path=path,
        )

    # ------------------------------------------------------------------
    # Path
    # ------------------------------------------------------------------

    @property
    def path(self) -> str:
        if self.path_segments is None:
            return self.opaque_path
        if not self.path_segments and self.scheme not in _SPECIAL_SCHEMES:
            return ""
        return "/" + "/".join(self.path_segments)

    def segments(self) -> List[str]:
        """Return the path segments, raising for non-hierarchical URLs."""
        if self.path_segments is None:
            raise PathSegmentsError(str(self))
        return self.path_segments

    def pop_if_empty(self) -> None:
        """Remove one trailing empty segment, i.e. a trailing slash."""
        segments = self.segments()
        if segments and segments[-1] == "":
            segments.pop()

    def pop_segment(self) -> None:
        segments = self.segments()
        if segments:
            segments.pop()

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def query_dict(self) -> Dict[str, str]:
        """Query as a plain mapping; the last value wins for repeated keys."""
        return dict(self.query)

    def clear_query(self) -> None:
        self.query = []

    def append_query_pair(self, key: str, value: str) -> None:
        self.query.append((key, value))

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    @property
    def authority(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        if self.port is not None:
            host = f"{host}:{self.port}"
        if self.userinfo:
            host = f"{self.userinfo}@{host}"
        return host

    def __str__(self) -> str:
        if self.path_segments is None:
            url = f"{self.scheme}:{self.opaque_path}"
        elif not self.has_authority:
            url = f"{self.scheme}:{self.path}"
        else:
            url = f"{self.scheme}://{self.authority}{self.path}"
        if self.query:
            url += "?" + urlencode(self.query)
        if self.fragment is not None:
            url += "#" + self.fragment
        return url
