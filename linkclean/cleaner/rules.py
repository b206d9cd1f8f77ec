"""Per-platform cleaning rules.

Each rule is a plain function that mutates a :class:`ParsedUrl` in place:
it drops tracking query parameters, removes the trailing slash and, where the
platform has a fixed URL grammar, rejects shapes it does not recognise.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict

from linkclean.cleaner.url import ParsedUrl
from linkclean.errors import RuleInvariantError, UnsupportedPathError


class Platform(str, Enum):
    REDDIT = "reddit"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"
    GENERIC = "generic"


# Registrable domain -> platform.  Lookup is by exact string equality.
PLATFORM_DOMAINS: Dict[str, Platform] = {
    "reddit.com": Platform.REDDIT,
    "facebook.com": Platform.FACEBOOK,
    "instagram.com": Platform.INSTAGRAM,
    "linkedin.com": Platform.GENERIC,
}


# ---------------------------------------------------------------------------
# Generic
# ---------------------------------------------------------------------------

def clean_generic(url: ParsedUrl) -> None:
    """Drop every query parameter (``utm_*``, LinkedIn's ``rcm``, ...) and the trailing slash."""
    url.clear_query()
    url.pop_if_empty()


def clean_instagram(url: ParsedUrl) -> None:
    """Instagram share links carry their tracking in ``igsh``; the path is already canonical."""
    url.clear_query()
    url.pop_if_empty()


# ---------------------------------------------------------------------------
# Reddit
# ---------------------------------------------------------------------------

def _is_reddit_post(segments: list[str]) -> bool:
    # r/<sub>/comments/<post id>[/<slug>]
    return (
        len(segments) in (4, 5)
        and segments[0] == "r"
        and segments[2] == "comments"
    )


def _is_reddit_comment(segments: list[str]) -> bool:
    # r/<sub>/comments/<post id>/comment/<comment id>
    return (
        len(segments) == 6
        and segments[0] == "r"
        and segments[2] == "comments"
        and segments[4] == "comment"
    )


def clean_reddit(url: ParsedUrl) -> None:
    url.clear_query()
    url.pop_if_empty()

    segments = url.segments()
    if _is_reddit_comment(segments):
        return
    if not _is_reddit_post(segments):
        raise UnsupportedPathError(url.path)

    # The slug after the post ID is a human-readable title, not an address.
    if len(segments) == 5:
        url.pop_segment()


# ---------------------------------------------------------------------------
# Facebook
# ---------------------------------------------------------------------------

def _require_param(params: Dict[str, str], key: str, url: ParsedUrl) -> str:
    if key not in params:
        raise RuleInvariantError(f"facebook {url.path!r} link without {key!r}: {url}")
    return params[key]


def clean_facebook(url: ParsedUrl) -> None:
    """Clean a Facebook URL.

    Unlike the other platforms, some Facebook links keep their identity in
    the query string (``permalink.php?story_fbid=...&id=...``,
    ``photo.php?fbid=...``, group comments).  The query is captured, cleared,
    and only those identity-bearing parameters are appended back.
    """
    params = url.query_dict()
    url.clear_query()
    url.pop_if_empty()

    segments = url.segments()
    is_page_post = len(segments) == 3 and segments[1] == "posts"
    is_reel = len(segments) == 2 and segments[0] == "reel"
    is_group_post = (
        len(segments) == 4
        and segments[0] == "groups"
        and segments[2] == "permalink"
    )

    if is_page_post or is_reel:
        return

    if is_group_post:
        if "comment_id" in params:
            url.append_query_pair("comment_id", params["comment_id"])
        return

    if segments == ["permalink.php"]:
        story_fbid = _require_param(params, "story_fbid", url)
        owner_id = _require_param(params, "id", url)
        url.append_query_pair("story_fbid", story_fbid)
        url.append_query_pair("id", owner_id)
        return

    if segments == ["photo.php"]:
        url.append_query_pair("fbid", _require_param(params, "fbid", url))
        return

    raise RuleInvariantError(f"no facebook cleaning policy for path {url.path!r}")


RULES: Dict[Platform, Callable[[ParsedUrl], None]] = {
    Platform.REDDIT: clean_reddit,
    Platform.FACEBOOK: clean_facebook,
    Platform.INSTAGRAM: clean_instagram,
    Platform.GENERIC: clean_generic,
}
