"""Extraction of client-side ``<meta http-equiv="refresh">`` redirects."""

from __future__ import annotations

import re
from typing import Optional

_META_OPEN = re.compile(r"<meta", re.IGNORECASE)
_HTTP_EQUIV = re.compile(r"http-equiv", re.IGNORECASE)
_REFRESH = re.compile(r"refresh", re.IGNORECASE)
_CONTENT_ATTR = re.compile(r"content=", re.IGNORECASE)
_URL_TOKEN = re.compile(r"url=", re.IGNORECASE)


def _attribute_value(text: str) -> Optional[str]:
    """Read an attribute value from the start of *text*.

    Double- and single-quoted values run to the matching quote (or to the end
    of *text* when it is unterminated); unquoted values stop at whitespace.
    """
    if text[:1] in ('"', "'"):
        return text[1:].split(text[0], 1)[0]
    parts = text.split(None, 1)
    return parts[0] if parts else None


def extract_meta_refresh(html: str) -> Optional[str]:
    """Return the redirect target of the first ``<meta>`` tag in *html*, if it is a refresh.

    Only the first ``<meta`` tag is inspected.  The returned target may be
    relative; joining it to the page URL is the caller's job.

    >>> extract_meta_refresh('<meta http-equiv="refresh" content="0;url=https://example.com">')
    'https://example.com'
    """
    opening = _META_OPEN.search(html)
    if opening is None:
        return None
    end = html.find(">", opening.start())
    if end == -1:
        return None
    tag = html[opening.start():end]

    if not (_HTTP_EQUIV.search(tag) and _REFRESH.search(tag)):
        return None

    content = _CONTENT_ATTR.search(tag)
    if content is None:
        return None
    value = _attribute_value(tag[content.end():])
    if value is None:
        return None

    url_token = _URL_TOKEN.search(value)
    if url_token is not None:
        return value[url_token.end():].strip()

    _, semicolon, remainder = value.partition(";")
    if semicolon:
        remainder = remainder.strip()
        # Case-sensitive here, unlike the search above.
        if remainder.startswith("url="):
            return remainder[len("url="):].strip()

    return None
