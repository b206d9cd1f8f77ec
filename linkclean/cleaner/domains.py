"""Registrable-domain lookup backed by the public suffix list."""

from __future__ import annotations

from typing import Optional

import tldextract

# Use the suffix list snapshot bundled with tldextract: no network fetch and
# no on-disk cache, so classification is the same on every run.
_extract = tldextract.TLDExtract(suffix_list_urls=(), cache_dir=None)


def registrable_domain(host: str) -> Optional[str]:
    """Return the registrable domain of *host* (``www.reddit.com`` -> ``reddit.com``).

    Returns ``None`` for hosts that are not under a known public suffix:
    IP addresses, single-label names such as ``localhost``, unknown TLDs.
    """
    if not host:
        return None
    extracted = _extract(host.lower().rstrip("."))
    if extracted.domain and extracted.suffix:
        return f"{extracted.domain}.{extracted.suffix}"
    return None
