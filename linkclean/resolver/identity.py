"""Randomised desktop browser identities for outgoing requests.

A fresh user agent is drawn for every request so that no two resolutions
share a fingerprint.  Only desktop form factors are produced: some platforms
redirect mobile agents to ``m.``/``mobile.`` hosts, which the cleaner would
then have to undo.
"""

from __future__ import annotations

import random
from typing import Callable, Optional

IdentityProvider = Callable[[], str]

_PLATFORMS = [
    "Windows NT 10.0; Win64; x64",
    "Macintosh; Intel Mac OS X 10_15_7",
    "X11; Linux x86_64",
]

_CHROME_UA = (
    "Mozilla/5.0 ({platform}) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/{major}.0.0.0 Safari/537.36"
)
_EDGE_UA = (
    "Mozilla/5.0 ({platform}) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/{major}.0.0.0 Safari/537.36 Edg/{major}.0.0.0"
)
_FIREFOX_UA = "Mozilla/5.0 ({platform}; rv:{major}.0) Gecko/20100101 Firefox/{major}.0"
_SAFARI_UA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/{major}.{minor} Safari/605.1.15"
)


def random_desktop_user_agent(rng: Optional[random.Random] = None) -> str:
    """Return a plausible desktop browser ``User-Agent`` string."""
    rng = rng or random
    browser = rng.choice(["chrome", "chrome", "edge", "firefox", "safari"])

    if browser == "safari":
        return _SAFARI_UA.format(major=rng.randint(16, 18), minor=rng.randint(0, 6))

    platform = rng.choice(_PLATFORMS)
    if browser == "firefox":
        return _FIREFOX_UA.format(platform=platform, major=rng.randint(128, 140))
    template = _EDGE_UA if browser == "edge" else _CHROME_UA
    return template.format(platform=platform, major=rng.randint(126, 138))


def fixed_identity(user_agent: str) -> IdentityProvider:
    """Return a provider that always yields *user_agent*."""
    return lambda: user_agent
