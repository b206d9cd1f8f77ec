"""Tests for the cleaner: domain dispatch and the per-platform rules.

Everything here is offline; ``clean_url`` never touches the network.
"""

from __future__ import annotations

import pytest

from linkclean.cleaner import clean_url
from linkclean.cleaner.dispatcher import select_platform
from linkclean.cleaner.rules import Platform, clean_facebook
from linkclean.cleaner.url import ParsedUrl
from linkclean.errors import (
    ParseError,
    PathSegmentsError,
    RuleInvariantError,
    UnknownDomainError,
    UnsupportedHostError,
    UnsupportedPathError,
    UnsupportedSchemeError,
)

_TRACKING = "share_id=l2suzjz-JpaaqZSjbaNmt&utm_content=1&utm_medium=ios_app&utm_name=ioscss&utm_source=share&utm_term=1"


# ---------------------------------------------------------------------------
# Reddit
# ---------------------------------------------------------------------------

class TestReddit:
    def test_post_identity(self) -> None:
        url = "https://www.reddit.com/r/AskTheWorld/comments/1q2rw7m"
        assert clean_url(url) == url

    def test_post_with_slug_and_tracking(self) -> None:
        url = (
            "https://www.reddit.com/r/AskTheWorld/comments/1q2rw7m/"
            f"what_comes_to_mind_when_you_think_of_new_zealand/?{_TRACKING}"
        )
        assert clean_url(url) == "https://www.reddit.com/r/AskTheWorld/comments/1q2rw7m"

    def test_slug_and_no_slug_clean_to_the_same_url(self) -> None:
        with_slug = "https://www.reddit.com/r/AskTheWorld/comments/1q2rw7m/some_slug/"
        without_slug = "https://www.reddit.com/r/AskTheWorld/comments/1q2rw7m/"
        assert clean_url(with_slug) == clean_url(without_slug)

    def test_end_to_end_example(self) -> None:
        url = "https://www.reddit.com/r/AskTheWorld/comments/1q2rw7m/some_slug/?utm_source=share"
        assert clean_url(url) == "https://www.reddit.com/r/AskTheWorld/comments/1q2rw7m"

    def test_comment_identity(self) -> None:
        url = "https://www.reddit.com/r/AskTheWorld/comments/1q2rw7m/comment/nxfc5ci"
        assert clean_url(url) == url

    def test_comment_with_tracking(self) -> None:
        url = (
            "https://www.reddit.com/r/AskTheWorld/comments/1q2rw7m/comment/nxfc5ci/"
            f"?context=3&{_TRACKING}"
        )
        assert clean_url(url) == "https://www.reddit.com/r/AskTheWorld/comments/1q2rw7m/comment/nxfc5ci"

    def test_subdomain_is_kept(self) -> None:
        url = "https://old.reddit.com/r/AskTheWorld/comments/1q2rw7m/?utm_source=share"
        assert clean_url(url) == "https://old.reddit.com/r/AskTheWorld/comments/1q2rw7m"

    @pytest.mark.parametrize(
        "url",
        [
            "https://reddit.com",
            "https://reddit.com/",
            "http:reddit.com/",
            "https://reddit.com/u/spez",
            "https://www.reddit.com/r/AskTheWorld",
            "https://www.reddit.com/r/AskTheWorld/s/mONZu40JNk",
            "https://www.reddit.com/r/AskTheWorld/comments/1q2rw7m/comment/nxfc5ci/extra",
        ],
    )
    def test_unsupported_path(self, url: str) -> None:
        with pytest.raises(UnsupportedPathError):
            clean_url(url)


# ---------------------------------------------------------------------------
# Facebook
# ---------------------------------------------------------------------------

class TestFacebook:
    @pytest.mark.parametrize(
        "url",
        [
            "https://www.facebook.com/MoreFMWellington/posts/pfbid0vdnCZ6brToAep5XKfrM7FJBuMcuzsg64y896v4Ce2DJefNKGqe8mYhiJvAZwA5SGl",
            "https://www.facebook.com/permalink.php?story_fbid=pfbid02mNMcJYekXP4bnUFkWguBsNddw6GkLHrWZG4ENa23x2h3G2SbbMeJRHByXuxhjKj1l&id=100088004222911",
            "https://www.facebook.com/reel/1309748351194528",
            "https://www.facebook.com/groups/vicdeals/permalink/25654608820855518",
            "https://www.facebook.com/groups/vicdeals/permalink/25654608820855518?comment_id=25654673274182406",
            "https://www.facebook.com/photo.php?fbid=1279617124197361",
        ],
        ids=["page-post", "story", "reel", "group-post", "group-comment", "photo"],
    )
    def test_identity(self, url: str) -> None:
        assert clean_url(url) == url

    def test_page_post_with_referrer(self) -> None:
        url = "https://www.facebook.com/rnznewzealand/posts/pfbid0jYRX?rdid=yhfTkLFfmiUYezxF"
        assert clean_url(url) == "https://www.facebook.com/rnznewzealand/posts/pfbid0jYRX"

    def test_story_with_referrer(self) -> None:
        url = "https://www.facebook.com/permalink.php?story_fbid=pfbid02mN&id=100088004222911&rdid=b6vSMONURZk2MmX5"
        assert clean_url(url) == "https://www.facebook.com/permalink.php?story_fbid=pfbid02mN&id=100088004222911"

    def test_story_parameter_order_is_normalised(self) -> None:
        url = "https://www.facebook.com/permalink.php?rdid=x&id=100088004222911&mibextid=y&story_fbid=pfbid02mN"
        assert clean_url(url) == "https://www.facebook.com/permalink.php?story_fbid=pfbid02mN&id=100088004222911"

    def test_reel_with_referrer(self) -> None:
        url = (
            "https://www.facebook.com/reel/1605919000854039/?rdid=VxhE0u0GlwyGLnFD"
            "&share_url=https%3A%2F%2Fwww.facebook.com%2Fshare%2Fr%2F1AZhvx3n72%2F"
        )
        assert clean_url(url) == "https://www.facebook.com/reel/1605919000854039"

    def test_group_post_with_referrer(self) -> None:
        url = "https://www.facebook.com/groups/vicdeals/permalink/25654608820855518/?rdid=9etJN9mXDU45vGPw"
        assert clean_url(url) == "https://www.facebook.com/groups/vicdeals/permalink/25654608820855518"

    def test_group_comment_with_referrer(self) -> None:
        url = (
            "https://www.facebook.com/groups/vicdeals/permalink/25654608820855518/"
            "?comment_id=25654673274182406&rdid=XYZ"
        )
        assert clean_url(url) == (
            "https://www.facebook.com/groups/vicdeals/permalink/25654608820855518"
            "?comment_id=25654673274182406"
        )

    def test_photo_with_extra_params(self) -> None:
        url = "https://www.facebook.com/photo.php?fbid=1279617124197361&set=a.301086902050393&type=3"
        assert clean_url(url) == "https://www.facebook.com/photo.php?fbid=1279617124197361"

    @pytest.mark.parametrize(
        "url",
        [
            "https://www.facebook.com/permalink.php?id=100088004222911",
            "https://www.facebook.com/permalink.php?story_fbid=pfbid02mN",
            "https://www.facebook.com/photo.php?set=a.1",
            "https://www.facebook.com/SomePage",
        ],
    )
    def test_policy_gap_is_an_invariant_error(self, url: str) -> None:
        with pytest.raises(RuleInvariantError):
            clean_url(url)

    def test_rule_rejects_opaque_url(self) -> None:
        with pytest.raises(PathSegmentsError):
            clean_facebook(ParsedUrl.parse("mailto:someone@facebook.com"))


# ---------------------------------------------------------------------------
# Instagram / generic
# ---------------------------------------------------------------------------

class TestGeneric:
    def test_instagram_share_link(self) -> None:
        url = "https://www.instagram.com/reel/DAbCdEfGhIj/?igsh=MTc4MmM1YmI2Ng=="
        assert clean_url(url) == "https://www.instagram.com/reel/DAbCdEfGhIj"

    def test_instagram_identity(self) -> None:
        url = "https://www.instagram.com/p/DAbCdEfGhIj"
        assert clean_url(url) == url

    def test_linkedin_uses_generic_rule(self) -> None:
        url = "https://www.linkedin.com/posts/someone_activity-7140000000000000000-AbCd/?utm_source=share&rcm=ACoAA"
        assert clean_url(url) == "https://www.linkedin.com/posts/someone_activity-7140000000000000000-AbCd"

    def test_fallback_disabled_by_default(self) -> None:
        with pytest.raises(UnsupportedHostError) as excinfo:
            clean_url("https://example.com/article/?utm_source=x")
        assert excinfo.value.domain == "example.com"

    def test_fallback_enabled(self) -> None:
        url = "https://news.example.com/article/?utm_source=x&fbclid=abc"
        assert clean_url(url, generic_fallback=True) == "https://news.example.com/article"

    def test_fallback_does_not_override_registered_rules(self) -> None:
        with pytest.raises(UnsupportedPathError):
            clean_url("https://reddit.com/u/spez", generic_fallback=True)


# ---------------------------------------------------------------------------
# Dispatch and errors
# ---------------------------------------------------------------------------

class TestDispatch:
    @pytest.mark.parametrize(
        ("domain", "platform"),
        [
            ("reddit.com", Platform.REDDIT),
            ("facebook.com", Platform.FACEBOOK),
            ("instagram.com", Platform.INSTAGRAM),
            ("linkedin.com", Platform.GENERIC),
        ],
    )
    def test_select_platform(self, domain: str, platform: Platform) -> None:
        assert select_platform(domain) is platform

    def test_lookup_is_exact(self) -> None:
        with pytest.raises(UnsupportedHostError):
            select_platform("notreddit.com")

    def test_invalid_url(self) -> None:
        with pytest.raises(ParseError):
            clean_url("not a valid url")

    def test_empty_host(self) -> None:
        with pytest.raises(ParseError):
            clean_url("https://")

    def test_unknown_domain(self) -> None:
        with pytest.raises(UnknownDomainError):
            clean_url("https:///path/to/file")

    def test_ip_address_is_unknown_domain(self) -> None:
        with pytest.raises(UnknownDomainError):
            clean_url("http://127.0.0.1/r/x/comments/y")

    def test_unsupported_scheme(self) -> None:
        with pytest.raises(UnsupportedSchemeError):
            clean_url("fpt://www.reddit.com/")

    def test_unsupported_host(self) -> None:
        with pytest.raises(UnsupportedHostError):
            clean_url("https://example.com/")

    def test_errors_are_not_retryable(self) -> None:
        with pytest.raises(UnsupportedHostError) as excinfo:
            clean_url("https://example.com/")
        assert excinfo.value.retryable is False
