"""Cleaner package: per-platform URL canonicalization."""

from linkclean.cleaner.dispatcher import clean_url
from linkclean.cleaner.domains import registrable_domain
from linkclean.cleaner.rules import Platform
from linkclean.cleaner.url import ParsedUrl

__all__ = ["clean_url", "registrable_domain", "Platform", "ParsedUrl"]
