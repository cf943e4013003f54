from typing import Iterable

from .models import PatternSet, PublisherIdentity

FIELD_SEPARATOR = "|"


def normalize_patterns(patterns: Iterable[str]) -> PatternSet:
    """Trim and lowercase patterns, dropping blank ones."""
    cleaned = (p.strip().lower() for p in patterns if p)
    return tuple(p for p in cleaned if p)


def parse_patterns(text: str) -> PatternSet:
    """Parse the settings text area format: one pattern per line."""
    return normalize_patterns((text or "").split("\n"))


def matches(identity: PublisherIdentity, patterns: Iterable[str]) -> bool:
    """
    Check whether any pattern is a substring of the publisher's name or URL.

    Both fields are joined with a separator so a pattern only straddles them
    if it contains the separator itself. Matching is case-insensitive.
    """
    haystack = f"{identity.display_name or ''}{FIELD_SEPARATOR}{identity.profile_url or ''}".lower()
    return any(p.lower() in haystack for p in patterns)
