from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class FilterMode(Enum):
    """Filtering policy. Values are the on-disk names."""
    ALLOW_LIST = "whitelist"
    BLOCK_LIST = "blacklist"


class GateState(Enum):
    LOCKED = "locked"
    UNLOCKED = "unlocked"


class VerdictReason(Enum):
    NO_IDENTITY_MATCH = "no_identity_match"
    MATCHED_BLOCK = "matched_block"
    MATCHED_ALLOW = "matched_allow"
    RESOLUTION_FAILED_DEFAULT = "resolution_failed_default"


class ResolutionFailure:
    """Marker passed to the filter when the publisher could not be resolved."""

    def __repr__(self):
        return "RESOLUTION_FAILURE"


RESOLUTION_FAILURE = ResolutionFailure()

# Lowercase, trimmed, non-empty fragments
PatternSet = Tuple[str, ...]


@dataclass(frozen=True)
class PublisherIdentity:
    """Resolved publisher (channel) of a video."""
    display_name: str = ""
    profile_url: str = ""


@dataclass(frozen=True)
class Verdict:
    admit: bool
    reason: VerdictReason


@dataclass(frozen=True)
class FilterSettings:
    """Snapshot of the stored configuration. Replace it, don't mutate it."""
    mode: FilterMode = FilterMode.ALLOW_LIST
    patterns: PatternSet = field(default_factory=tuple)
    pin_verifier: Optional[str] = None  # None means the factory PIN applies


@dataclass(frozen=True)
class UnlockResult:
    state: GateState
    ok: bool
    settings: Optional[FilterSettings] = None  # Populates the edit view on success


@dataclass
class PlaybackDecision:
    allowed: bool
    message: str
    video_id: Optional[str] = None
    embed_url: Optional[str] = None
    verdict: Optional[Verdict] = None
