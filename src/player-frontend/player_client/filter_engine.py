import logging
from typing import Iterable, Union

from .matching import matches
from .models import (
    RESOLUTION_FAILURE,
    FilterMode,
    PublisherIdentity,
    Verdict,
    VerdictReason,
    ResolutionFailure,
)


def decide(
    identity: Union[PublisherIdentity, ResolutionFailure],
    mode: FilterMode,
    patterns: Iterable[str]
) -> Verdict:
    """
    Decide whether a video may play.

    Args:
        identity: Resolved publisher, or RESOLUTION_FAILURE
        mode: Active filter mode
        patterns: Pattern snapshot

    When the publisher is unknown, a block-list admits (nothing to block on)
    and an allow-list denies (nothing proves the video safe).
    """
    if identity is RESOLUTION_FAILURE:
        verdict = Verdict(mode is FilterMode.BLOCK_LIST, VerdictReason.RESOLUTION_FAILED_DEFAULT)
        logging.debug(f"Publisher unresolved, {mode.value} default: admit={verdict.admit}")
        return verdict

    hit = matches(identity, patterns)

    if mode is FilterMode.BLOCK_LIST:
        verdict = Verdict(not hit, VerdictReason.MATCHED_BLOCK if hit else VerdictReason.NO_IDENTITY_MATCH)
    else:
        verdict = Verdict(hit, VerdictReason.MATCHED_ALLOW if hit else VerdictReason.NO_IDENTITY_MATCH)

    logging.debug(
        f"'{identity.display_name}' ({identity.profile_url}) in {mode.value} mode: "
        f"admit={verdict.admit}, reason={verdict.reason.value}"
    )
    return verdict
