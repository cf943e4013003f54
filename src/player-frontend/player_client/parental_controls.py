"""
Parental Controls Gate
Handles PIN verification and the locked/unlocked state of the settings editor.
"""
import logging
from dataclasses import replace
from typing import Optional

from .hashing import DEFAULT_PIN, default_verifier, digest
from .models import FilterSettings, GateState, UnlockResult


def verify_pin(candidate: Optional[str], stored_verifier: Optional[str]) -> bool:
    """
    Check a candidate PIN against the stored verifier.

    An empty candidate counts as the factory PIN, and so does an unset verifier.
    """
    candidate_hash = digest(candidate or DEFAULT_PIN)
    if not stored_verifier:
        return candidate_hash == default_verifier()
    return candidate_hash == stored_verifier


def commit_new_pin(new_pin: Optional[str]) -> Optional[str]:
    """Return the verifier for a new PIN, or None if the PIN is left unchanged."""
    new_pin = (new_pin or "").strip()
    if not new_pin:
        return None
    return digest(new_pin)


def apply_new_pin(settings: FilterSettings, new_pin: Optional[str]) -> FilterSettings:
    """Return a settings snapshot carrying the new PIN's verifier, if any."""
    verifier = commit_new_pin(new_pin)
    if verifier is None:
        return settings
    return replace(settings, pin_verifier=verifier)


class CredentialGate:
    """Tracks whether settings editing is unlocked for this session."""

    def __init__(self):
        self._state = GateState.LOCKED

    @property
    def state(self) -> GateState:
        return self._state

    def is_locked(self) -> bool:
        return self._state is GateState.LOCKED

    def unlock(self, candidate: Optional[str], settings: FilterSettings) -> UnlockResult:
        """Attempt to unlock. On success returns the snapshot to populate the editor."""
        if not self.is_locked():
            return UnlockResult(self._state, True, settings)

        if not verify_pin(candidate, settings.pin_verifier):
            logging.warning("Settings unlock rejected: incorrect PIN")
            return UnlockResult(self._state, False)

        self._state = GateState.UNLOCKED
        logging.info("Settings unlocked")
        return UnlockResult(self._state, True, settings)

    def lock(self) -> GateState:
        """Re-lock the settings editor. Callers clear any PIN entry fields."""
        self._state = GateState.LOCKED
        return self._state
