"""Tests for PIN verification and the settings gate."""

from player_client.hashing import DEFAULT_PIN, digest
from player_client.models import FilterMode, FilterSettings, GateState
from player_client.parental_controls import (
    CredentialGate,
    apply_new_pin,
    commit_new_pin,
    verify_pin,
)


class TestDigest:
    def test_deterministic(self):
        assert digest("1234") == digest("1234")

    def test_distinct_inputs(self):
        assert digest("1234") != digest("1235")

    def test_fixed_length_hex(self):
        for secret in ("", "0000", "a much longer secret with spaces"):
            value = digest(secret)
            assert len(value) == 64
            assert int(value, 16) >= 0

    def test_known_value(self):
        assert digest("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


class TestVerifyPin:
    def test_default_pin_equivalence(self):
        assert verify_pin("", None) is True
        assert verify_pin(DEFAULT_PIN, None) is True
        assert verify_pin("1234", None) is False

    def test_custom_pin_round_trip(self):
        verifier = commit_new_pin("9999")
        assert verify_pin("9999", verifier) is True
        assert verify_pin("0000", verifier) is False
        assert verify_pin("", verifier) is False

    def test_stored_default_digest_accepts_empty(self):
        assert verify_pin("", digest("0000")) is True


class TestCommitNewPin:
    def test_blank_means_unchanged(self):
        assert commit_new_pin("") is None
        assert commit_new_pin("   ") is None
        assert commit_new_pin(None) is None

    def test_trims_surrounding_whitespace(self):
        assert commit_new_pin(" 4321 ") == digest("4321")

    def test_apply_keeps_existing_verifier(self):
        settings = FilterSettings(FilterMode.BLOCK_LIST, ("scary",), digest("1111"))
        assert apply_new_pin(settings, "") is settings

    def test_apply_keeps_absent_verifier(self):
        assert apply_new_pin(FilterSettings(), " ").pin_verifier is None

    def test_apply_replaces_verifier(self):
        settings = FilterSettings(FilterMode.BLOCK_LIST, ("scary",), None)
        updated = apply_new_pin(settings, "2468")
        assert updated.pin_verifier == digest("2468")
        assert updated.patterns == ("scary",)
        assert settings.pin_verifier is None


class TestCredentialGate:
    def test_starts_locked(self):
        assert CredentialGate().state is GateState.LOCKED

    def test_unlock_lock_cycle(self):
        gate = CredentialGate()
        settings = FilterSettings()

        result = gate.unlock("0000", settings)
        assert result.ok
        assert result.state is GateState.UNLOCKED
        assert result.settings is settings
        assert not gate.is_locked()

        assert gate.lock() is GateState.LOCKED
        assert gate.is_locked()

    def test_wrong_pin_stays_locked(self):
        gate = CredentialGate()
        settings = FilterSettings(pin_verifier=digest("9999"))

        result = gate.unlock("0000", settings)
        assert not result.ok
        assert result.state is GateState.LOCKED
        assert result.settings is None
        assert gate.is_locked()

    def test_unlock_when_unlocked_is_noop(self):
        gate = CredentialGate()
        settings = FilterSettings()
        gate.unlock("0000", settings)

        result = gate.unlock("wrong", settings)
        assert result.ok
        assert gate.state is GateState.UNLOCKED

    def test_lock_when_locked(self):
        gate = CredentialGate()
        assert gate.lock() is GateState.LOCKED
