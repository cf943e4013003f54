import logging
from dataclasses import replace
from typing import Iterable, Optional

from .errors import PlayerError, ResolutionError, SettingsLockedError
from .filter_engine import decide
from .matching import normalize_patterns
from .models import RESOLUTION_FAILURE, FilterMode, FilterSettings, GateState, PlaybackDecision, UnlockResult
from .oembed_api import OEmbedResolver
from .parental_controls import CredentialGate, apply_new_pin
from .repository import SettingsRepository
from .video_urls import build_embed_url, extract_video_id

MSG_INVALID_URL = "Invalid URL."
MSG_BLOCKED = "Video blocked."
MSG_ALLOWED = "Video allowed."


class PlayerService:
    def __init__(self, resolver: OEmbedResolver, repo: SettingsRepository, embed_base_url: str = "https://www.youtube.com/embed"):
        self.resolver = resolver
        self.repo = repo
        self.embed_base_url = embed_base_url

    def check(self, url: str) -> PlaybackDecision:
        """Decide whether the video behind a pasted link may play."""
        video_id = extract_video_id(url)
        if not video_id:
            logging.info(f"Rejected link: {url!r}")
            return PlaybackDecision(allowed=False, message=MSG_INVALID_URL)

        logging.info(f"Checking channel for video {video_id}...")
        settings = self.repo.load()

        try:
            identity = self.resolver.resolve(video_id)
        except ResolutionError as e:
            logging.error(str(e))
            identity = RESOLUTION_FAILURE

        verdict = decide(identity, settings.mode, settings.patterns)
        if not verdict.admit:
            return PlaybackDecision(allowed=False, message=MSG_BLOCKED, video_id=video_id, verdict=verdict)

        return PlaybackDecision(
            allowed=True,
            message=MSG_ALLOWED,
            video_id=video_id,
            embed_url=build_embed_url(video_id, self.embed_base_url),
            verdict=verdict
        )


class SettingsSession:
    """
    One opening of the settings editor.

    Every session starts LOCKED. Edits are written back as a full replacement
    of the stored settings.
    """

    def __init__(self, repo: SettingsRepository):
        self.repo = repo
        self.gate = CredentialGate()

    @property
    def state(self) -> GateState:
        return self.gate.state

    def unlock(self, pin: Optional[str]) -> UnlockResult:
        return self.gate.unlock(pin, self.repo.load())

    def lock(self) -> GateState:
        return self.gate.lock()

    def current_settings(self) -> FilterSettings:
        if self.gate.is_locked():
            raise SettingsLockedError("Settings are locked")
        return self.repo.load()

    def save(
        self,
        mode: Optional[FilterMode] = None,
        patterns: Optional[Iterable[str]] = None,
        new_pin: Optional[str] = None
    ) -> FilterSettings:
        """
        Store edited settings. Fields left as None keep their stored value,
        and a blank new PIN keeps the current one.
        """
        settings = self.current_settings()

        if mode is not None:
            settings = replace(settings, mode=mode)
        if patterns is not None:
            settings = replace(settings, patterns=normalize_patterns(patterns))
        settings = apply_new_pin(settings, new_pin)

        if not self.repo.save(settings):
            raise PlayerError("Failed to save settings")

        logging.info(f"Settings saved: mode={settings.mode.value}, {len(settings.patterns)} pattern(s)")
        return settings
