import json
import logging
import os
from typing import Any, Dict

from .config import PlayerConfig
from .matching import normalize_patterns
from .models import FilterMode, FilterSettings

SETTINGS_FILENAME = "ytFilteredPlayerConfigV1.json"


class SettingsRepository:
    def __init__(self, config: PlayerConfig):
        self.config = config
        self.settings_path = self.config.data_dir / SETTINGS_FILENAME

        # Ensure directories exist
        self.config.data_dir.mkdir(parents=True, exist_ok=True)

    def load(self) -> FilterSettings:
        """Load the stored settings. Missing or corrupt data yields defaults."""
        if not self.settings_path.exists():
            return FilterSettings()

        try:
            with open(self.settings_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            logging.error(f"Failed to parse {self.settings_path.name}: {e}")
            return FilterSettings()

        if not isinstance(data, dict):
            logging.error(f"Ignoring {self.settings_path.name}: expected an object")
            return FilterSettings()

        return self._from_dict(data)

    def save(self, settings: FilterSettings) -> bool:
        """Replace the stored settings. Returns True on success."""
        data = {
            "mode": settings.mode.value,
            "patterns": list(settings.patterns),
            "parentPinHash": settings.pin_verifier
        }

        # Atomic write
        temp_path = self.settings_path.with_suffix(".tmp")
        try:
            with open(temp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            os.replace(temp_path, self.settings_path)
            return True
        except OSError as e:
            logging.error(f"Failed to save settings: {e}")
            return False

    def _from_dict(self, data: Dict[str, Any]) -> FilterSettings:
        # Each field falls back to its default on its own
        defaults = FilterSettings()

        try:
            mode = FilterMode(data.get("mode", defaults.mode.value))
        except ValueError:
            logging.warning(f"Unknown filter mode {data.get('mode')!r}, using {defaults.mode.value}")
            mode = defaults.mode

        raw_patterns = data.get("patterns", [])
        if isinstance(raw_patterns, list):
            patterns = normalize_patterns(p for p in raw_patterns if isinstance(p, str))
        else:
            patterns = defaults.patterns

        verifier = data.get("parentPinHash")
        if not isinstance(verifier, str) or not verifier:
            verifier = defaults.pin_verifier

        return FilterSettings(mode=mode, patterns=patterns, pin_verifier=verifier)
