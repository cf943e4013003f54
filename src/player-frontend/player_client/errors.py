"""Exceptions raised by the player client."""


class PlayerError(RuntimeError):
    """Base exception for player client failures."""


class ResolutionError(PlayerError):
    """Raised when a video's publisher cannot be looked up."""


class InvalidPinError(PlayerError):
    """Raised when a settings action is attempted with a wrong PIN."""

    def __init__(self, message: str = "Incorrect PIN"):
        super().__init__(message)


class SettingsLockedError(PlayerError):
    """Raised when settings are saved without unlocking first."""
