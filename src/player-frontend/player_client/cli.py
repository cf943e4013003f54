"""
Command-line front end for the filtered player.

The CLI parses arguments and delegates to the player service and the settings
session. It prints the embed URL a player surface would load; it does not
render video itself.
"""

import argparse
import getpass
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import PlayerConfig, load_config
from .errors import InvalidPinError, PlayerError
from .http_client import HttpClient
from .matching import parse_patterns
from .models import FilterMode, FilterSettings
from .oembed_api import OEmbedResolver
from .player import PlayerService, SettingsSession
from .repository import SettingsRepository

EXIT_OK = 0
EXIT_BLOCKED = 1
EXIT_INVALID_PIN = 2
EXIT_ERROR = 3

MODE_CHOICES = {"allow": FilterMode.ALLOW_LIST, "block": FilterMode.BLOCK_LIST}


class App:
    """Wires the player components from one configuration."""

    def __init__(self, config: Optional[PlayerConfig] = None, http_client: Optional[HttpClient] = None):
        self.config = config or load_config()
        self.http_client = http_client or HttpClient(self.config.http_timeout, self.config.max_retries)
        self.resolver = OEmbedResolver(self.http_client, self.config.oembed_url)
        self.repo = SettingsRepository(self.config)
        self.player = PlayerService(self.resolver, self.repo, self.config.embed_base_url)

    def open_settings(self) -> SettingsSession:
        return SettingsSession(self.repo)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filtered-player",
        description="Channel-filtered video player",
    )
    parser.add_argument("--data-dir", type=Path, default=None, help="Override the settings directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    sub = parser.add_subparsers(dest="command", required=True)

    play_p = sub.add_parser("play", help="Check a video link against the channel filter")
    play_p.add_argument("url", help="Video link (watch, youtu.be or shorts)")

    settings_p = sub.add_parser("settings", help="Show or change filter settings (PIN required)")
    settings_sub = settings_p.add_subparsers(dest="settings_command", required=True)

    show_p = settings_sub.add_parser("show", help="Print the current settings")
    show_p.add_argument("--pin", default=None, help="Parent PIN (prompted if omitted)")

    save_p = settings_sub.add_parser("save", help="Replace filter settings")
    save_p.add_argument("--pin", default=None, help="Parent PIN (prompted if omitted)")
    save_p.add_argument("--mode", choices=sorted(MODE_CHOICES), default=None, help="allow: only listed channels play; block: listed channels never play")
    patterns = save_p.add_mutually_exclusive_group()
    patterns.add_argument("--pattern", action="append", default=None, help="Channel pattern. Repeatable; replaces the stored list.")
    patterns.add_argument("--patterns-file", type=Path, default=None, help="File with one channel pattern per line")
    save_p.add_argument("--new-pin", default=None, help="Set a new parent PIN (blank keeps the current one)")

    return parser


def _read_pin(value: Optional[str]) -> str:
    if value is not None:
        return value
    return getpass.getpass("Parent PIN: ")


def _print_settings(settings: FilterSettings) -> None:
    mode = "allow" if settings.mode is FilterMode.ALLOW_LIST else "block"
    print(f"mode: {mode}")
    print("patterns:")
    for pattern in settings.patterns:
        print(f"  {pattern}")
    print(f"custom PIN: {'yes' if settings.pin_verifier else 'no'}")


def _run_play(app: App, args: argparse.Namespace) -> int:
    decision = app.player.check(args.url)
    print(decision.message)
    if not decision.allowed:
        return EXIT_BLOCKED
    print(decision.embed_url)
    return EXIT_OK


def _run_settings(app: App, args: argparse.Namespace) -> int:
    session = app.open_settings()
    result = session.unlock(_read_pin(args.pin))
    if not result.ok:
        raise InvalidPinError()

    try:
        if args.settings_command == "show":
            _print_settings(result.settings)
            return EXIT_OK

        patterns = None
        if args.pattern is not None:
            patterns = args.pattern
        elif args.patterns_file is not None:
            patterns = parse_patterns(args.patterns_file.read_text(encoding="utf-8"))

        mode = MODE_CHOICES[args.mode] if args.mode else None
        saved = session.save(mode=mode, patterns=patterns, new_pin=args.new_pin)
        print("Settings saved.")
        _print_settings(saved)
        return EXIT_OK
    finally:
        session.lock()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='%(levelname)s: %(message)s')

    config = load_config()
    if args.data_dir is not None:
        config.data_dir = args.data_dir
    app = App(config)

    try:
        if args.command == "play":
            return _run_play(app, args)
        return _run_settings(app, args)
    except InvalidPinError as e:
        print(f"{e}.", file=sys.stderr)
        return EXIT_INVALID_PIN
    except (PlayerError, OSError) as e:
        logging.error(f"{args.command} failed: {e}")
        return EXIT_ERROR
