from dataclasses import dataclass
from pathlib import Path
import os

@dataclass
class PlayerConfig:
    data_dir: Path          # Settings file lives here
    oembed_url: str         # Publisher lookup endpoint
    embed_base_url: str     # Player iframe base
    http_timeout: float
    max_retries: int

def load_config() -> PlayerConfig:
    # Default configuration
    home = Path(os.path.expanduser("~"))
    data_dir = Path(os.environ.get("FILTERED_PLAYER_HOME", home / "filtered-player"))

    return PlayerConfig(
        data_dir=data_dir,
        oembed_url="https://www.youtube.com/oembed",
        embed_base_url="https://www.youtube.com/embed",
        http_timeout=10.0,
        max_retries=0  # Failed lookups are not retried; the user reissues
    )
