from typing import Optional
from urllib.parse import parse_qs, quote, urlencode, urlparse

WATCH_URL = "https://www.youtube.com/watch"
EMBED_PARAMS = {"rel": "0", "modestbranding": "1", "autoplay": "1"}


def extract_video_id(url: str) -> Optional[str]:
    """
    Pull the video id out of a pasted link.

    Accepts youtu.be/<id>, any URL with a ``v`` query parameter and
    /shorts/<id>. Returns None for anything else.
    """
    try:
        parsed = urlparse((url or "").strip())
    except ValueError:
        return None

    if not parsed.scheme or not parsed.hostname:
        return None

    if "youtu.be" in parsed.hostname:
        video_id = parsed.path[1:] if parsed.path.startswith("/") else parsed.path
        return video_id or None

    query = parse_qs(parsed.query)
    if "v" in query:
        return query["v"][0] or None

    if parsed.path.startswith("/shorts/"):
        return parsed.path.split("/")[2] or None

    return None


def build_watch_url(video_id: str) -> str:
    return f"{WATCH_URL}?v={quote(video_id, safe='')}"


def build_embed_url(video_id: str, embed_base_url: str = "https://www.youtube.com/embed") -> str:
    return f"{embed_base_url.rstrip('/')}/{quote(video_id, safe='')}?{urlencode(EMBED_PARAMS)}"
