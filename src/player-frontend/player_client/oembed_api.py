import logging
import requests
from .errors import ResolutionError
from .http_client import HttpClient
from .models import PublisherIdentity
from .video_urls import build_watch_url


class OEmbedResolver:
    def __init__(self, client: HttpClient, oembed_url: str = "https://www.youtube.com/oembed"):
        """Initialize with the HTTP client and the oEmbed endpoint."""
        self.client = client
        self.oembed_url = oembed_url

    def resolve(self, video_id: str) -> PublisherIdentity:
        """
        Look up the channel that published a video.

        Args:
            video_id: The video id extracted from the pasted link

        Returns:
            PublisherIdentity with author name and channel URL (either may be empty)

        Raises:
            ResolutionError: network error, non-success status or malformed payload
        """
        params = {"url": build_watch_url(video_id), "format": "json"}

        try:
            data = self.client.get_json(self.oembed_url, params=params)
        except (requests.RequestException, ValueError, RecursionError) as e:
            raise ResolutionError(f"oEmbed lookup failed for {video_id}: {e}") from e

        if not isinstance(data, dict):
            raise ResolutionError(f"oEmbed returned an unexpected payload for {video_id}")

        identity = PublisherIdentity(
            display_name=str(data.get("author_name") or ""),
            profile_url=str(data.get("author_url") or "")
        )
        logging.info(f"Video {video_id} published by '{identity.display_name}' ({identity.profile_url})")
        return identity
