import time
import logging
import requests
from typing import Optional, Dict, Any

class HttpClient:
    def __init__(self, timeout: float = 10.0, max_retries: int = 0, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.max_retries = max_retries
        self.session = session or requests.Session()

    def get_json(self, url: str, params: Optional[Dict[str, str]] = None) -> Any:
        """
        GET a URL and decode its JSON body.

        Raises requests.RequestException on network errors or non-success
        responses, and ValueError on a body that is not JSON.
        """
        for attempt in range(self.max_retries + 1):
            try:
                response = self.session.get(url, params=params, timeout=self.timeout)
                response.raise_for_status()
                return response.json()

            except requests.RequestException as e:
                logging.warning(f"Request failed (attempt {attempt + 1}/{self.max_retries + 1}): {e}")
                if attempt < self.max_retries:
                    sleep_time = 2 ** attempt # Exponential backoff
                    time.sleep(sleep_time)
                else:
                    raise
