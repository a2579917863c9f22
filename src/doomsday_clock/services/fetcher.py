"""
Page Fetcher Service

Performs the single blocking HTTP GET for the source page:
- Fixed header set (bot user-agent)
- Fail-fast error handling (no retries; the scheduler re-runs the job)
"""

import logging
from typing import Any, Dict, Optional

import requests

from doomsday_clock.config import get_app_config
from doomsday_clock.exceptions import FetchError

logger = logging.getLogger(__name__)

# Distinguishes "no timeout requested" (None) from "use configured timeout"
_CONFIGURED = object()


class PageFetcher:
    """
    Fetch the source page as text.

    Usage:
        fetcher = PageFetcher()
        document = fetcher.fetch()
    """

    def __init__(
        self,
        url: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Any = _CONFIGURED
    ):
        """
        Initialize fetcher.

        Configuration is loaded via config facade (get_app_config()) only
        when a value is not provided. Parameters take precedence over config
        values.

        Args:
            url: Page URL (overrides config if provided)
            headers: Request headers (overrides config if provided)
            timeout: Timeout in seconds, None for no timeout (overrides
                     config if provided)
        """
        if url is None or headers is None or timeout is _CONFIGURED:
            config = get_app_config()
            url = url or config.source_url
            headers = headers if headers is not None else config.request_headers
            timeout = config.request_timeout if timeout is _CONFIGURED else timeout

        self.url = url
        self.headers = headers
        self.timeout: Optional[float] = timeout

    def fetch(self) -> str:
        """
        Download the page body.

        Returns:
            Response body decoded as text

        Raises:
            FetchError: On transport failure or non-2xx status
        """
        logger.info(f"Fetching {self.url}")

        try:
            response = requests.get(self.url, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Request to {self.url} failed: {e}")
            raise FetchError(None, str(e)) from e

        if not response.ok:
            logger.error(
                f"Unexpected response from {self.url}: "
                f"{response.status_code} {response.reason}"
            )
            raise FetchError(response.status_code, response.reason)

        logger.info(f"Fetched {len(response.text)} characters from {self.url}")
        return response.text
