"""postcodes.io API client for UK postcode lookups."""

import logging
from urllib.parse import quote

import httpx

from advisor.config.schema import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

POSTCODES_BASE_URL = "https://api.postcodes.io"


class PostcodeClient:
    def __init__(
        self,
        base_url: str = POSTCODES_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def lookup(self, postcode: str) -> dict:
        """Fetch the postcodes.io record for a postcode.

        Raises httpx.HTTPStatusError on a non-2xx response and
        httpx.RequestError when the service cannot be reached.
        """
        url = f"{self.base_url}/postcodes/{quote(postcode, safe='')}"
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        try:
            resp = httpx.get(url, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            logger.error("postcodes.io error for postcode=%s: %s", postcode, e)
            raise
        except httpx.RequestError as e:
            logger.error("postcodes.io request failed for postcode=%s: %s", postcode, e)
            raise
