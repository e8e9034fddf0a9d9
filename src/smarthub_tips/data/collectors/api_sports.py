"""Shared client for the api-sports.io family of APIs."""

import logging
from typing import Any, Dict, List, Optional

import requests

from ...config import Settings, get_settings

logger = logging.getLogger(__name__)


class APISportsCollector:
    """Base collector for api-sports.io providers.

    Every request is fail-open: a missing key, a transport error, a non-2xx
    status or an unparseable body yields ``None`` and a logged warning.
    """

    name = "api-sports"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.host = self.base_url.split("://", 1)[-1]
        self.timeout = self.settings.request_timeout
        self.session = requests.Session()

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    def _headers(self) -> Dict[str, str]:
        return {
            "x-rapidapi-key": self.api_key,
            "x-rapidapi-host": self.host,
        }

    def _make_request(self, endpoint: str, params: Dict[str, Any]) -> Optional[Dict]:
        """GET an endpoint and return the decoded JSON body."""
        if not self.enabled:
            logger.warning(f"{self.name} API key not configured, skipping {endpoint}")
            return None

        url = f"{self.base_url}/{endpoint}"

        try:
            logger.debug(f"Requesting {url} params={params}")
            response = self.session.get(
                url, params=params, headers=self._headers(), timeout=self.timeout
            )
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            logger.warning(f"{self.name} request to {endpoint} failed: {e}")
            return None
        except ValueError as e:
            logger.warning(f"{self.name} returned invalid JSON for {endpoint}: {e}")
            return None

    def _get_response_items(self, endpoint: str, params: Dict[str, Any]) -> Optional[List[Dict]]:
        """Return the ``response`` array of an api-sports payload.

        ``None`` means the request itself failed; an empty list means the
        provider answered with no matching items.
        """
        payload = self._make_request(endpoint, params)
        if payload is None:
            return None

        items = payload.get("response") if isinstance(payload, dict) else None
        if not isinstance(items, list):
            errors = payload.get("errors") if isinstance(payload, dict) else None
            logger.warning(f"{self.name} payload for {endpoint} has no response list: {errors}")
            return []

        return items
