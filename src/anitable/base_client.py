"""Base API client with common functionality."""

import logging
from typing import Any, Optional

import requests

from .errors import DecodeError, RequestError

logger = logging.getLogger(__name__)


class BaseAPIClient:
    """Base class for API clients posting form data and reading JSON."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None,
                 headers: Optional[dict] = None):
        """Initialize API client with a base address and an optional session."""
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()

        # Sent per request so a caller-supplied session is left untouched
        self._headers = {"Accept": "application/json"}
        if headers:
            self._headers.update(headers)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def session(self) -> requests.Session:
        return self._session

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _post_form(self, path: str, data: dict, service_name: str) -> Any:
        """POST `data` form-encoded to `path` and return the decoded JSON body."""
        url = f"{self._base_url}{path}"
        logger.debug(f"POST {url} {data}")

        try:
            response = self._session.post(url, data=data, headers=self._headers)
        except requests.RequestException as e:
            logger.error(f"{service_name} request to {url} failed: {e}")
            raise RequestError(f"{service_name} request to {url} failed: {e}") from e

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.error(f"{service_name} API error: {response.status_code}")
            logger.debug(f"Response: {response.text}")
            raise RequestError(f"{service_name} returned HTTP {response.status_code} for {url}") from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{service_name} returned a non-JSON body for {url}")
            raise DecodeError(f"{service_name} returned invalid JSON for {url}") from e
