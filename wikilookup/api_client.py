"""HTTP client for the MediaWiki Action API and Google Suggest.

Public Interface:
    - LookupClient: Thin requests-based client, one GET per call
    - WikiLookupError: Base exception for lookup failures
    - RequestFailedError: Transport or HTTP status failures
    - ResponseFormatError: Unparseable or unexpectedly shaped responses
    - MediaWikiAPIError: Error payloads reported by the API itself

Example:
    >>> client = LookupClient()
    >>> root = client.get_xml(client.wikipedia_url("de"), {"action": "query"})
    >>> print(root.tag)
"""

import json
import logging
import re
import xml.etree.ElementTree as ET

import requests

from .config import config

logger = logging.getLogger(__name__)

_CHARSET = re.compile(r"charset=[\"']?([\w.:-]+)", re.IGNORECASE)


class WikiLookupError(Exception):
    """Base exception for lookup errors."""

    pass


class RequestFailedError(WikiLookupError):
    """Exception raised when the HTTP request itself fails."""

    pass


class ResponseFormatError(WikiLookupError):
    """Exception raised when a response cannot be decoded."""

    pass


class MediaWikiAPIError(WikiLookupError):
    """Exception raised when the API answers with an error payload."""

    def __init__(self, code: str, info: str):
        super().__init__(f"API error {code}: {info}")
        self.code = code
        self.info = info


class LookupClient:
    """Client for the endpoints behind the lookup functions.

    Implements:
        - One blocking GET per call, no retries or caching
        - User-Agent header on every request
        - Error translation into the WikiLookupError hierarchy

    Args:
        user_agent: User-Agent header value (default: from config)
        timeout: Request timeout in seconds (default: from config)
        session: Pre-built requests session, mainly for tests

    Example:
        >>> client = LookupClient(timeout=10)
        >>> client.wikipedia_url("fr")
        'https://fr.wikipedia.org/w/api.php'
    """

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.session = session or requests.Session()
        self.session.headers.update(
            {"User-Agent": user_agent or config.get("wikipedia.user_agent")}
        )
        self.timeout = timeout if timeout is not None else config.get("wikipedia.timeout", 30)

    def wikipedia_url(self, language: str) -> str:
        """Return the Action API endpoint of one Wikipedia language edition."""
        return config.get("wikipedia.api_url").format(lang=language)

    def wikidata_url(self) -> str:
        return config.get("wikidata.api_url")

    def suggest_url(self) -> str:
        return config.get("suggest.api_url")

    def _make_request(self, url: str, params: dict) -> requests.Response:
        """Issue a single GET request.

        Args:
            url: Endpoint URL without query string
            params: Query parameters, encoded by requests

        Returns:
            The successful response

        Raises:
            RequestFailedError: On timeouts, connection errors or HTTP errors
        """
        logger.debug(f"GET {url} params={params}")
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise RequestFailedError(f"Request to {url} failed: {e}") from e
        return response

    @staticmethod
    def _declared_charset(response: requests.Response) -> str | None:
        """Return the charset named in the Content-Type header, if any."""
        match = _CHARSET.search(response.headers.get("Content-Type") or "")
        return match.group(1) if match else None

    def get_xml(self, url: str, params: dict) -> ET.Element:
        """Fetch an XML document and return its root element.

        Raises:
            RequestFailedError: If the request fails
            ResponseFormatError: If the body is not well-formed XML
            MediaWikiAPIError: If the document is a MediaWiki error payload
        """
        response = self._make_request(url, params)
        charset = self._declared_charset(response)
        try:
            # Google Suggest sends Latin-1 without a prolog declaration; the header wins
            parser = ET.XMLParser(encoding=charset) if charset else None
            root = ET.fromstring(response.content, parser=parser)
        except (ET.ParseError, LookupError) as e:
            raise ResponseFormatError(f"Malformed XML from {url}: {e}") from e

        error = root.find("error")
        if error is not None:
            raise MediaWikiAPIError(
                error.get("code", "unknown"), error.get("info", "Unknown error")
            )
        return root

    def get_json(self, url: str, params: dict) -> dict:
        """Fetch a JSON document and return it as a dict.

        Raises:
            RequestFailedError: If the request fails
            ResponseFormatError: If the body is not a JSON object
            MediaWikiAPIError: If the document is a MediaWiki error payload
        """
        response = self._make_request(url, params)
        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            raise ResponseFormatError(f"Malformed JSON from {url}: {e}") from e

        if not isinstance(data, dict):
            raise ResponseFormatError(f"Expected a JSON object from {url}")

        if "error" in data:
            error_info = data["error"] or {}
            raise MediaWikiAPIError(
                error_info.get("code", "unknown"), error_info.get("info", "Unknown error")
            )
        return data

    def close(self):
        """Close the underlying HTTP session."""
        self.session.close()
