"""
HttpClient: a thin wrapper around a pooled requests session.

Every request carries the JSON content type, a fixed user agent and the
Clockify API key. Responses are returned as fully-read HTTPResponse objects.
"""
import json
import logging
from typing import Optional, Dict, Any, List

import requests
from requests.adapters import HTTPAdapter

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Clockify-Reporter"
DEFAULT_TIMEOUT = 60
POOL_SIZE = 100

# Verbs that may carry a request body
PAYLOAD_METHODS = {"POST", "PUT", "PATCH", "DELETE"}


class HTTPResponse:
    """A fully-read HTTP response."""

    def __init__(self, status: int, headers: Dict[str, List[str]], body: bytes):
        self.status = status
        self.headers = headers
        self.body = body

    def __repr__(self) -> str:
        return f"HTTPResponse(status={self.status}, body={len(self.body)} bytes)"


def new_session() -> requests.Session:
    """Create a session with a bounded connection pool."""
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=POOL_SIZE, pool_maxsize=POOL_SIZE)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


class HttpClient:
    """HTTP client injecting the Clockify default headers into every request."""

    def __init__(self, api_key: str, timeout: float = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None,
                 user_agent: str = DEFAULT_USER_AGENT):
        """Initialize the HttpClient.

        Args:
            api_key: Clockify API key sent as X-Api-Key
            timeout: Overall timeout in seconds applied to each request
            session: Session to use (optional, a pooled one is created otherwise)
            user_agent: User-Agent header value
        """
        self.api_key = api_key
        self.timeout = timeout
        self.user_agent = user_agent
        self.session = session if session is not None else new_session()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()

    def default_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
            "X-Api-Key": self.api_key,
        }

    def request(self, method: str, url: str, payload: Optional[bytes] = None,
                headers: Optional[Dict[str, str]] = None) -> HTTPResponse:
        """Send a request and read the whole response body.

        Args:
            method: HTTP verb, any case
            url: Absolute URL
            payload: Request body, only sent for POST, PUT, PATCH and DELETE
            headers: Headers overriding the defaults by key (optional)

        Returns:
            HTTPResponse with status, headers and raw body

        Raises:
            requests.RequestException: If the connection fails, times out or
                the body cannot be read
        """
        merged = self.default_headers()
        if headers:
            merged.update(headers)

        method = method.upper()
        data = payload if method in PAYLOAD_METHODS and payload else None

        logger.debug("%s %s", method, url)
        with self.session.request(method, url, data=data, headers=merged,
                                  timeout=self.timeout) as resp:
            body = resp.content
            response_headers = {name: [value] for name, value in resp.headers.items()}
            status = resp.status_code
        logger.debug("%s %s -> %s (%d bytes)", method, url, status, len(body))

        return HTTPResponse(status, response_headers, body)

    def head(self, url: str, headers: Optional[Dict[str, str]] = None) -> HTTPResponse:
        return self.request("HEAD", url, None, headers or {"Cache-Control": "no-cache"})

    def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> HTTPResponse:
        return self.request("GET", url, None, headers or {"Cache-Control": "no-cache"})

    def post(self, url: str, payload: Optional[bytes] = None,
             headers: Optional[Dict[str, str]] = None) -> HTTPResponse:
        return self.request("POST", url, payload, headers or {"Content-Type": "application/json"})

    def put(self, url: str, payload: Optional[bytes] = None,
            headers: Optional[Dict[str, str]] = None) -> HTTPResponse:
        return self.request("PUT", url, payload, headers or {"Content-Type": "application/json"})

    def patch(self, url: str, payload: Optional[bytes] = None,
              headers: Optional[Dict[str, str]] = None) -> HTTPResponse:
        return self.request("PATCH", url, payload, headers or {"Content-Type": "application/json"})

    def delete(self, url: str, payload: Optional[bytes] = None,
               headers: Optional[Dict[str, str]] = None) -> HTTPResponse:
        return self.request("DELETE", url, payload, headers or {"Content-Type": "application/json"})

    @staticmethod
    def as_json(body: bytes) -> Dict[str, Any]:
        """Parse a response body into a string-keyed mapping.

        Raises:
            ValueError: If the body is not valid JSON or not a JSON object
        """
        data = json.loads(body)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return data
