"""
Signed request dispatch for the AccessGrid API.

Every API call goes through RequestDispatcher.request(), which resolves the
signable payload, signs it, attaches the account headers, performs the HTTP
exchange and maps failures onto the exception hierarchy.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional
from urllib.parse import urlencode

import requests

from .constants import (
    HEADER_CONTENT_TYPE,
    HEADER_ACCOUNT_ID,
    HEADER_PAYLOAD_SIG,
    HEADER_USER_AGENT,
    USER_AGENT
)
from .exceptions import AccessGridError, AuthenticationError
from .payload import resolve_payload, sig_payload_param
from .signer import sign

logger = logging.getLogger(__name__)

AUTHENTICATION_FAILED_MESSAGE = "Invalid credentials"
INSUFFICIENT_BALANCE_MESSAGE = "Insufficient account balance"
REQUEST_FAILED_MESSAGE = "Request failed"


class RequestDispatcher:
    """
    Issues signed requests on behalf of one AccessGrid account.

    Holds only read-only state after construction, so one instance can be
    shared by every resource client and across threads.
    """

    def __init__(self, account_id: str, secret_key: str, base_url: str,
                 session: Optional[requests.Session] = None,
                 signer: Callable[[str, str], str] = sign,
                 timeout: Optional[float] = None,
                 user_agent: str = USER_AGENT):
        """
        Initialize the dispatcher.

        Args:
            account_id: AccessGrid account id, sent as X-ACCT-ID
            secret_key: Account secret used to sign payloads
            base_url: API base URL
            session: HTTP transport (a requests.Session is created if omitted)
            signer: Callable(secret_key, payload) returning the hex signature
            timeout: Per-request timeout in seconds, None for transport default
            user_agent: Client identification header value
        """
        self.account_id = account_id
        self._secret_key = secret_key
        self.base_url = base_url.rstrip('/')
        self.signer = signer
        self.timeout = timeout
        self.user_agent = user_agent

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def _build_url(self, path: str, params=None) -> str:
        url = f"{self.base_url}{path}"
        if params:
            query = urlencode(params)
            if query:
                url = self._append_query(url, query)
        return url

    @staticmethod
    def _append_query(url: str, query: str) -> str:
        separator = '&' if '?' in url else '?'
        return f"{url}{separator}{query}"

    def _build_headers(self, signature: str, headers: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        merged = dict(headers or {})
        merged.update({
            HEADER_CONTENT_TYPE: 'application/json',
            HEADER_ACCOUNT_ID: self.account_id,
            HEADER_PAYLOAD_SIG: signature,
            HEADER_USER_AGENT: self.user_agent
        })
        return merged

    @staticmethod
    def _raise_for_status(status_code: int, data: Any):
        """Raise the typed error matching a failed response."""
        if status_code == 401:
            raise AuthenticationError(
                AUTHENTICATION_FAILED_MESSAGE, status_code=status_code, response_body=data
            )

        if status_code == 402:
            raise AccessGridError(
                INSUFFICIENT_BALANCE_MESSAGE, status_code=status_code, response_body=data
            )

        message = None
        if isinstance(data, dict):
            message = data.get('message')
        raise AccessGridError(
            message or REQUEST_FAILED_MESSAGE, status_code=status_code, response_body=data
        )

    def request(self, method: str, path: str, body: Optional[Mapping[str, Any]] = None,
                params=None, headers: Optional[Mapping[str, str]] = None) -> Any:
        """
        Make a signed request and return the decoded JSON response.

        Args:
            method: HTTP method
            path: URL path (relative to base_url)
            body: JSON body for POST/PUT/PATCH
            params: Query parameters (mapping or sequence of pairs)
            headers: Extra headers; the authentication headers always win

        Returns:
            Parsed response body

        Raises:
            AuthenticationError: On HTTP 401
            AccessGridError: On any other failure
        """
        method = method.upper()

        try:
            url = self._build_url(path, params)
            resolved = resolve_payload(method, path, body)
            signature = self.signer(self._secret_key, resolved.payload_to_sign)

            if resolved.resource_id is not None and (
                method == 'GET' or (method == 'POST' and not resolved.payload_to_send)
            ):
                url = self._append_query(url, sig_payload_param(resolved.payload_to_sign))

            kwargs = {'headers': self._build_headers(signature, headers)}
            if method != 'GET' and resolved.payload_to_send:
                kwargs['data'] = resolved.payload_to_send.encode('utf-8')
            if self.timeout is not None:
                kwargs['timeout'] = self.timeout

            logger.debug("AccessGrid %s %s", method, path)
            response = self.session.request(method, url, **kwargs)

            # Decoded for every status; error bodies carry the message
            data = response.json()
        except AccessGridError:
            raise
        except Exception as e:
            raise AccessGridError(f"API request failed: {e}") from e

        logger.debug("AccessGrid %s %s -> %s", method, path, response.status_code)
        if not 200 <= response.status_code < 300:
            logger.warning("AccessGrid %s %s failed with status %s", method, path, response.status_code)
            self._raise_for_status(response.status_code, data)

        return data

    def get(self, path: str, **kwargs) -> Any:
        """Make signed GET request."""
        return self.request('GET', path, **kwargs)

    def post(self, path: str, body=None, **kwargs) -> Any:
        """Make signed POST request."""
        return self.request('POST', path, body=body, **kwargs)

    def put(self, path: str, body=None, **kwargs) -> Any:
        """Make signed PUT request."""
        return self.request('PUT', path, body=body, **kwargs)

    def patch(self, path: str, body=None, **kwargs) -> Any:
        """Make signed PATCH request."""
        return self.request('PATCH', path, body=body, **kwargs)

    def delete(self, path: str, **kwargs) -> Any:
        """Make signed DELETE request."""
        return self.request('DELETE', path, **kwargs)

    def close(self):
        """Close the HTTP session if this dispatcher created it."""
        if self.session and self._owns_session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
