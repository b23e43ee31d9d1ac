"""urllib integration for s3 URLs.

Usage:
    >>> from s3_url_handler import install
    >>> install()
    >>> import urllib.request
    >>> url = "s3://s3-eu-west-1.amazonaws.com/bucket/a/b.jar"
    >>> with urllib.request.urlopen(url) as r:
    ...     data = r.read()
"""

import urllib.request
import urllib.response
from email.message import Message
from typing import Any, Dict, Optional

from s3_url_handler.core import get_logger
from s3_url_handler.credentials import CredentialResolver, get_default_resolver

from .connection import S3Connection
from .url import S3_SCHEME

logger = get_logger(__name__)

_HEADERS = {
    "ContentLength": "Content-Length",
    "ContentType": "Content-Type",
    "ETag": "ETag",
    "LastModified": "Last-Modified",
}


def _response_headers(response: Dict[str, Any]) -> Message:
    headers = Message()
    for field, header in _HEADERS.items():
        value = response.get(field)
        if value is None:
            continue
        if header == "Last-Modified" and hasattr(value, "strftime"):
            value = value.strftime("%a, %d %b %Y %H:%M:%S GMT")
        headers[header] = str(value)
    return headers


class S3Handler(urllib.request.BaseHandler):
    """urllib handler serving ``s3://`` URLs from S3."""

    def __init__(self, resolver: CredentialResolver):
        self.resolver = resolver

    def s3_open(self, req: urllib.request.Request):
        """Open the object addressed by ``req`` as a urllib response."""
        url = req.full_url
        connection = S3Connection(url, self.resolver)
        connection.connect()
        stream = connection.get_input_stream()
        assert connection.response is not None
        return urllib.response.addinfourl(
            stream, _response_headers(connection.response), url, code=200
        )


class S3HandlerFactory:
    """Creates s3 handlers for the host URL machinery."""

    def __init__(self, resolver: Optional[CredentialResolver] = None):
        """Initialize the factory.

        Args:
            resolver: Credential resolver shared by every handler; defaults to
                the process-wide resolver
        """
        self._resolver = resolver

    @property
    def resolver(self) -> CredentialResolver:
        if self._resolver is None:
            self._resolver = get_default_resolver()
        return self._resolver

    def create_handler(self, scheme: str) -> Optional[S3Handler]:
        """Return a new handler for ``s3``, None for any other scheme."""
        if scheme.lower() != S3_SCHEME:
            return None
        return S3Handler(self.resolver)


def build_opener(
    factory: Optional[S3HandlerFactory] = None,
) -> urllib.request.OpenerDirector:
    """urllib opener with the standard handlers plus s3."""
    factory = factory or S3HandlerFactory()
    handler = factory.create_handler(S3_SCHEME)
    return urllib.request.build_opener(handler)


def install(
    factory: Optional[S3HandlerFactory] = None,
) -> urllib.request.OpenerDirector:
    """Install an s3-aware opener as urllib's global opener."""
    opener = build_opener(factory)
    urllib.request.install_opener(opener)
    logger.info("s3 URL handler installed")
    return opener


def open_s3_url(url: str, factory: Optional[S3HandlerFactory] = None):
    """Open one s3 URL without touching the global opener."""
    return build_opener(factory).open(url)
