"""Resolved S3 client handle.

A ``ResolvedClient`` pairs the credentials and region found by a credential
source with the boto3 client built from them. It is created once by the
credential resolver and then shared read-only by every s3 URL fetch in the
process.

Credentials are captured as static values at resolution time. They are
never refreshed, so temporary credentials expire with the process holding
them.
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import boto3

from s3_url_handler.core import get_logger

logger = get_logger(__name__)

DEFAULT_REGION = "eu-west-1"


@dataclass(frozen=True)
class Credentials:
    """AWS access key pair, with an optional session token."""

    access_key_id: str
    secret_key: str = field(repr=False)
    session_token: Optional[str] = field(default=None, repr=False)

    @property
    def masked_access_key_id(self) -> str:
        """Access key id safe for logs, e.g. ``AKIA************MPLE``."""
        if len(self.access_key_id) <= 8:
            return "*" * len(self.access_key_id)
        middle = "*" * (len(self.access_key_id) - 8)
        return f"{self.access_key_id[:4]}{middle}{self.access_key_id[-4:]}"


class ResolvedClient:
    """S3 client built from resolved credentials and region."""

    def __init__(
        self,
        credentials: Credentials,
        region: str,
        source: str,
        endpoint_url: Optional[str] = None,
    ):
        """Initialize the resolved client.

        Args:
            credentials: Credentials found by a credential source
            region: AWS region the client talks to
            source: Where the credentials came from, for diagnostics
            endpoint_url: Custom endpoint for S3-compatible services
        """
        self.credentials = credentials
        self.region = region
        self.source = source
        self.endpoint_url = endpoint_url
        self._client = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return (
            f"ResolvedClient(source={self.source!r}, region={self.region!r}, "
            f"access_key_id={self.credentials.masked_access_key_id!r})"
        )

    @property
    def client(self):
        """Get or create the boto3 S3 client."""
        if self._client is None:
            with self._lock:
                if self._client is None:
                    self._client = self._create_client()
        return self._client

    def _create_client(self):
        """Create boto3 S3 client from the resolved credentials."""
        kwargs: Dict[str, Any] = {"region_name": self.region}

        if self.endpoint_url:
            kwargs["endpoint_url"] = self.endpoint_url

        # A dedicated session; the boto3 default session is not thread safe
        session = boto3.session.Session(
            aws_access_key_id=self.credentials.access_key_id,
            aws_secret_access_key=self.credentials.secret_key,
            aws_session_token=self.credentials.session_token,
        )
        client = session.client("s3", **kwargs)  # type: ignore
        logger.info(
            "S3 client created",
            source=self.source,
            region=self.region,
            access_key_id=self.credentials.masked_access_key_id,
        )
        return client

    def get_object(self, bucket: str, key: str) -> Dict[str, Any]:
        """Issue a GET for ``bucket``/``key``.

        Returns:
            The boto3 ``get_object`` response; ``Body`` is the byte stream

        Raises:
            botocore.exceptions.ClientError: If S3 rejects the request
            botocore.exceptions.BotoCoreError: On transport failures
        """
        return self.client.get_object(Bucket=bucket, Key=key)
