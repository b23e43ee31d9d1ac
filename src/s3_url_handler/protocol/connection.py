"""Connection to a single object addressed by an s3 URL."""

from enum import Enum
from typing import Any, Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError

from s3_url_handler.core import get_logger, get_tracer
from s3_url_handler.core.exceptions import CredentialsUnavailable, ObjectFetchError
from s3_url_handler.credentials import CredentialResolver

from .url import ParsedS3Url, parse_s3_url

logger = get_logger(__name__)
tracer = get_tracer(__name__)


class ConnectionState(str, Enum):
    """Lifecycle of an S3Connection."""

    unconnected = "unconnected"
    stream_opened = "stream_opened"


class S3Connection:
    """Opens a byte stream over the object an s3 URL points at.

    Nothing happens on construction or ``connect()``. Credentials are
    resolved and the object requested only when the stream is asked for.
    There is exactly one GET per successful stream request and no retry.
    """

    def __init__(self, url: str, resolver: CredentialResolver):
        self.url = url
        self.resolver = resolver
        self.state = ConnectionState.unconnected
        self.response: Optional[Dict[str, Any]] = None

    def connect(self) -> None:
        """No-op; all work happens in ``get_input_stream``."""

    def get_input_stream(self):
        """Resolve credentials, GET the object and return its body stream.

        Returns:
            The streaming body from S3, unbuffered and untransformed

        Raises:
            ValidationError: If the URL is not a valid s3 URL
            CredentialsUnavailable: If no credential source has credentials
            ObjectFetchError: If the GET fails
        """
        if self.response is not None:
            return self.response["Body"]

        location = parse_s3_url(self.url)

        client = self.resolver.resolve()
        if client is None:
            raise CredentialsUnavailable(
                f"Failed to retrieve credentials for {self.url}; searched: "
                + ", ".join(source.describe() for source in self.resolver.sources)
            )

        self.response = self._fetch(client, location)
        self.state = ConnectionState.stream_opened
        return self.response["Body"]

    def _fetch(self, client, location: ParsedS3Url) -> Dict[str, Any]:
        with tracer.start_as_current_span("s3.get_object") as span:
            span.set_attribute("s3.bucket", location.bucket)
            span.set_attribute("s3.key", location.key)
            try:
                response = client.get_object(location.bucket, location.key)
            except (ClientError, BotoCoreError) as e:
                error_msg = (
                    f"Failed to fetch s3://{location.bucket}/{location.key}: {e}"
                )
                logger.error(
                    error_msg, bucket=location.bucket, key=location.key, error=str(e)
                )
                raise ObjectFetchError(
                    error_msg, bucket=location.bucket, key=location.key, cause=e
                ) from e

        logger.info(
            "S3 object opened",
            bucket=location.bucket,
            key=location.key,
            content_length=response.get("ContentLength"),
        )
        return response
