"""Parsing of ``s3://`` URLs."""

from dataclasses import dataclass
from urllib.parse import urlsplit

from s3_url_handler.core import get_logger
from s3_url_handler.core.exceptions import ValidationError

logger = get_logger(__name__)

S3_SCHEME = "s3"


@dataclass(frozen=True)
class ParsedS3Url:
    """Bucket and key addressed by an s3 URL.

    ``authority`` is the host part, e.g. ``s3-eu-west-1.amazonaws.com``. It is
    kept for diagnostics only; the region always comes from the resolved
    credentials.
    """

    bucket: str
    key: str
    authority: str = ""


def parse_s3_url(url: str) -> ParsedS3Url:
    """Parse ``s3://<authority>/<bucket>/<key...>``.

    The first path segment is the bucket and the rest, rejoined with ``/``,
    is the key. The path is used as is, without percent-decoding.

    Raises:
        ValidationError: If the scheme is not s3, or bucket or key is missing
    """
    parts = urlsplit(url)
    if parts.scheme.lower() != S3_SCHEME:
        raise ValidationError(f"Not an s3 URL (scheme {parts.scheme!r})")
    if "@" in parts.netloc:
        raise ValidationError(
            f"Credentials are not accepted in s3 URLs (host {parts.hostname})"
        )

    path = parts.path[1:] if parts.path.startswith("/") else parts.path
    bucket, _, key = path.partition("/")

    if not bucket:
        raise ValidationError(f"Invalid s3 URL, missing bucket: {url}")
    if not key:
        raise ValidationError(f"Invalid s3 URL, missing object key: {url}")

    logger.debug("S3 URL parsed", bucket=bucket, key=key, authority=parts.netloc)
    return ParsedS3Url(bucket=bucket, key=key, authority=parts.netloc)
