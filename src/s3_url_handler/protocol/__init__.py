"""s3 URL protocol handling."""

from .connection import ConnectionState, S3Connection
from .handler import S3Handler, S3HandlerFactory, build_opener, install, open_s3_url
from .url import S3_SCHEME, ParsedS3Url, parse_s3_url

__all__ = [
    "ConnectionState",
    "ParsedS3Url",
    "S3Connection",
    "S3Handler",
    "S3HandlerFactory",
    "S3_SCHEME",
    "build_opener",
    "install",
    "open_s3_url",
    "parse_s3_url",
]
