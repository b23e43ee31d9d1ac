"""Exception hierarchy for s3-url-handler."""

from typing import Optional


class S3HandlerError(Exception):
    """Base exception for all s3-url-handler errors."""

    pass


class ValidationError(S3HandlerError):
    """Raised when an s3 URL is malformed or uses another scheme."""

    pass


class CredentialFileUnreadable(S3HandlerError):
    """Raised when a credentials file exists but cannot be read.

    Only the file credential source sees this; it turns it into "no
    credentials in this directory".
    """

    pass


class CredentialsUnavailable(S3HandlerError):
    """Raised when no credential source produced a client."""

    pass


class ObjectFetchError(S3HandlerError):
    """Raised when fetching an object from a bucket fails.

    The underlying botocore exception is kept on ``cause`` and chained as
    ``__cause__``.
    """

    def __init__(
        self, message: str, bucket: str, key: str, cause: Optional[BaseException]
    ):
        super().__init__(message)
        self.bucket = bucket
        self.key = key
        self.cause = cause
