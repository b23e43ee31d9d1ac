"""Core utilities and shared components for s3-url-handler."""

from .config import settings
from .exceptions import S3HandlerError, ValidationError
from .observability import get_logger, get_tracer

__all__ = ["settings", "S3HandlerError", "ValidationError", "get_logger", "get_tracer"]
