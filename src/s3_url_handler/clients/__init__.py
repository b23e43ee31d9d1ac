"""Resolved S3 client handles."""

from .s3_client import DEFAULT_REGION, Credentials, ResolvedClient

__all__ = ["DEFAULT_REGION", "Credentials", "ResolvedClient"]
