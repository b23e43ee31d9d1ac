"""Credential discovery for s3 URLs."""

from .credential_file import parse_credential_lines, read_credential_file
from .resolver import CredentialResolver, get_default_resolver
from .sources import (
    CredentialSource,
    DefaultChainCredentialSource,
    FileCredentialSource,
    ProfileCredentialSource,
    candidate_directories,
    default_credential_sources,
)

__all__ = [
    "CredentialResolver",
    "CredentialSource",
    "DefaultChainCredentialSource",
    "FileCredentialSource",
    "ProfileCredentialSource",
    "candidate_directories",
    "default_credential_sources",
    "get_default_resolver",
    "parse_credential_lines",
    "read_credential_file",
]
