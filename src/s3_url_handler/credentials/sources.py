"""Credential sources tried in order by the credential resolver.

Each source answers one question, "can you build a client?", with either a
``ResolvedClient`` or ``None``. Lookup failures are never raised out of a
source; they only mean the next source gets its turn.

Default order:
    1. The ``artifacts`` AWS profile
    2. The AWS default credential chain (environment, shared default
       profile, container and instance metadata, ...)
    3. A ``.s3credentials`` file in the working directory, ``$HOME``,
       ``$HOME/.sbt`` and ``$HOME/.coursier``
"""

from pathlib import Path
from typing import Optional, Protocol

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from s3_url_handler.clients import DEFAULT_REGION, Credentials, ResolvedClient
from s3_url_handler.core import get_logger
from s3_url_handler.core.config import Settings
from s3_url_handler.core.exceptions import CredentialFileUnreadable

from .credential_file import ACCESS_KEY, REGION, SECRET_KEY, read_credential_file

logger = get_logger(__name__)


class CredentialSource(Protocol):
    """Protocol for one step of the credential chain."""

    def describe(self) -> str:
        """Human readable name of this source."""
        ...

    def try_resolve(self) -> Optional[ResolvedClient]:
        """Return a client if this source has credentials, else None."""
        ...


def default_chain_region(fallback: str = DEFAULT_REGION) -> str:
    """Region from the AWS default region chain, or ``fallback``."""
    try:
        region = boto3.session.Session().region_name
    except (BotoCoreError, ClientError) as e:
        logger.debug("Default region lookup failed", error=str(e))
        region = None
    return region or fallback


class ProfileCredentialSource:
    """Credentials from a named AWS profile."""

    def __init__(
        self,
        profile_name: str = "artifacts",
        default_region: str = DEFAULT_REGION,
        endpoint_url: Optional[str] = None,
    ):
        self.profile_name = profile_name
        self.default_region = default_region
        self.endpoint_url = endpoint_url

    def describe(self) -> str:
        return f"profile '{self.profile_name}'"

    def try_resolve(self) -> Optional[ResolvedClient]:
        try:
            session = boto3.session.Session(profile_name=self.profile_name)
            found = session.get_credentials()
            frozen = found.get_frozen_credentials() if found else None
        except (BotoCoreError, ClientError) as e:
            logger.debug(
                "Profile lookup failed", profile=self.profile_name, error=str(e)
            )
            return None

        if frozen is None or not frozen.access_key or not frozen.secret_key:
            return None

        return ResolvedClient(
            Credentials(frozen.access_key, frozen.secret_key, frozen.token),
            default_chain_region(self.default_region),
            self.describe(),
            self.endpoint_url,
        )


class DefaultChainCredentialSource:
    """Credentials and region from the AWS default provider chains."""

    def __init__(
        self, default_region: str = DEFAULT_REGION, endpoint_url: Optional[str] = None
    ):
        self.default_region = default_region
        self.endpoint_url = endpoint_url

    def describe(self) -> str:
        return "default AWS credential chain"

    def try_resolve(self) -> Optional[ResolvedClient]:
        try:
            session = boto3.session.Session()
            found = session.get_credentials()
            frozen = found.get_frozen_credentials() if found else None
            region = session.region_name
        except (BotoCoreError, ClientError) as e:
            logger.debug("Default credential chain lookup failed", error=str(e))
            return None

        if frozen is None or not frozen.access_key or not frozen.secret_key:
            return None

        provider = getattr(found, "method", None)
        source = f"{self.describe()} ({provider})" if provider else self.describe()
        return ResolvedClient(
            Credentials(frozen.access_key, frozen.secret_key, frozen.token),
            region or self.default_region,
            source,
            self.endpoint_url,
        )


class FileCredentialSource:
    """Credentials from a ``.s3credentials`` file in one directory."""

    def __init__(
        self,
        directory: Path,
        filename: str = ".s3credentials",
        default_region: str = DEFAULT_REGION,
        endpoint_url: Optional[str] = None,
    ):
        self.path = Path(directory) / filename
        self.default_region = default_region
        self.endpoint_url = endpoint_url

    def describe(self) -> str:
        return str(self.path)

    def try_resolve(self) -> Optional[ResolvedClient]:
        try:
            entries = read_credential_file(self.path)
        except CredentialFileUnreadable as e:
            logger.debug("Skipping unreadable credentials file", error=str(e))
            return None

        if entries is None:
            return None

        access_key = entries.get(ACCESS_KEY)
        secret_key = entries.get(SECRET_KEY)
        if not access_key or not secret_key:
            logger.debug("Credentials file is incomplete", path=str(self.path))
            return None

        return ResolvedClient(
            Credentials(access_key, secret_key),
            entries.get(REGION) or self.default_region,
            self.describe(),
            self.endpoint_url,
        )


def candidate_directories() -> list[Path]:
    """Directories searched for a credentials file, in order.

    A working directory or home directory that cannot be determined is
    left out.
    """
    directories: list[Path] = []
    try:
        directories.append(Path.cwd().absolute())
    except OSError as e:
        logger.debug("Working directory unavailable", error=str(e))

    try:
        home = Path.home()
    except RuntimeError as e:
        logger.debug("Home directory unavailable", error=str(e))
    else:
        directories.extend([home, home / ".sbt", home / ".coursier"])
    return directories


def default_credential_sources(config: Settings) -> list[CredentialSource]:
    """Build the standard credential chain from settings."""
    sources: list[CredentialSource] = [
        ProfileCredentialSource(
            config.profile_name, config.default_region, config.endpoint_url
        ),
        DefaultChainCredentialSource(config.default_region, config.endpoint_url),
    ]
    sources.extend(
        FileCredentialSource(
            directory,
            config.credentials_filename,
            config.default_region,
            config.endpoint_url,
        )
        for directory in candidate_directories()
    )
    return sources
