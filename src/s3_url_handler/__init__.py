"""urllib support for ``s3://`` URLs with automatic credential discovery.

URLs look like ``s3://s3-<region>.amazonaws.com/<bucket>/<key...>``. The
region in the host part is currently ignored, and credentials in the URL
are rejected.

Credentials are looked up in this order, first match wins:
    1. The ``artifacts`` AWS profile
    2. The AWS default credential chain
    3. A ``.s3credentials`` file in the working directory, ``$HOME``,
       ``$HOME/.sbt`` or ``$HOME/.coursier``

The region comes from the AWS default region chain for 1 and 2, from the
``region`` entry of the file for 3, and is ``eu-west-1`` otherwise.

Recommended Usage:
    Install the handler into urllib once, then open URLs as usual:

    >>> from s3_url_handler import install
    >>> install()
    >>> import urllib.request
    >>> urllib.request.urlopen("s3://s3-eu-west-1.amazonaws.com/bucket/lib.jar")

Advanced Usage:
    Build a resolver with your own credential sources:

    >>> from s3_url_handler import CredentialResolver, S3HandlerFactory, build_opener
    >>> from pathlib import Path
    >>> from s3_url_handler.credentials import FileCredentialSource
    >>> resolver = CredentialResolver([FileCredentialSource(Path("/etc/build"))])
    >>> opener = build_opener(S3HandlerFactory(resolver))
"""

__version__ = "0.1.0"

from .clients import Credentials, ResolvedClient
from .core.exceptions import (
    CredentialsUnavailable,
    ObjectFetchError,
    S3HandlerError,
    ValidationError,
)
from .credentials import CredentialResolver, get_default_resolver
from .protocol import (
    S3Connection,
    S3Handler,
    S3HandlerFactory,
    build_opener,
    install,
    open_s3_url,
    parse_s3_url,
)

__all__ = [
    # Handler registration
    "S3Handler",
    "S3HandlerFactory",
    "build_opener",
    "install",
    "open_s3_url",
    # Protocol
    "S3Connection",
    "parse_s3_url",
    # Credentials
    "CredentialResolver",
    "Credentials",
    "ResolvedClient",
    "get_default_resolver",
    # Errors
    "CredentialsUnavailable",
    "ObjectFetchError",
    "S3HandlerError",
    "ValidationError",
]
