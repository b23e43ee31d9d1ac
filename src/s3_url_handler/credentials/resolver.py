"""Credential resolution with a compute-once cache."""

import threading
from typing import Optional, Sequence

from s3_url_handler.clients import ResolvedClient
from s3_url_handler.core import get_logger, get_tracer, settings

from .sources import CredentialSource, default_credential_sources

logger = get_logger(__name__)
tracer = get_tracer(__name__)

_UNRESOLVED = object()


class CredentialResolver:
    """Tries credential sources in order and remembers the outcome.

    The chain runs at most once per resolver. Concurrent first callers wait
    for the one doing the work, and everybody sees the same client, or None
    when no source had credentials. The outcome is never invalidated.
    """

    def __init__(self, sources: Sequence[CredentialSource]):
        """Initialize the resolver.

        Args:
            sources: Credential sources in precedence order
        """
        self._sources = tuple(sources)
        self._result: object = _UNRESOLVED
        self._lock = threading.Lock()

    @property
    def sources(self) -> tuple[CredentialSource, ...]:
        """Credential sources in precedence order."""
        return self._sources

    @property
    def resolved(self) -> bool:
        """Whether the chain has already run."""
        return self._result is not _UNRESOLVED

    def resolve(self) -> Optional[ResolvedClient]:
        """Return the resolved client, running the chain on first use."""
        result = self._result
        if result is _UNRESOLVED:
            with self._lock:
                if self._result is _UNRESOLVED:
                    self._result = self._run_chain()
                result = self._result
        return result  # type: ignore[return-value]

    def _run_chain(self) -> Optional[ResolvedClient]:
        with tracer.start_as_current_span("credentials.resolve") as span:
            for source in self._sources:
                client = source.try_resolve()
                if client is not None:
                    logger.info(
                        "Found credentials",
                        source=client.source,
                        region=client.region,
                    )
                    span.set_attribute("credentials.source", client.source)
                    return client

            logger.warning(
                "No credentials found",
                searched=[source.describe() for source in self._sources],
            )
            span.set_attribute("credentials.source", "none")
            return None


_default_resolver: Optional[CredentialResolver] = None
_default_lock = threading.Lock()


def get_default_resolver() -> CredentialResolver:
    """Process-wide resolver built from the standard credential chain."""
    global _default_resolver
    if _default_resolver is None:
        with _default_lock:
            if _default_resolver is None:
                _default_resolver = CredentialResolver(
                    default_credential_sources(settings)
                )
    return _default_resolver
