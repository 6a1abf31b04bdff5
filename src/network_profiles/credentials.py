"""Secret-fetch interface for network-profiles library.

Profiles only carry references to signing credentials. The values are looked
up here, at the point of use, and handed back wrapped in Secret so they do not
show up in logs or tracebacks.
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple, Union

from dotenv import dotenv_values

from .constants import DOTENV_SCHEME, ENV_SCHEME
from .exceptions import MissingSecret
from .types import NetworkProfile, Secret, SecretRef

logger = logging.getLogger(__name__)


class SecretSource(ABC):
    """Base class for places credential values can be read from."""

    scheme: str = ""

    @abstractmethod
    def get(self, name: str) -> Optional[str]:
        """Return the value for name, or None if it is not set."""


class EnvSecretSource(SecretSource):
    """Reads credentials from environment variables."""

    scheme = ENV_SCHEME

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ

    def get(self, name: str) -> Optional[str]:
        return self._environ.get(name)


class DotenvSecretSource(SecretSource):
    """Reads credentials from a .env file without touching os.environ."""

    scheme = DOTENV_SCHEME

    def __init__(self, dotenv_path: Union[Path, str] = ".env"):
        self._path = Path(dotenv_path)
        self._values: Optional[Dict[str, Optional[str]]] = None

    def get(self, name: str) -> Optional[str]:
        if self._values is None:
            # Missing files yield an empty mapping
            self._values = dict(dotenv_values(self._path))
        return self._values.get(name)


def default_sources() -> Dict[str, SecretSource]:
    """
    Get the standard secret sources keyed by reference scheme.

    Returns:
        {"env": EnvSecretSource(), "dotenv": DotenvSecretSource(".env")}
    """
    return {ENV_SCHEME: EnvSecretSource(), DOTENV_SCHEME: DotenvSecretSource()}


def fetch_secret(
    network: str, ref: SecretRef, sources: Mapping[str, SecretSource]
) -> Secret:
    """
    Fetch one credential value.

    Args:
        network: Network name for error messages
        ref: Credential reference
        sources: Secret sources keyed by scheme

    Returns:
        Secret wrapping the value

    Raises:
        MissingSecret: If no source serves the scheme or the value is unset/empty
    """
    source = sources.get(ref.scheme)
    value = source.get(ref.name) if source is not None else None
    if not value:
        raise MissingSecret(network, str(ref))
    return Secret(value)


def fetch_credentials(
    profile: NetworkProfile, sources: Optional[Mapping[str, SecretSource]] = None
) -> Tuple[Secret, ...]:
    """
    Fetch every signing credential of a profile, in declaration order.

    Args:
        profile: Resolved network profile
        sources: Secret sources keyed by scheme (defaults to default_sources())

    Returns:
        Tuple of Secret, empty for local networks

    Raises:
        MissingSecret: If any referenced credential is not available
    """
    if sources is None:
        sources = default_sources()

    secrets = tuple(
        fetch_secret(profile.name, ref, sources) for ref in profile.signing_credentials
    )
    logger.debug("Fetched %d credential(s) for network '%s'", len(secrets), profile.name)
    return secrets
