"""Main API for network-profiles library."""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

from .exceptions import PreconditionViolated, UnknownNetwork
from .parsers import load, load_file
from .paths import get_config_path
from .types import NetworkProfile, ResolverConfig
from .validation import validate

logger = logging.getLogger(__name__)


def resolve(config: ResolverConfig, name: Optional[str] = None) -> NetworkProfile:
    """
    Look up a network profile by exact name.

    Args:
        config: Validated configuration
        name: Network name (case-sensitive); None selects the default network

    Returns:
        The stored NetworkProfile (not a copy)

    Raises:
        PreconditionViolated: If config has not been through validate()
        UnknownNetwork: If no network has that name
    """
    if not config.is_validated:
        raise PreconditionViolated(
            "resolve() called on an unvalidated configuration; call validate() first"
        )

    if name is None:
        if config.default_network is None:
            raise UnknownNetwork("<default>")
        name = config.default_network

    try:
        profile = config.networks[name]
    except KeyError:
        raise UnknownNetwork(name) from None

    logger.debug(
        "Resolved network '%s' (remote=%s, %d credential(s))",
        name,
        profile.is_remote,
        len(profile.signing_credentials),
    )
    return profile


class NetworkProfileResolver:
    """Serves profile lookups from a validated configuration."""

    def __init__(self, config: ResolverConfig):
        """
        Initialize the resolver.

        Args:
            config: Configuration from load(); validated here if it is not already

        Raises:
            InvalidProfile: If a profile violates an invariant
        """
        if not config.is_validated:
            config = validate(config)
        self._config = config

    @classmethod
    def from_mapping(cls, source: Mapping[str, Any]) -> "NetworkProfileResolver":
        """
        Load and validate a parsed declarative source.

        Raises:
            MalformedConfig: If the source has the wrong shape
            DuplicateNetwork: If two networks share a name
            InvalidProfile: If a profile violates an invariant
        """
        return cls(load(source))

    @classmethod
    def from_file(
        cls, config_path: Optional[Union[Path, str]] = None
    ) -> "NetworkProfileResolver":
        """
        Load and validate a JSON configuration file.

        Args:
            config_path: Path to the file
                         If None, uses $NETWORK_PROFILES_CONFIG or ./networks.json

        Raises:
            MalformedConfig: If the file is missing, unreadable or has the wrong shape
            DuplicateNetwork: If two networks share a name
            InvalidProfile: If a profile violates an invariant
        """
        return cls(load_file(get_config_path(config_path)))

    @property
    def config(self) -> ResolverConfig:
        return self._config

    @property
    def compiler_version(self) -> Optional[str]:
        return self._config.compiler_version

    def network_names(self) -> Tuple[str, ...]:
        """
        Get all declared network names.

        Returns:
            Network names in sorted order
        """
        return self._config.network_names()

    def has_network(self, name: str) -> bool:
        """
        Check if a network is declared.

        Args:
            name: Network name to check

        Returns:
            True if network exists, False otherwise
        """
        return name in self._config.networks

    def resolve(self, name: Optional[str] = None) -> NetworkProfile:
        """
        Get the profile for a network.

        Args:
            name: Network name; None selects the configured default network

        Returns:
            NetworkProfile

        Raises:
            UnknownNetwork: If network not declared
        """
        return resolve(self._config, name)
