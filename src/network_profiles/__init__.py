"""
network-profiles: Python library for resolving smart-contract deployment network profiles
"""

from importlib.metadata import PackageNotFoundError, version

from .credentials import (
    DotenvSecretSource,
    EnvSecretSource,
    SecretSource,
    fetch_credentials,
)
from .exceptions import (
    ChainIdMismatch,
    DuplicateNetwork,
    EndpointError,
    InvalidProfile,
    MalformedConfig,
    MissingSecret,
    NetworkProfileError,
    PreconditionViolated,
    UnknownNetwork,
)
from .parsers import load, load_file
from .resolver import NetworkProfileResolver, resolve
from .rpc import fetch_chain_id, verify_chain_id
from .types import ConfigState, NetworkProfile, ResolverConfig, Secret, SecretRef
from .validation import validate

try:
    __version__ = version("network-profiles")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "NetworkProfileResolver",
    "load",
    "load_file",
    "validate",
    "resolve",
    "fetch_credentials",
    "fetch_chain_id",
    "verify_chain_id",
    "NetworkProfile",
    "ResolverConfig",
    "ConfigState",
    "SecretRef",
    "Secret",
    "SecretSource",
    "EnvSecretSource",
    "DotenvSecretSource",
    "NetworkProfileError",
    "MalformedConfig",
    "DuplicateNetwork",
    "InvalidProfile",
    "UnknownNetwork",
    "PreconditionViolated",
    "MissingSecret",
    "EndpointError",
    "ChainIdMismatch",
]
