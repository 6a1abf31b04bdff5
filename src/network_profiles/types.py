"""Data types and dataclasses for network-profiles library."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .constants import ENV_SCHEME, LITERAL_KEY_PATTERN, SECRET_NAME_PATTERN, SECRET_SCHEMES


class ConfigState(Enum):
    """
    Lifecycle state of a ResolverConfig.

    UNVALIDATED: produced by load(), invariants not yet checked
    VALIDATED: returned by validate(), safe to resolve from
    """

    UNVALIDATED = "unvalidated"
    VALIDATED = "validated"


@dataclass(frozen=True)
class SecretRef:
    """Reference to a signing credential held by an external secret source."""

    scheme: str  # "env" or "dotenv"
    name: str  # e.g. "DEPLOYER_KEY"

    @classmethod
    def parse(cls, raw: str) -> "SecretRef":
        """
        Parse a credential entry from the declarative source.

        Accepted forms are "NAME", "env:NAME" and "dotenv:NAME". Anything else
        is kept under the env scheme and rejected later by validation.

        Args:
            raw: Credential entry string

        Returns:
            SecretRef for the entry
        """
        scheme, sep, name = raw.partition(":")
        if sep and scheme in SECRET_SCHEMES:
            return cls(scheme=scheme, name=name)
        return cls(scheme=ENV_SCHEME, name=raw)

    @property
    def is_well_formed(self) -> bool:
        return bool(SECRET_NAME_PATTERN.match(self.name))

    @property
    def looks_literal(self) -> bool:
        """True if the name looks like raw key material instead of a reference."""
        return bool(LITERAL_KEY_PATTERN.match(self.name))

    def __str__(self) -> str:
        # Malformed names may be pasted secrets; never render them
        if not self.is_well_formed:
            return f"{self.scheme}:<malformed>"
        return f"{self.scheme}:{self.name}"

    def __repr__(self) -> str:
        return f"SecretRef('{self}')"


class Secret:
    """A fetched credential value. Masked in repr() and str()."""

    __slots__ = ("_value",)

    def __init__(self, value: str):
        self._value = value

    def reveal(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return "Secret('**********')"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Secret):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __reduce__(self):
        raise TypeError("Secret values cannot be serialized")


@dataclass(frozen=True)
class NetworkProfile:
    """Connection and signing parameters for one deployable network."""

    # Required fields
    name: str  # e.g. "hardhat", "sepolia"

    # Optional fields (absent means "not configured", never defaulted)
    endpoint_url: Optional[str] = None  # None only for in-process networks
    signing_credentials: Tuple[SecretRef, ...] = ()
    gas_price_wei: Optional[int] = None  # None means dynamic fee estimation
    chain_id: Optional[int] = None

    @property
    def is_remote(self) -> bool:
        return self.endpoint_url is not None


@dataclass(frozen=True)
class ResolverConfig:
    """
    Immutable set of network profiles sharing one compiler version.

    Built by load() in the UNVALIDATED state. validate() returns a copy in
    the VALIDATED state; only validated configs can be resolved from.
    """

    compiler_version: Optional[str] = None
    networks: Mapping[str, NetworkProfile] = field(default_factory=dict)
    default_network: Optional[str] = None
    # Only validate() may set this; replace() and the constructor always reset it
    state: ConfigState = field(default=ConfigState.UNVALIDATED, init=False)

    def __post_init__(self) -> None:
        # Freeze the mapping so no consumer can add or replace profiles
        if not isinstance(self.networks, MappingProxyType):
            object.__setattr__(self, "networks", MappingProxyType(dict(self.networks)))

    @property
    def is_validated(self) -> bool:
        return self.state is ConfigState.VALIDATED

    def network_names(self) -> Tuple[str, ...]:
        return tuple(sorted(self.networks))
