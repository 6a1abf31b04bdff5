"""Declarative source parsers for network-profiles library."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .constants import (
    AUTO_GAS_PRICE,
    CHAIN_ID_KEY,
    COMPILER_VERSION_KEY,
    DEFAULT_NETWORK_KEY,
    ENDPOINT_URL_KEY,
    GAS_PRICE_KEY,
    NAME_KEY,
    NETWORK_ALIASES,
    NETWORK_KEYS,
    NETWORKS_KEY,
    SIGNING_CREDENTIALS_KEY,
    TOP_LEVEL_ALIASES,
)
from .exceptions import DuplicateNetwork, MalformedConfig
from .types import NetworkProfile, ResolverConfig, SecretRef

logger = logging.getLogger(__name__)

TOP_LEVEL_KEYS = frozenset({COMPILER_VERSION_KEY, NETWORKS_KEY, DEFAULT_NETWORK_KEY})


def normalize_keys(
    entry: Mapping[str, Any], aliases: Mapping[str, str], where: str
) -> Dict[str, Any]:
    """
    Convert hardhat-style field names to canonical form.

    Args:
        entry: Mapping as found in the source
        aliases: Alias name -> canonical name
        where: Location used in error messages (e.g. "network 'sepolia'")

    Returns:
        New dict keyed by canonical names

    Raises:
        MalformedConfig: If an alias and its canonical name are both present
    """
    result: Dict[str, Any] = {}
    for key, value in entry.items():
        canonical = aliases.get(key, key)
        if canonical in result:
            raise MalformedConfig(
                f"{where}: field '{canonical}' given more than once (via '{key}')"
            )
        result[canonical] = value
    return result


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid amount
    return isinstance(value, int) and not isinstance(value, bool)


def parse_gas_price(value: Any, network: str) -> Optional[int]:
    """
    Parse a gas price field.

    Args:
        value: Raw field value (integer wei, or "auto")
        network: Network name for error messages

    Returns:
        Gas price in wei, or None for dynamic fee estimation

    Raises:
        MalformedConfig: If the value is not an integer or "auto"
    """
    if value == AUTO_GAS_PRICE:
        return None
    if not _is_int(value):
        raise MalformedConfig(
            f"network '{network}': field '{GAS_PRICE_KEY}' must be an integer amount of wei"
        )
    return value


def parse_credentials(value: Any, network: str) -> Tuple[SecretRef, ...]:
    """
    Parse a signing credential list into secret references.

    Raw key material is refused here so that it never reaches a ResolverConfig.
    Error messages identify entries by position only.

    Args:
        value: Raw field value (list of reference strings)
        network: Network name for error messages

    Returns:
        Tuple of SecretRef in source order

    Raises:
        MalformedConfig: If the value is not a list of strings, or holds a literal key
    """
    if not isinstance(value, (list, tuple)):
        raise MalformedConfig(
            f"network '{network}': field '{SIGNING_CREDENTIALS_KEY}' must be a list"
        )

    refs: List[SecretRef] = []
    for index, raw in enumerate(value):
        if not isinstance(raw, str):
            raise MalformedConfig(
                f"network '{network}': {SIGNING_CREDENTIALS_KEY}[{index}] must be a string reference"
            )
        ref = SecretRef.parse(raw)
        if ref.looks_literal:
            raise MalformedConfig(
                f"network '{network}': {SIGNING_CREDENTIALS_KEY}[{index}] looks like a literal "
                "private key; use a reference such as 'env:DEPLOYER_KEY'"
            )
        refs.append(ref)
    return tuple(refs)


def parse_network(name: str, entry: Any) -> NetworkProfile:
    """
    Parse one network entry.

    Args:
        name: Network name
        entry: Raw network mapping

    Returns:
        NetworkProfile carrying exactly the fields present in the entry

    Raises:
        MalformedConfig: If the entry has the wrong shape or field types
    """
    where = f"network '{name}'"
    if not isinstance(entry, Mapping):
        raise MalformedConfig(f"{where}: entry must be a mapping")

    fields = normalize_keys(entry, NETWORK_ALIASES, where)
    unknown = sorted(set(fields) - NETWORK_KEYS)
    if unknown:
        raise MalformedConfig(f"{where}: unknown field(s) {', '.join(unknown)}")

    endpoint_url = fields.get(ENDPOINT_URL_KEY)
    if endpoint_url is not None and not isinstance(endpoint_url, str):
        raise MalformedConfig(f"{where}: field '{ENDPOINT_URL_KEY}' must be a string")

    credentials: Tuple[SecretRef, ...] = ()
    if SIGNING_CREDENTIALS_KEY in fields:
        credentials = parse_credentials(fields[SIGNING_CREDENTIALS_KEY], name)

    gas_price = None
    if fields.get(GAS_PRICE_KEY) is not None:
        gas_price = parse_gas_price(fields[GAS_PRICE_KEY], name)

    chain_id = fields.get(CHAIN_ID_KEY)
    if chain_id is not None and not _is_int(chain_id):
        raise MalformedConfig(f"{where}: field '{CHAIN_ID_KEY}' must be an integer")

    return NetworkProfile(
        name=name,
        endpoint_url=endpoint_url,
        signing_credentials=credentials,
        gas_price_wei=gas_price,
        chain_id=chain_id,
    )


def _iter_network_entries(networks: Any) -> List[Tuple[str, Any]]:
    """Flatten the networks field into (name, entry) pairs, keeping duplicates."""
    if isinstance(networks, Mapping):
        return list(networks.items())

    if isinstance(networks, list):
        pairs = []
        for index, entry in enumerate(networks):
            if not isinstance(entry, Mapping) or not isinstance(entry.get(NAME_KEY), str):
                raise MalformedConfig(
                    f"{NETWORKS_KEY}[{index}]: list entries need a string '{NAME_KEY}'"
                )
            body = {k: v for k, v in entry.items() if k != NAME_KEY}
            pairs.append((entry[NAME_KEY], body))
        return pairs

    raise MalformedConfig(f"field '{NETWORKS_KEY}' must be a mapping or a list")


def load(source: Mapping[str, Any]) -> ResolverConfig:
    """
    Build an unvalidated ResolverConfig from a parsed declarative source.

    Expected shape:
        {"compilerVersion": "0.8.28",
         "defaultNetwork": "hardhat",            # optional
         "networks": {"sepolia": {"endpointUrl": ..., "signingCredentials": [...],
                                  "gasPriceWei": ..., "chainId": ...}}}

    Hardhat field names (solidity, url, accounts, gasPrice) are accepted.

    Args:
        source: Parsed source mapping

    Returns:
        ResolverConfig in the UNVALIDATED state

    Raises:
        MalformedConfig: If the source has the wrong shape
        DuplicateNetwork: If two entries share a name
    """
    if not isinstance(source, Mapping):
        raise MalformedConfig("configuration source must be a mapping")

    top = normalize_keys(source, TOP_LEVEL_ALIASES, "configuration")
    unknown = sorted(set(top) - TOP_LEVEL_KEYS)
    if unknown:
        raise MalformedConfig(f"configuration: unknown field(s) {', '.join(unknown)}")

    compiler_version = top.get(COMPILER_VERSION_KEY)
    if compiler_version is not None and (
        not isinstance(compiler_version, str) or not compiler_version.strip()
    ):
        raise MalformedConfig(f"field '{COMPILER_VERSION_KEY}' must be a non-empty string")

    networks: Dict[str, NetworkProfile] = {}
    for name, entry in _iter_network_entries(top.get(NETWORKS_KEY, {})):
        if not isinstance(name, str) or not name:
            raise MalformedConfig("network names must be non-empty strings")
        if name in networks:
            raise DuplicateNetwork(name)
        networks[name] = parse_network(name, entry)

    default_network = top.get(DEFAULT_NETWORK_KEY)
    if default_network is not None:
        if not isinstance(default_network, str):
            raise MalformedConfig(f"field '{DEFAULT_NETWORK_KEY}' must be a string")
        if default_network not in networks:
            raise MalformedConfig(
                f"field '{DEFAULT_NETWORK_KEY}' names undeclared network '{default_network}'"
            )

    logger.debug(
        "Loaded %d network(s) with compiler %s", len(networks), compiler_version
    )

    return ResolverConfig(
        compiler_version=compiler_version,
        networks=networks,
        default_network=default_network,
    )


class _JsonObject(list):
    """(key, value) pairs of a JSON object, before duplicate keys are collapsed."""


def _build_mapping(value: Any, path: Tuple[str, ...] = ()) -> Any:
    """
    Turn _JsonObject pairs into dicts, refusing duplicate keys.

    Duplicate keys directly under "networks" are duplicate network names;
    duplicates anywhere else are a malformed file.
    """
    if isinstance(value, _JsonObject):
        result: Dict[str, Any] = {}
        for key, item in value:
            if key in result:
                if path == (NETWORKS_KEY,):
                    raise DuplicateNetwork(key)
                raise MalformedConfig(f"duplicate key '{key}' in configuration file")
            result[key] = _build_mapping(item, path + (key,))
        return result
    if isinstance(value, list):
        # Array items are never the networks mapping itself
        return [_build_mapping(item, path + ("[]",)) for item in value]
    return value


def load_file(path: Union[Path, str]) -> ResolverConfig:
    """
    Read a JSON configuration file and build an unvalidated ResolverConfig.

    Args:
        path: Path to the JSON file

    Returns:
        ResolverConfig in the UNVALIDATED state

    Raises:
        MalformedConfig: If the file cannot be read or is not valid JSON
        DuplicateNetwork: If a network name appears twice
    """
    path = Path(path)
    try:
        with open(path) as f:
            raw = json.load(f, object_pairs_hook=_JsonObject)
    except FileNotFoundError as e:
        raise MalformedConfig(f"Configuration file not found at {path}") from e
    except json.JSONDecodeError as e:
        raise MalformedConfig(
            f"Invalid JSON in configuration file {path} (line {e.lineno}, column {e.colno})"
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedConfig(f"Cannot read configuration file {path}: {e}") from e

    logger.info("Reading network configuration from %s", path)
    return load(_build_mapping(raw))
