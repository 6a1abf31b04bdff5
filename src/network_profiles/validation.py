"""Invariant checks for network-profiles library."""

import dataclasses
import logging
from urllib.parse import urlparse

from .constants import ALLOWED_URL_SCHEMES, MAX_GAS_PRICE_WEI
from .exceptions import InvalidProfile
from .types import ConfigState, NetworkProfile, ResolverConfig

logger = logging.getLogger(__name__)

# Reasons reported through InvalidProfile.reason
MISSING_CREDENTIALS = "missing credentials"
GAS_PRICE_OUT_OF_RANGE = "gas price out of range"
MALFORMED_URL = "malformed URL"
MALFORMED_CREDENTIAL = "malformed credential reference"
INVALID_CHAIN_ID = "invalid chain id"
NAME_MISMATCH = "name mismatch"


def is_valid_endpoint_url(url: str) -> bool:
    """
    Check that a URL has an RPC-capable scheme and a host.

    Args:
        url: Endpoint URL

    Returns:
        True if the scheme is http(s)/ws(s) and a host is present
    """
    try:
        parsed = urlparse(url)
        # .port raises ValueError for out-of-range or non-numeric ports
        parsed.port
    except ValueError:
        return False
    return parsed.scheme in ALLOWED_URL_SCHEMES and bool(parsed.hostname)


def validate_profile(profile: NetworkProfile) -> None:
    """
    Check one profile against every invariant.

    Args:
        profile: Profile to check

    Raises:
        InvalidProfile: On the first violated invariant
    """
    if profile.endpoint_url is not None:
        if not is_valid_endpoint_url(profile.endpoint_url):
            raise InvalidProfile(profile.name, MALFORMED_URL)
        if not profile.signing_credentials:
            raise InvalidProfile(profile.name, MISSING_CREDENTIALS)

    for index, ref in enumerate(profile.signing_credentials):
        if not ref.is_well_formed:
            raise InvalidProfile(profile.name, f"{MALFORMED_CREDENTIAL} at position {index}")

    if profile.gas_price_wei is not None:
        if not 0 <= profile.gas_price_wei <= MAX_GAS_PRICE_WEI:
            raise InvalidProfile(profile.name, GAS_PRICE_OUT_OF_RANGE)

    if profile.chain_id is not None and profile.chain_id <= 0:
        raise InvalidProfile(profile.name, INVALID_CHAIN_ID)


def validate(config: ResolverConfig) -> ResolverConfig:
    """
    Check all profiles and mark the config as validated.

    Profiles are checked in name order so the reported failure is stable.
    The input config is left untouched.

    Args:
        config: Config returned by load()

    Returns:
        Equivalent ResolverConfig in the VALIDATED state

    Raises:
        InvalidProfile: If any profile violates an invariant
    """
    for name in sorted(config.networks):
        profile = config.networks[name]
        if profile.name != name:
            raise InvalidProfile(name, NAME_MISMATCH)
        validate_profile(profile)

    logger.info("Validated %d network profile(s)", len(config.networks))
    validated = dataclasses.replace(config)
    object.__setattr__(validated, "state", ConfigState.VALIDATED)
    return validated
