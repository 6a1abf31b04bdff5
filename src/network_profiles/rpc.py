"""Endpoint preflight checks for network-profiles library."""

import logging

import requests

from .constants import DEFAULT_RPC_TIMEOUT
from .exceptions import ChainIdMismatch, EndpointError, InvalidProfile
from .types import NetworkProfile

logger = logging.getLogger(__name__)


def fetch_chain_id(endpoint_url: str, network: str, timeout: int = DEFAULT_RPC_TIMEOUT) -> int:
    """
    Ask an RPC endpoint which chain it serves.

    Args:
        endpoint_url: JSON-RPC endpoint URL
        network: Network name for error messages
        timeout: Request timeout in seconds

    Returns:
        Chain id reported by eth_chainId

    Raises:
        EndpointError: On transport failure, non-200 status, RPC error or bad payload
    """
    try:
        response = requests.post(
            endpoint_url,
            json={"jsonrpc": "2.0", "method": "eth_chainId", "params": [], "id": 1},
            timeout=timeout,
        )
    except requests.RequestException as e:
        # The URL may embed an API key, so only the exception type is reported
        raise EndpointError(network, f"request failed ({type(e).__name__})") from e

    if response.status_code != 200:
        raise EndpointError(network, f"RPC request failed with status {response.status_code}")

    try:
        result = response.json()
    except ValueError as e:
        raise EndpointError(network, "response is not valid JSON") from e

    if not isinstance(result, dict):
        raise EndpointError(network, "response is not a JSON-RPC object")

    if "error" in result:
        message = result["error"].get("message") if isinstance(result["error"], dict) else None
        raise EndpointError(network, f"RPC error: {message or result['error']}")

    try:
        return int(result["result"], 16)
    except (KeyError, TypeError, ValueError) as e:
        raise EndpointError(network, "missing or malformed chain id in response") from e


def verify_chain_id(profile: NetworkProfile, timeout: int = DEFAULT_RPC_TIMEOUT) -> int:
    """
    Check that a profile's endpoint serves the expected chain.

    Args:
        profile: Resolved network profile
        timeout: Request timeout in seconds

    Returns:
        Chain id reported by the endpoint

    Raises:
        InvalidProfile: If the profile has no endpoint
        EndpointError: If the endpoint cannot be queried
        ChainIdMismatch: If the profile declares a different chain id
    """
    if profile.endpoint_url is None:
        raise InvalidProfile(profile.name, "no endpoint")

    actual = fetch_chain_id(profile.endpoint_url, profile.name, timeout=timeout)
    if profile.chain_id is not None and actual != profile.chain_id:
        raise ChainIdMismatch(profile.name, profile.chain_id, actual)

    logger.info("Network '%s' endpoint reports chain id %d", profile.name, actual)
    return actual
