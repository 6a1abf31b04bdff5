"""Configuration constants for network-profiles library."""

import re

# Top-level keys of the declarative source
COMPILER_VERSION_KEY = "compilerVersion"
NETWORKS_KEY = "networks"
DEFAULT_NETWORK_KEY = "defaultNetwork"

# Per-network keys
ENDPOINT_URL_KEY = "endpointUrl"
SIGNING_CREDENTIALS_KEY = "signingCredentials"
GAS_PRICE_KEY = "gasPriceWei"
CHAIN_ID_KEY = "chainId"
NAME_KEY = "name"

NETWORK_KEYS = frozenset(
    {ENDPOINT_URL_KEY, SIGNING_CREDENTIALS_KEY, GAS_PRICE_KEY, CHAIN_ID_KEY}
)

# Hardhat config field names mapped to canonical names
# (hardhat.config.js uses solidity/url/accounts/gasPrice)
TOP_LEVEL_ALIASES = {
    "solidity": COMPILER_VERSION_KEY,
}

NETWORK_ALIASES = {
    "url": ENDPOINT_URL_KEY,
    "accounts": SIGNING_CREDENTIALS_KEY,
    "gasPrice": GAS_PRICE_KEY,
}

# Hardhat's marker for dynamic fee estimation
AUTO_GAS_PRICE = "auto"

# 10,000 gwei. Anything above is almost certainly a gwei/wei unit mix-up.
GWEI = 10**9
MAX_GAS_PRICE_WEI = 10_000 * GWEI

ALLOWED_URL_SCHEMES = frozenset({"http", "https", "ws", "wss"})

# Secret reference schemes: "NAME", "env:NAME", "dotenv:NAME"
ENV_SCHEME = "env"
DOTENV_SCHEME = "dotenv"
SECRET_SCHEMES = frozenset({ENV_SCHEME, DOTENV_SCHEME})
SECRET_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Things that look like raw private keys rather than references to them
LITERAL_KEY_PATTERN = re.compile(r"^(0x[0-9a-fA-F]+|[0-9a-fA-F]{64})$")

# Config file discovery
CONFIG_PATH_ENV = "NETWORK_PROFILES_CONFIG"
DEFAULT_CONFIG_FILENAME = "networks.json"

# RPC preflight
DEFAULT_RPC_TIMEOUT = 30
