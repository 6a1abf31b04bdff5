"""Shared pytest fixtures for network-profiles tests."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from network_profiles.parsers import load
from network_profiles.types import ResolverConfig
from network_profiles.validation import validate

SEPOLIA_URL = "https://sepolia.infura.io/v3/project"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_networks_json(fixtures_dir: Path) -> Dict[str, Any]:
    """Load and return the sample networks.json fixture."""
    with open(fixtures_dir / "sample_networks.json") as f:
        return json.load(f)


@pytest.fixture
def sample_networks_file(fixtures_dir: Path) -> Path:
    """Return path to the sample networks.json fixture."""
    return fixtures_dir / "sample_networks.json"


@pytest.fixture
def hardhat_style_file(fixtures_dir: Path) -> Path:
    """Return path to a config written with hardhat field names."""
    return fixtures_dir / "hardhat_style.json"


@pytest.fixture
def duplicate_networks_file(fixtures_dir: Path) -> Path:
    """Return path to a config declaring the same network twice."""
    return fixtures_dir / "duplicate_networks.json"


@pytest.fixture
def sepolia_source() -> Dict[str, Any]:
    """Source with a local hardhat network and a remote sepolia network."""
    return {
        "compilerVersion": "0.8.28",
        "networks": {
            "hardhat": {},
            "sepolia": {
                "endpointUrl": SEPOLIA_URL,
                "signingCredentials": ["k1"],
                "gasPriceWei": 30000000000,
            },
        },
    }


@pytest.fixture
def validated_config(sepolia_source: Dict[str, Any]) -> ResolverConfig:
    """Validated config built from sepolia_source."""
    return validate(load(sepolia_source))


@pytest.fixture
def temp_config_file(tmp_path: Path, sample_networks_json: Dict[str, Any]) -> Path:
    """Write the sample config to a temporary networks.json."""
    config_path = tmp_path / "networks.json"
    with open(config_path, "w") as f:
        json.dump(sample_networks_json, f, indent=2)
    return config_path
