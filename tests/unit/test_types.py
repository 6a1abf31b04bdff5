"""Unit tests for profile and config types."""

import dataclasses
import pickle

import pytest

from network_profiles.types import (
    ConfigState,
    NetworkProfile,
    ResolverConfig,
    Secret,
    SecretRef,
)


class TestSecretRef:
    """Test parsing and rendering of credential references."""

    def test_bare_name_is_env_reference(self):
        """Test that a bare name refers to an environment variable."""
        ref = SecretRef.parse("DEPLOYER_KEY")

        assert ref == SecretRef(scheme="env", name="DEPLOYER_KEY")

    def test_explicit_schemes(self):
        """Test that env: and dotenv: prefixes select the scheme."""
        assert SecretRef.parse("env:A") == SecretRef(scheme="env", name="A")
        assert SecretRef.parse("dotenv:B") == SecretRef(scheme="dotenv", name="B")

    def test_unknown_scheme_is_kept_as_name(self):
        """Test that an unknown prefix stays part of the (malformed) name."""
        ref = SecretRef.parse("vault:secret/deployer")

        assert ref.scheme == "env"
        assert ref.name == "vault:secret/deployer"
        assert not ref.is_well_formed

    def test_literal_detection(self):
        """Test that raw key material is recognized."""
        assert SecretRef.parse("0xabc123").looks_literal
        assert SecretRef.parse("ab" * 32).looks_literal
        assert not SecretRef.parse("DEPLOYER_KEY").looks_literal

    def test_str_renders_reference(self):
        """Test that str() renders scheme and name."""
        assert str(SecretRef.parse("dotenv:KEY")) == "dotenv:KEY"

    def test_malformed_name_is_not_rendered(self):
        """Test that malformed names are masked in str() and repr()."""
        ref = SecretRef.parse("word1 word2 word3")

        assert "word1" not in str(ref)
        assert "word1" not in repr(ref)


class TestSecret:
    """Test the masked secret wrapper."""

    def test_reveal_returns_value(self):
        assert Secret("s3cret").reveal() == "s3cret"

    def test_repr_and_str_are_masked(self):
        """Test that the value never appears in repr() or str()."""
        secret = Secret("s3cret")

        assert "s3cret" not in repr(secret)
        assert "s3cret" not in str(secret)
        assert "s3cret" not in f"{[secret]}"

    def test_cannot_be_pickled(self):
        """Test that secrets refuse serialization."""
        with pytest.raises(TypeError):
            pickle.dumps(Secret("s3cret"))

    def test_equality_by_value(self):
        assert Secret("a") == Secret("a")
        assert Secret("a") != Secret("b")


class TestNetworkProfile:
    """Test the NetworkProfile dataclass."""

    def test_local_profile_defaults(self):
        """Test that a bare profile has no endpoint, credentials or gas price."""
        profile = NetworkProfile(name="hardhat")

        assert profile.endpoint_url is None
        assert profile.signing_credentials == ()
        assert profile.gas_price_wei is None
        assert profile.chain_id is None
        assert not profile.is_remote

    def test_profile_is_frozen(self):
        """Test that profiles cannot be mutated."""
        profile = NetworkProfile(name="hardhat")

        with pytest.raises(dataclasses.FrozenInstanceError):
            profile.gas_price_wei = 1


class TestResolverConfig:
    """Test the ResolverConfig aggregate."""

    def test_new_config_is_unvalidated(self):
        config = ResolverConfig(compiler_version="0.8.28")

        assert config.state is ConfigState.UNVALIDATED
        assert not config.is_validated

    def test_state_cannot_be_passed_to_constructor(self):
        """Only validate() can produce a validated config."""
        with pytest.raises(TypeError):
            ResolverConfig(state=ConfigState.VALIDATED)

    def test_networks_mapping_is_read_only(self):
        """Test that profiles cannot be added after construction."""
        config = ResolverConfig(
            compiler_version="0.8.28", networks={"hardhat": NetworkProfile(name="hardhat")}
        )

        with pytest.raises(TypeError):
            config.networks["sepolia"] = NetworkProfile(name="sepolia")

    def test_source_dict_changes_do_not_leak_in(self):
        """Test that mutating the dict passed in does not change the config."""
        networks = {"hardhat": NetworkProfile(name="hardhat")}
        config = ResolverConfig(compiler_version="0.8.28", networks=networks)

        networks["sepolia"] = NetworkProfile(name="sepolia")

        assert "sepolia" not in config.networks

    def test_network_names_sorted(self):
        config = ResolverConfig(
            networks={
                "sepolia": NetworkProfile(name="sepolia"),
                "hardhat": NetworkProfile(name="hardhat"),
            }
        )

        assert config.network_names() == ("hardhat", "sepolia")
