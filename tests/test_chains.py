"""Unit tests for the chain and contract tables (agent_scaffold.chains)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from agent_scaffold.chains import (
    CHAINS,
    CONTRACTS,
    DEFAULT_CHAIN,
    chain_tier,
    get_chain_config,
    is_supported_chain,
    select_contracts,
)


pytestmark = pytest.mark.unit


class TestSelectContracts:
    def test_mainnet(self):
        contracts = select_contracts("monad-mainnet")
        assert contracts == CONTRACTS["mainnet"]
        assert contracts.identity_registry == "0x8004A169FB4a3325136EB29fA0ceB6D2e539a432"
        assert contracts.reputation_registry == "0x8004BAa17C55a88189AE136b182e5fdA19dE9b63"

    def test_testnet(self):
        contracts = select_contracts("monad-testnet")
        assert contracts.identity_registry == "0x8004A818BFB912233c491871b3d84c89A494BD9e"
        assert contracts.reputation_registry == "0x8004B663056A597Dffe9eCcC1965A193B7388713"

    @pytest.mark.parametrize("chain", [c for c in CHAINS if c != "monad-mainnet"])
    def test_every_other_known_chain_is_testnet(self, chain):
        assert select_contracts(chain) == CONTRACTS["testnet"]

    def test_unknown_chain_defaults_to_testnet(self):
        assert select_contracts("solana") == CONTRACTS["testnet"]

    def test_match_is_exact(self):
        assert chain_tier("Monad-Mainnet") == "testnet"
        assert chain_tier("monad-mainnet ") == "testnet"


class TestChainLookup:
    def test_known_chain(self):
        chain = get_chain_config("monad-mainnet")
        assert chain.chain_id == 143
        assert chain.scan_path == "monad"

    def test_testnet_metadata(self):
        chain = get_chain_config("monad-testnet")
        assert chain.chain_id == 10143
        assert chain.rpc_url == "https://testnet-rpc.monad.xyz"
        assert chain.faucet_url is not None

    def test_unknown_chain_falls_back(self):
        assert get_chain_config("not-a-chain") == CHAINS[DEFAULT_CHAIN]

    def test_is_supported(self):
        assert is_supported_chain("base-sepolia")
        assert not is_supported_chain("not-a-chain")


class TestImmutability:
    def test_chain_table_is_read_only(self):
        with pytest.raises(TypeError):
            CHAINS["new-chain"] = CHAINS["monad-testnet"]  # type: ignore[index]

    def test_contract_table_is_read_only(self):
        with pytest.raises(TypeError):
            CONTRACTS["mainnet"] = CONTRACTS["testnet"]  # type: ignore[index]

    def test_chain_config_is_frozen(self):
        with pytest.raises(ValidationError):
            CHAINS["monad-testnet"].rpc_url = "http://localhost:8545"

    def test_contracts_are_frozen(self):
        with pytest.raises(ValidationError):
            CONTRACTS["testnet"].identity_registry = "0x0"
