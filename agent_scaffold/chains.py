"""Static chain metadata and ERC-8004 registry addresses.

Both tables are read-only: the models are frozen and the top-level mappings
are exposed through ``MappingProxyType``.  Nothing in the generator computes
or mutates an address at generation time.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class ChainConfig(BaseModel):
    """RPC and explorer metadata for one supported network."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Human-readable network name")
    chain_id: int = Field(..., description="EIP-155 chain id")
    rpc_url: str = Field(..., description="Default public RPC endpoint")
    scan_path: str = Field(..., description="Network segment of the 8004scan agent URL")
    currency_name: str = Field(default="Ether")
    currency_symbol: str = Field(default="ETH")
    faucet_url: Optional[str] = Field(default=None, description="Testnet faucet, if any")


class ContractAddresses(BaseModel):
    """Identity and reputation registry addresses for one network tier."""

    model_config = ConfigDict(frozen=True)

    identity_registry: str
    reputation_registry: str


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

MAINNET_CHAINS: frozenset[str] = frozenset({"monad-mainnet"})

DEFAULT_CHAIN = "monad-testnet"

CHAINS: MappingProxyType[str, ChainConfig] = MappingProxyType({
    "monad-mainnet": ChainConfig(
        name="Monad Mainnet",
        chain_id=143,
        rpc_url="https://rpc.monad.xyz",
        scan_path="monad",
        currency_name="Monad",
        currency_symbol="MON",
    ),
    "monad-testnet": ChainConfig(
        name="Monad Testnet",
        chain_id=10143,
        rpc_url="https://testnet-rpc.monad.xyz",
        scan_path="monad-testnet",
        currency_name="Monad",
        currency_symbol="MON",
        faucet_url="https://faucet.monad.xyz/",
    ),
    "base-sepolia": ChainConfig(
        name="Base Sepolia",
        chain_id=84532,
        rpc_url="https://sepolia.base.org",
        scan_path="base-sepolia",
        faucet_url="https://www.alchemy.com/faucets/base-sepolia",
    ),
    "eth-sepolia": ChainConfig(
        name="Ethereum Sepolia",
        chain_id=11155111,
        rpc_url="https://rpc.sepolia.org",
        scan_path="sepolia",
        faucet_url="https://sepoliafaucet.com/",
    ),
})

CONTRACTS: MappingProxyType[str, ContractAddresses] = MappingProxyType({
    "mainnet": ContractAddresses(
        identity_registry="0x8004A169FB4a3325136EB29fA0ceB6D2e539a432",
        reputation_registry="0x8004BAa17C55a88189AE136b182e5fdA19dE9b63",
    ),
    "testnet": ContractAddresses(
        identity_registry="0x8004A818BFB912233c491871b3d84c89A494BD9e",
        reputation_registry="0x8004B663056A597Dffe9eCcC1965A193B7388713",
    ),
})


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def is_supported_chain(chain: str) -> bool:
    """Return ``True`` if *chain* has an entry in :data:`CHAINS`."""
    return chain in CHAINS


def chain_tier(chain: str) -> str:
    """Classify *chain* as ``"mainnet"`` or ``"testnet"``.

    Only exact matches against :data:`MAINNET_CHAINS` are mainnet; every other
    identifier, including unknown ones, is treated as testnet.
    """
    return "mainnet" if chain in MAINNET_CHAINS else "testnet"


def select_contracts(chain: str) -> ContractAddresses:
    """Return the registry address pair for *chain*'s tier."""
    return CONTRACTS[chain_tier(chain)]


def get_chain_config(chain: str) -> ChainConfig:
    """Look up the :class:`ChainConfig` for *chain*.

    Unsupported identifiers fall back to the ``monad-testnet`` entry.
    """
    return CHAINS.get(chain, CHAINS[DEFAULT_CHAIN])
