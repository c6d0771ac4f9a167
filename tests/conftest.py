"""Shared pytest fixtures for the agent scaffold test suite.

Provides reusable fixtures for:
- Wizard answers with and without optional features
- Resolved chain configurations
- Answers files on disk (JSON and YAML)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from agent_scaffold.chains import CHAINS, ChainConfig
from agent_scaffold.models import WizardAnswers


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

SAMPLE_WALLET = "0x1234567890abcdef1234567890abcdef12345678"
SAMPLE_PRIVATE_KEY = "0x" + "ab" * 32


@pytest.fixture
def answers_data() -> dict[str, Any]:
    """Raw answers as the interactive wizard writes them (camelCase keys)."""
    return {
        "projectDir": "demo-agent",
        "agentName": "Demo Agent",
        "agentDescription": "A demo agent for testing",
        "agentImage": "https://example.com/agent.png",
        "features": ["a2a"],
        "a2aStreaming": False,
        "chain": "monad-testnet",
        "trustModels": ["reputation"],
        "agentWallet": SAMPLE_WALLET,
    }


@pytest.fixture
def make_answers(answers_data):
    """Factory building ``WizardAnswers`` from the sample data plus overrides."""

    def _make(**overrides: Any) -> WizardAnswers:
        data = {**answers_data, **overrides}
        return WizardAnswers.model_validate(data)

    return _make


@pytest.fixture
def demo_answers(make_answers) -> WizardAnswers:
    """Demo Agent on monad-testnet with A2A enabled."""
    return make_answers()


@pytest.fixture
def bare_answers(make_answers) -> WizardAnswers:
    """Demo Agent with no optional features."""
    return make_answers(features=[])


@pytest.fixture
def full_answers(make_answers) -> WizardAnswers:
    """Demo Agent with A2A, MCP and x402 plus a generated key."""
    return make_answers(
        features=["a2a", "mcp", "x402"],
        generatedPrivateKey=SAMPLE_PRIVATE_KEY,
        trustModels=["reputation", "crypto-economic"],
    )


# ---------------------------------------------------------------------------
# Chains
# ---------------------------------------------------------------------------

@pytest.fixture
def testnet_chain() -> ChainConfig:
    return CHAINS["monad-testnet"]


@pytest.fixture
def mainnet_chain() -> ChainConfig:
    return CHAINS["monad-mainnet"]


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

@pytest.fixture
def answers_json_file(tmp_path: Path, answers_data) -> Path:
    """Answers written to ``answers.json``."""
    path = tmp_path / "answers.json"
    path.write_text(json.dumps(answers_data), encoding="utf-8")
    return path
