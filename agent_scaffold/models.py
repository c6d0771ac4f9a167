"""Pydantic v2 models for the wizard answers and derived agent metadata."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Feature(str, Enum):
    """Optional capabilities a generated agent project can enable."""
    A2A = "a2a"
    MCP = "mcp"
    X402 = "x402"


# ---------------------------------------------------------------------------
# Wizard answers
# ---------------------------------------------------------------------------

class WizardAnswers(BaseModel):
    """Everything the wizard collects about the agent to scaffold.

    Field names are snake_case, but the camelCase names written by the
    interactive wizard (``agentName``, ``generatedPrivateKey``, ...) are
    accepted as aliases.  Instances are immutable for the length of a
    generation pass.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    project_dir: str = Field(..., description="Directory name for the scaffold")
    agent_name: str = Field(..., description="Display name of the agent")
    agent_description: str = Field(default="")
    agent_image: str = Field(default="", description="Image URL for the agent metadata")
    features: list[str] = Field(
        default_factory=list,
        description="Enabled feature identifiers, e.g. 'a2a', 'mcp', 'x402'",
    )
    a2a_streaming: bool = Field(default=False, alias="a2aStreaming")
    chain: str = Field(default="monad-testnet", description="Target network identifier")
    trust_models: list[str] = Field(
        default_factory=list,
        description="Trust model identifiers, emitted verbatim",
    )
    agent_wallet: str = Field(default="", description="Address that controls the agent")
    generated_private_key: Optional[str] = Field(
        default=None,
        repr=False,
        description="Secret key, only ever written to the .env template",
    )

    @field_validator("project_dir")
    @classmethod
    def _project_dir_inside_output(cls, value: str) -> str:
        path = Path(value)
        if not value.strip() or path.is_absolute() or ".." in path.parts:
            raise ValueError("must be a relative path without '..' segments")
        return value

    def has_feature(self, feature: str | Feature) -> bool:
        """Return ``True`` if *feature* is enabled."""
        value = feature.value if isinstance(feature, Feature) else feature
        return value in self.features


def has_feature(answers: WizardAnswers, feature: str | Feature) -> bool:
    """Feature-membership predicate used by the templates."""
    return answers.has_feature(feature)


# ---------------------------------------------------------------------------
# Agent metadata
# ---------------------------------------------------------------------------

class AgentService(BaseModel):
    """One protocol endpoint advertised in the agent registration metadata."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Protocol name, e.g. 'A2A'")
    endpoint: str = Field(..., description="Public URL of the endpoint")
    version: str = Field(..., description="Protocol version string")
