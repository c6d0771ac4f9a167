"""Agent scaffold configuration.

Typed settings for the project writer and CLI.  Values come from explicit
arguments or from environment variables via :meth:`ScaffoldConfig.from_env`.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field


_TRUTHY = {"1", "true", "yes", "on"}


class ScaffoldConfig(BaseModel):
    """Settings that control where and how a scaffold is written."""

    output_dir: Path = Field(default=Path("."), description="Parent directory for new projects")
    overwrite: bool = Field(
        default=False,
        description="Allow writing into an existing, non-empty project directory",
    )

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            AGENT_SCAFFOLD_OUTPUT_DIR, AGENT_SCAFFOLD_OVERWRITE.
        """
        overwrite = os.environ.get("AGENT_SCAFFOLD_OVERWRITE", "").strip().lower() in _TRUTHY
        return cls(
            output_dir=Path(os.environ.get("AGENT_SCAFFOLD_OUTPUT_DIR", ".")),
            overwrite=overwrite,
        )
