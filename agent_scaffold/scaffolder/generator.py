"""Main scaffolding orchestrator.

Takes a ``WizardAnswers`` record and writes a complete ERC-8004 agent project
(TypeScript + viem) to disk: manifest, environment template, registration
script, README, LLM glue, and the feature-gated A2A and MCP servers.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..chains import ChainConfig, get_chain_config
from ..models import Feature, WizardAnswers
from ..utils import is_non_empty_dir, write_file
from . import monad
from .templates import TemplateRenderer


class ScaffoldError(Exception):
    """Raised when a project cannot be scaffolded."""


class ProjectGenerator:
    """Renders and writes every file of a generated agent project.

    Always produces:
    - ``package.json``, ``tsconfig.json``, ``.gitignore``, ``.env``
    - ``src/register.ts`` and ``src/agent.ts``
    - ``README.md``

    Feature ``a2a`` adds ``src/a2a-server.ts`` and
    ``.well-known/agent-card.json``; feature ``mcp`` adds
    ``src/mcp-server.ts``.
    """

    def __init__(
        self,
        answers: WizardAnswers,
        chain: ChainConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.answers = answers
        self.chain = chain if chain is not None else get_chain_config(answers.chain)
        self.renderer = renderer if renderer is not None else TemplateRenderer()

    # -- Rendering ---------------------------------------------------------

    def render_files(self) -> dict[str, str]:
        """Render every artifact, keyed by path relative to the project root."""
        answers, chain, renderer = self.answers, self.chain, self.renderer

        files: dict[str, str] = {
            "package.json": monad.build_manifest(answers),
            "tsconfig.json": monad.build_tsconfig(renderer),
            ".gitignore": monad.build_gitignore(renderer),
            ".env": monad.build_env_template(answers, chain, renderer),
            "src/register.ts": monad.build_registration_script(answers, chain, renderer),
            "src/agent.ts": monad.build_agent_source(answers, renderer),
        }

        if answers.has_feature(Feature.A2A):
            files["src/a2a-server.ts"] = monad.build_a2a_server(answers, chain, renderer)
            files[".well-known/agent-card.json"] = monad.build_agent_card(answers)

        if answers.has_feature(Feature.MCP):
            files["src/mcp-server.ts"] = monad.build_mcp_server(answers, renderer)

        files["README.md"] = monad.build_readme(answers, chain, renderer)
        return files

    # -- Public API --------------------------------------------------------

    async def generate(self, output_dir: str | Path, overwrite: bool = False) -> Path:
        """Generate the complete project structure.

        Args:
            output_dir: Parent directory where the project folder will be
                created.  A subdirectory named after ``answers.project_dir``
                is created inside it.
            overwrite: Write into an existing non-empty project directory
                instead of refusing.

        Returns:
            Path to the generated project root.

        Raises:
            ScaffoldError: If the project directory exists, is not empty and
                *overwrite* is false, or if a file cannot be written.
        """
        project_root = Path(output_dir) / self.answers.project_dir
        if not overwrite and await asyncio.to_thread(is_non_empty_dir, project_root):
            raise ScaffoldError(
                f"Project directory {project_root} already exists and is not empty"
            )

        files = self.render_files()
        try:
            await asyncio.gather(*[
                asyncio.to_thread(write_file, project_root / rel_path, content)
                for rel_path, content in files.items()
            ])
        except OSError as exc:
            raise ScaffoldError(f"Could not write project to {project_root}: {exc}") from exc
        return project_root
