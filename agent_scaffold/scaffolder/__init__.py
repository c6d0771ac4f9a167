"""Agent scaffolder -- generates ERC-8004 agent projects.

Takes ``WizardAnswers`` as input and renders a ready-to-run TypeScript
project: package manifest, environment template, registration script,
README, and the optional A2A and MCP servers.

Quick usage::

    from agent_scaffold.models import WizardAnswers
    from agent_scaffold.scaffolder import ProjectGenerator

    answers = WizardAnswers(
        project_dir="demo-agent",
        agent_name="Demo Agent",
        features=["a2a"],
        chain="monad-testnet",
    )
    project_path = await ProjectGenerator(answers).generate("/tmp/output")
"""

from agent_scaffold.scaffolder.generator import ProjectGenerator, ScaffoldError
from agent_scaffold.scaffolder.monad import (
    build_env_template,
    build_manifest,
    build_readme,
    build_registration_script,
)
from agent_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "ProjectGenerator",
    "ScaffoldError",
    "TemplateRenderer",
    "build_env_template",
    "build_manifest",
    "build_readme",
    "build_registration_script",
]
