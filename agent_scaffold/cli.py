"""Command-line entry point for the agent scaffold.

Reads the answers the interactive wizard would collect from a JSON or YAML
file and writes the generated project.

Usage::

    agent-scaffold answers.json --output ./projects
    python -m agent_scaffold.cli answers.yaml --force
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from agent_scaffold.chains import DEFAULT_CHAIN, is_supported_chain
from agent_scaffold.config import ScaffoldConfig
from agent_scaffold.models import WizardAnswers
from agent_scaffold.scaffolder import ProjectGenerator, ScaffoldError
from agent_scaffold.utils import (
    load_mapping,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


def load_answers(path: str | Path) -> WizardAnswers:
    """Load and validate a ``WizardAnswers`` file.

    Raises:
        ScaffoldError: If the file is missing, unreadable, unparsable or invalid.
    """
    answers_path = Path(path)
    if not answers_path.exists():
        raise ScaffoldError(f"Answers file not found: {answers_path}")
    try:
        data = load_mapping(answers_path)
    except (ValueError, yaml.YAMLError) as exc:
        raise ScaffoldError(f"Could not parse {answers_path}: {exc}") from exc
    except OSError as exc:
        raise ScaffoldError(f"Could not read {answers_path}: {exc}") from exc

    try:
        return WizardAnswers.model_validate(data)
    except ValidationError as exc:
        raise ScaffoldError(f"Invalid answers in {answers_path}:\n{exc}") from exc


def _summary(answers: WizardAnswers, generator: ProjectGenerator, project_root: Path) -> dict[str, str]:
    return {
        "Agent": answers.agent_name,
        "Chain": f"{generator.chain.name} ({generator.chain.chain_id})",
        "Features": ", ".join(answers.features) or "none",
        "Wallet": answers.agent_wallet or "-",
        "Private key": "written to .env" if answers.generated_private_key else "placeholder",
        "Project": str(project_root),
    }


def run(answers_path: str, config: ScaffoldConfig) -> Path:
    """Load answers, scaffold the project and print a summary."""
    answers = load_answers(answers_path)
    if not is_supported_chain(answers.chain):
        print_warning(
            f"Unknown chain '{answers.chain}', falling back to {DEFAULT_CHAIN}"
        )

    generator = ProjectGenerator(answers)
    project_root = asyncio.run(
        generator.generate(config.output_dir, overwrite=config.overwrite)
    )
    print_summary_table(_summary(answers, generator, project_root), title="Agent Scaffold")
    return project_root


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="agent-scaffold",
        description="Generate an ERC-8004 agent project from a wizard answers file.",
    )
    parser.add_argument(
        "answers",
        help="Path to the answers file (.json, .yaml or .yml)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Parent directory for the project (default: $AGENT_SCAFFOLD_OUTPUT_DIR or .)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Write into an existing, non-empty project directory",
    )

    args = parser.parse_args(argv)

    config = ScaffoldConfig.from_env()
    if args.output is not None:
        config.output_dir = Path(args.output)
    if args.force:
        config.overwrite = True

    try:
        project_root = run(args.answers, config)
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    print_success(f"Project generated in {project_root}")


if __name__ == "__main__":
    main()
