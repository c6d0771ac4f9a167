"""Registration-project templates for ERC-8004 agents.

Every ``build_*`` function is pure: it maps a :class:`WizardAnswers` (and,
where relevant, the resolved :class:`ChainConfig`) to the literal text of one
generated file.  Nothing here touches the file system beyond reading the
packaged Jinja2 templates; :class:`~agent_scaffold.scaffolder.generator.ProjectGenerator`
does the writing.

Free text interpolated into generated string literals (names, descriptions,
image URLs and the service endpoints derived from the name) is escaped for
``"`` only.  Answers are assumed to be authored by the person running the tool.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any

from ..chains import ChainConfig, ContractAddresses, select_contracts
from ..models import AgentService, Feature, WizardAnswers, has_feature
from .templates import TemplateRenderer, package_name


# ---------------------------------------------------------------------------
# Manifest entries
# ---------------------------------------------------------------------------

BASE_SCRIPTS: dict[str, str] = {
    "build": "tsc",
    "register": "tsx src/register.ts",
}

BASE_DEPENDENCIES: dict[str, str] = {
    "viem": "^2.21.0",
    "dotenv": "^16.3.1",
    "openai": "^4.68.0",
}

BASE_DEV_DEPENDENCIES: dict[str, str] = {
    "@types/node": "^20.10.0",
    "tsx": "^4.7.0",
    "typescript": "^5.3.0",
}

A2A_DEPENDENCIES: dict[str, str] = {
    "express": "^4.18.2",
    "uuid": "^9.0.0",
}

A2A_DEV_DEPENDENCIES: dict[str, str] = {
    "@types/express": "^4.17.21",
    "@types/uuid": "^9.0.7",
}

X402_DEPENDENCIES: dict[str, str] = {
    "@x402/express": "^2.0.0",
    "@x402/core": "^2.0.0",
    "@x402/evm": "^2.0.0",
}

MCP_DEPENDENCIES: dict[str, str] = {
    "@modelcontextprotocol/sdk": "^1.0.0",
}

# Protocol versions advertised in the registration metadata
A2A_PROTOCOL_VERSION = "0.3.0"
MCP_PROTOCOL_VERSION = "2025-06-18"

PRIVATE_KEY_PLACEHOLDER = "your_private_key_here"

A2A_PORT = 3000


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------

@lru_cache(maxsize=1)
def _default_renderer() -> TemplateRenderer:
    return TemplateRenderer()


def _renderer(renderer: TemplateRenderer | None) -> TemplateRenderer:
    return renderer if renderer is not None else _default_renderer()


# ---------------------------------------------------------------------------
# Derived values
# ---------------------------------------------------------------------------

def build_services(answers: WizardAnswers) -> list[AgentService]:
    """Return one service entry per enabled protocol feature (A2A, then MCP)."""
    slug = package_name(answers.agent_name)
    services: list[AgentService] = []
    if has_feature(answers, Feature.A2A):
        services.append(AgentService(
            name="A2A",
            endpoint=f"https://{slug}.example.com/.well-known/agent-card.json",
            version=A2A_PROTOCOL_VERSION,
        ))
    if has_feature(answers, Feature.MCP):
        services.append(AgentService(
            name="MCP",
            endpoint=f"https://{slug}.example.com/mcp",
            version=MCP_PROTOCOL_VERSION,
        ))
    return services


def _source_files(answers: WizardAnswers) -> list[str]:
    """Entries under ``src/`` in the README project tree."""
    entries = [
        ("register.ts", "Registration script (direct contract calls)"),
        ("agent.ts", "LLM logic"),
    ]
    if has_feature(answers, Feature.A2A):
        entries.append(("a2a-server.ts", "A2A server"))
    if has_feature(answers, Feature.MCP):
        entries.append(("mcp-server.ts", "MCP server"))
    return [f"{name:<16} # {comment}" for name, comment in entries]


def _build_context(
    answers: WizardAnswers,
    chain: ChainConfig | None = None,
) -> dict[str, Any]:
    """Build the Jinja2 template context from the answers and chain."""
    contracts: ContractAddresses = select_contracts(answers.chain)
    has_a2a = has_feature(answers, Feature.A2A)
    return {
        "agent_name": answers.agent_name,
        "agent_description": answers.agent_description,
        "agent_image": answers.agent_image,
        "agent_wallet": answers.agent_wallet,
        "package_name": package_name(answers.agent_name),
        "chain": chain,
        "contracts": contracts,
        "has_a2a": has_a2a,
        "has_mcp": has_feature(answers, Feature.MCP),
        "has_x402": has_a2a and has_feature(answers, Feature.X402),
        "x402_support": has_feature(answers, Feature.X402),
        "services": build_services(answers),
        "supported_trust": ", ".join(f'"{t}"' for t in answers.trust_models),
        "source_files": _source_files(answers),
        "a2a_port": A2A_PORT,
    }


# ---------------------------------------------------------------------------
# Artifact builders
# ---------------------------------------------------------------------------

def build_manifest(answers: WizardAnswers) -> str:
    """Return the ``package.json`` for the generated project.

    Base entries come first; feature entries are appended in the fixed order
    a2a, x402, mcp so the key order is deterministic.
    """
    scripts = dict(BASE_SCRIPTS)
    dependencies = dict(BASE_DEPENDENCIES)
    dev_dependencies = dict(BASE_DEV_DEPENDENCIES)

    if has_feature(answers, Feature.A2A):
        scripts["start:a2a"] = "tsx src/a2a-server.ts"
        dependencies.update(A2A_DEPENDENCIES)
        dev_dependencies.update(A2A_DEV_DEPENDENCIES)

        # x402 only protects the A2A endpoint
        if has_feature(answers, Feature.X402):
            dependencies.update(X402_DEPENDENCIES)

    if has_feature(answers, Feature.MCP):
        scripts["start:mcp"] = "tsx src/mcp-server.ts"
        dependencies.update(MCP_DEPENDENCIES)

    manifest = {
        "name": package_name(answers.agent_name),
        "version": "1.0.0",
        "description": answers.agent_description,
        "type": "module",
        "scripts": scripts,
        "dependencies": dependencies,
        "devDependencies": dev_dependencies,
    }
    return json.dumps(manifest, indent=2, ensure_ascii=False)


def build_env_template(
    answers: WizardAnswers,
    chain: ChainConfig,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return the ``.env`` file: PRIVATE_KEY, RPC_URL, PINATA_JWT, OPENAI_API_KEY."""
    context = {
        "chain": chain,
        "private_key": answers.generated_private_key or PRIVATE_KEY_PLACEHOLDER,
    }
    return _renderer(renderer).render("env.j2", context)


def build_registration_script(
    answers: WizardAnswers,
    chain: ChainConfig,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return ``src/register.ts``, the on-chain registration script.

    The script validates its environment, uploads the agent metadata to
    IPFS, calls ``register`` on the identity registry with a 20% gas buffer,
    and prints the minted agent id with its 8004scan link.
    """
    return _renderer(renderer).render("register.ts.j2", _build_context(answers, chain))


def build_readme(
    answers: WizardAnswers,
    chain: ChainConfig,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return the project ``README.md``."""
    return _renderer(renderer).render("README.md.j2", _build_context(answers, chain))


def build_agent_source(
    answers: WizardAnswers,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return ``src/agent.ts``, the OpenAI-backed response generator."""
    return _renderer(renderer).render("agent.ts.j2", _build_context(answers))


def build_a2a_server(
    answers: WizardAnswers,
    chain: ChainConfig,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return ``src/a2a-server.ts``.

    When x402 is enabled the JSON-RPC endpoint sits behind the payment
    middleware, settling on ``eip155:<chain_id>``.
    """
    return _renderer(renderer).render("a2a-server.ts.j2", _build_context(answers, chain))


def build_mcp_server(
    answers: WizardAnswers,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return ``src/mcp-server.ts`` exposing a ``chat`` tool over stdio."""
    return _renderer(renderer).render("mcp-server.ts.j2", _build_context(answers))


def build_agent_card(answers: WizardAnswers) -> str:
    """Return ``.well-known/agent-card.json`` for A2A discovery."""
    card = {
        "name": answers.agent_name,
        "description": answers.agent_description,
        "url": f"http://localhost:{A2A_PORT}/a2a",
        "version": "1.0.0",
        "protocolVersion": A2A_PROTOCOL_VERSION,
        "capabilities": {
            "streaming": answers.a2a_streaming,
            "pushNotifications": False,
        },
        "defaultInputModes": ["text"],
        "defaultOutputModes": ["text"],
        "skills": [
            {
                "id": "chat",
                "name": "Chat",
                "description": f"Chat with {answers.agent_name}",
                "tags": ["chat"],
            },
        ],
    }
    if answers.agent_image:
        card["iconUrl"] = answers.agent_image
    return json.dumps(card, indent=2, ensure_ascii=False) + "\n"


def build_tsconfig(renderer: TemplateRenderer | None = None) -> str:
    """Return the static ``tsconfig.json``."""
    return _renderer(renderer).render("tsconfig.json.j2", {})


def build_gitignore(renderer: TemplateRenderer | None = None) -> str:
    """Return the static ``.gitignore``."""
    return _renderer(renderer).render("gitignore.j2", {})
