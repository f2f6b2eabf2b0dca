"""AgentForge registries — read-only lookups over the agent catalog."""

from agentforge.registry.definitions import DefinitionRegistry, is_predefined_role
from agentforge.registry.templates import FALLBACK_ROLE, TemplateRegistry

__all__ = [
    "FALLBACK_ROLE",
    "DefinitionRegistry",
    "TemplateRegistry",
    "is_predefined_role",
]
