"""AgentForge — catalog of predefined agent roles, templates, and agent creation."""

from agentforge.catalog import build_registries, load_catalog, load_registries
from agentforge.creation import AgentCreationService, CreateAgentResponse, CreationOptions
from agentforge.registry import DefinitionRegistry, TemplateRegistry, is_predefined_role
from agentforge.validation import validate_customizations

__all__ = [
    "AgentCreationService",
    "CreateAgentResponse",
    "CreationOptions",
    "DefinitionRegistry",
    "TemplateRegistry",
    "build_registries",
    "is_predefined_role",
    "load_catalog",
    "load_registries",
    "validate_customizations",
]
