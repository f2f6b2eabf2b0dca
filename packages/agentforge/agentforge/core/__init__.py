"""AgentForge core — identifiers and errors."""

from agentforge.core.errors import AgentForgeError, CatalogError, TemplateRenderError
from agentforge.core.identifiers import AgentId, generate_agent_id, role_slug

__all__ = [
    "AgentForgeError",
    "AgentId",
    "CatalogError",
    "TemplateRenderError",
    "generate_agent_id",
    "role_slug",
]
