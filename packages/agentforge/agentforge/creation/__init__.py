"""AgentForge creation — template rendering, creation monitoring, and the creation service."""

from agentforge.creation.monitor import CreationMonitor, CreationRecord, CreationStats, RolePerformance
from agentforge.creation.service import (
    AgentCreationService,
    CreateAgentResponse,
    CreationMetadata,
    CreationOptions,
)
from agentforge.creation.template_engine import TemplateEngine

__all__ = [
    "AgentCreationService",
    "CreateAgentResponse",
    "CreationMetadata",
    "CreationMonitor",
    "CreationOptions",
    "CreationRecord",
    "CreationStats",
    "RolePerformance",
    "TemplateEngine",
]
