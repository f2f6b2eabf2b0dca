"""AgentForge schemas — Pydantic v2 models for agents and templates."""

from agentforge.schemas.agent import (
    PREDEFINED_ROLES,
    AgentBlueprint,
    AgentConfiguration,
    AgentDefinition,
    AgentMetadata,
    AgentMetrics,
    AgentRole,
    CapabilityConfig,
    CollaborationConfig,
    CollaborationRole,
    CommunicationConfig,
    CommunicationStyle,
    ConflictResolutionStyle,
    FileSystemAccess,
    LearningMode,
    NetworkAccess,
    PerformanceConfig,
    ResponseFormat,
)
from agentforge.schemas.template import (
    AgentTemplate,
    CustomizationOption,
    OptionType,
    RuleType,
    TemplateMetadata,
    ValidationResult,
    ValidationRule,
)

__all__ = [
    "PREDEFINED_ROLES",
    "AgentBlueprint",
    "AgentConfiguration",
    "AgentDefinition",
    "AgentMetadata",
    "AgentMetrics",
    "AgentRole",
    "AgentTemplate",
    "CapabilityConfig",
    "CollaborationConfig",
    "CollaborationRole",
    "CommunicationConfig",
    "CommunicationStyle",
    "ConflictResolutionStyle",
    "CustomizationOption",
    "FileSystemAccess",
    "LearningMode",
    "NetworkAccess",
    "OptionType",
    "PerformanceConfig",
    "ResponseFormat",
    "RuleType",
    "TemplateMetadata",
    "ValidationResult",
    "ValidationRule",
]
