"""Agent definition schema — the fully resolved profile of one agent."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

SEMVER_PATTERN = r"^\d+\.\d+\.\d+(-[0-9A-Za-z][0-9A-Za-z.-]*)?$"


class AgentRole(StrEnum):
    """Fixed role tags. CUSTOM is the fallback for unclassified agents."""

    FRONTEND_DEV = "FrontendDev"
    BACKEND_DEV = "BackendDev"
    QA = "QA"
    ARCHITECT = "Architect"
    CLI_DEV = "CLI Dev"
    UX_EXPERT = "UX Expert"
    SM = "SM"
    CUSTOM = "Custom"


PREDEFINED_ROLES: tuple[AgentRole, ...] = tuple(
    role for role in AgentRole if role is not AgentRole.CUSTOM
)


class LearningMode(StrEnum):
    ADAPTIVE = "adaptive"
    STATIC = "static"
    COLLABORATIVE = "collaborative"
    AUTONOMOUS = "autonomous"


class CommunicationStyle(StrEnum):
    FORMAL = "formal"
    CASUAL = "casual"
    TECHNICAL = "technical"
    EDUCATIONAL = "educational"
    CONCISE = "concise"
    DETAILED = "detailed"


class ResponseFormat(StrEnum):
    MARKDOWN = "markdown"
    JSON = "json"
    XML = "xml"
    PLAIN_TEXT = "plain-text"
    STRUCTURED = "structured"


class CollaborationRole(StrEnum):
    LEADER = "leader"
    CONTRIBUTOR = "contributor"
    REVIEWER = "reviewer"
    IMPLEMENTER = "implementer"
    TESTER = "tester"
    COORDINATOR = "coordinator"


class ConflictResolutionStyle(StrEnum):
    COLLABORATIVE = "collaborative"
    COMPETITIVE = "competitive"
    COMPROMISE = "compromise"
    AVOIDANCE = "avoidance"
    ACCOMMODATION = "accommodation"


class PerformanceConfig(BaseModel):
    """Execution limits for a single agent."""

    max_execution_time: float = Field(ge=0, description="Maximum execution time per task in seconds")
    memory_limit: float = Field(ge=0, description="Memory ceiling in MB")
    max_concurrent_tasks: int = Field(ge=0, description="Concurrent task capacity")
    priority: int = Field(ge=1, le=10, description="Priority rank, 10 being highest")


class FileSystemAccess(BaseModel):
    read: bool
    write: bool
    execute: bool
    restricted_paths: list[str] | None = None
    allowed_paths: list[str] | None = None


class NetworkAccess(BaseModel):
    http: bool
    https: bool
    external_apis: bool
    allowed_domains: list[str] | None = None


class CapabilityConfig(BaseModel):
    """Tool allow-list and access grants."""

    allowed_tools: list[str] = Field(default_factory=list)
    file_system_access: FileSystemAccess
    network_access: NetworkAccess
    agent_integration: bool = Field(description="Whether the agent may integrate with other agents")


class CollaborationConfig(BaseModel):
    enabled: bool
    roles: list[CollaborationRole] = Field(default_factory=list)
    conflict_resolution: ConflictResolutionStyle


class CommunicationConfig(BaseModel):
    style: CommunicationStyle
    response_format: ResponseFormat
    collaboration: CollaborationConfig


class AgentConfiguration(BaseModel):
    """Runtime configuration bundle attached to an agent."""

    performance: PerformanceConfig
    capabilities: CapabilityConfig
    communication: CommunicationConfig
    custom_params: dict[str, Any] | None = None


class AgentMetrics(BaseModel):
    """Performance snapshot from previous executions."""

    avg_completion_time: float = Field(ge=0)
    success_rate: float = Field(ge=0, le=100, description="Success rate percentage")
    tasks_completed: int = Field(ge=0)
    satisfaction_rating: float = Field(ge=0, le=5)
    last_evaluated: datetime


class AgentMetadata(BaseModel):
    created_at: datetime
    updated_at: datetime
    version: str = Field(pattern=SEMVER_PATTERN, description="MAJOR.MINOR.PATCH[-prerelease]")
    author: str
    tags: list[str] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
    metrics: AgentMetrics | None = None


class AgentBlueprint(BaseModel):
    """Agent profile without identity or metadata.

    Used as the base of a template. String fields may carry
    ``{{placeholder}}`` markers that are filled in at render time.
    """

    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    role: AgentRole
    goals: list[str] = Field(default_factory=list)
    backstory: str = Field(min_length=1)
    core_skills: list[str] = Field(default_factory=list)
    learning_mode: LearningMode
    configuration: AgentConfiguration


class AgentDefinition(AgentBlueprint):
    """A fully specified, ready-to-use agent profile."""

    id: str = Field(min_length=1, description="Unique agent identifier")
    metadata: AgentMetadata
