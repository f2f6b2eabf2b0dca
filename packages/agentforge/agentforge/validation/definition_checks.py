"""Definition checks — schema limits, resource, security, and fit checks for an agent."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from agentforge.schemas.agent import AgentDefinition, AgentRole, LearningMode


class CheckCategory(StrEnum):
    SCHEMA = "schema"
    PERFORMANCE = "performance"
    SECURITY = "security"
    COMPATIBILITY = "compatibility"


class CheckIssue(BaseModel):
    """A single problem found in an agent definition."""

    category: CheckCategory
    severity: str = Field(description="'error' or 'warning'")
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


# Keywords expected in an agent's goals and skills, per role.
_GOAL_KEYWORDS: dict[AgentRole, list[str]] = {
    AgentRole.FRONTEND_DEV: ["user interface", "responsive", "component", "performance", "accessib"],
    AgentRole.BACKEND_DEV: ["api", "database", "secur", "scalab", "reliab"],
    AgentRole.QA: ["test", "quality", "automat", "reliab", "defect"],
    AgentRole.ARCHITECT: ["design", "scalab", "architect", "strateg", "technical"],
    AgentRole.CLI_DEV: ["cli", "tools", "automation", "productivity", "developer experience"],
    AgentRole.UX_EXPERT: ["user experience", "usability", "research", "accessible", "design"],
    AgentRole.SM: ["facilitat", "agile", "team", "improvement", "delivery"],
}

_SKILL_KEYWORDS: dict[AgentRole, list[str]] = {
    AgentRole.FRONTEND_DEV: ["react", "typescript", "css", "javascript", "frontend"],
    AgentRole.BACKEND_DEV: ["node", "api", "database", "microservices", "cloud"],
    AgentRole.QA: ["testing", "automation", "quality", "test", "bug"],
    AgentRole.ARCHITECT: ["architecture", "design", "scalability", "system", "technical"],
    AgentRole.CLI_DEV: ["cli", "command-line", "tool", "scripting", "bash"],
    AgentRole.UX_EXPERT: ["user", "design", "usability", "research", "accessibility"],
    AgentRole.SM: ["scrum", "agile", "facilitation", "team", "coaching"],
}

PERFORMANCE_TIME_TARGET = 60
PERFORMANCE_MEMORY_TARGET = 4096


def _error(category: CheckCategory, message: str, **details: Any) -> CheckIssue:
    return CheckIssue(category=category, severity="error", message=message, details=details)


def _warning(category: CheckCategory, message: str, **details: Any) -> CheckIssue:
    return CheckIssue(category=category, severity="warning", message=message, details=details)


def _check_schema_limits(agent: AgentDefinition) -> list[CheckIssue]:
    issues: list[CheckIssue] = []
    schema = CheckCategory.SCHEMA

    if not 10 <= len(agent.description) <= 1000:
        issues.append(_error(schema, "Description must be between 10 and 1000 characters"))
    if not 20 <= len(agent.backstory) <= 2000:
        issues.append(_error(schema, "Backstory must be between 20 and 2000 characters"))
    if not 1 <= len(agent.goals) <= 10:
        issues.append(_error(schema, "Agent must have between 1 and 10 goals", count=len(agent.goals)))
    short_goals = [g for g in agent.goals if len(g) < 5]
    if short_goals:
        issues.append(_error(schema, "Goals must be at least 5 characters long", goals=short_goals))
    if not 5 <= len(agent.core_skills) <= 20:
        issues.append(_error(
            schema, "Agent must have between 5 and 20 core skills", count=len(agent.core_skills),
        ))
    short_skills = [s for s in agent.core_skills if len(s) < 3]
    if short_skills:
        issues.append(_error(schema, "Core skills must be at least 3 characters long", skills=short_skills))

    perf = agent.configuration.performance
    if not 5 <= perf.max_execution_time <= 600:
        issues.append(_error(
            schema, "Max execution time must be between 5 and 600 seconds",
            current_value=perf.max_execution_time,
        ))
    if not 64 <= perf.memory_limit <= 8192:
        issues.append(_error(
            schema, "Memory limit must be between 64 and 8192 MB", current_value=perf.memory_limit,
        ))
    if not 1 <= perf.max_concurrent_tasks <= 10:
        issues.append(_error(
            schema, "Max concurrent tasks must be between 1 and 10",
            current_value=perf.max_concurrent_tasks,
        ))
    if not agent.configuration.capabilities.allowed_tools:
        issues.append(_error(schema, "Agent must be allowed at least one tool"))
    return issues


def _check_performance(agent: AgentDefinition) -> list[CheckIssue]:
    issues: list[CheckIssue] = []
    perf = agent.configuration.performance
    if perf.max_execution_time > PERFORMANCE_TIME_TARGET:
        issues.append(_warning(
            CheckCategory.PERFORMANCE,
            f"Maximum execution time exceeds {PERFORMANCE_TIME_TARGET} seconds",
            current_value=perf.max_execution_time,
            recommended_value=PERFORMANCE_TIME_TARGET,
        ))
    if perf.memory_limit > PERFORMANCE_MEMORY_TARGET:
        issues.append(_warning(
            CheckCategory.PERFORMANCE,
            "Memory limit exceeds 4GB",
            current_value=perf.memory_limit,
            recommended_value=PERFORMANCE_MEMORY_TARGET,
        ))
    return issues


def _check_security(agent: AgentDefinition) -> list[CheckIssue]:
    issues: list[CheckIssue] = []
    caps = agent.configuration.capabilities
    if caps.file_system_access.execute and not caps.file_system_access.restricted_paths:
        issues.append(_warning(
            CheckCategory.SECURITY,
            "File system execute access requires restricted paths",
            recommendation="Define restricted_paths when execute access is enabled",
        ))
    if caps.network_access.external_apis and not caps.network_access.allowed_domains:
        issues.append(_warning(
            CheckCategory.SECURITY,
            "External API access requires allowed domains",
            recommendation="Define allowed_domains when external_apis is enabled",
        ))
    return issues


def _keyword_matches(texts: list[str], keywords: list[str]) -> list[str]:
    haystack = " ".join(texts).lower()
    return [k for k in keywords if k in haystack]


def _check_compatibility(agent: AgentDefinition) -> list[CheckIssue]:
    issues: list[CheckIssue] = []
    compat = CheckCategory.COMPATIBILITY

    goal_keywords = _GOAL_KEYWORDS.get(agent.role, [])
    if goal_keywords:
        found = _keyword_matches(agent.goals, goal_keywords)
        if len(found) < len(goal_keywords) * 0.6:
            issues.append(_warning(
                compat, "Goals do not align well with role expectations",
                role=agent.role.value, expected_keywords=goal_keywords, found_keywords=found,
            ))

    skill_keywords = _SKILL_KEYWORDS.get(agent.role, [])
    if skill_keywords:
        found = _keyword_matches(agent.core_skills, skill_keywords)
        if len(found) < min(3, len(skill_keywords)):
            issues.append(_warning(
                compat, "Core skills do not align with role expectations",
                role=agent.role.value, expected_skills=skill_keywords, found_skills=found,
            ))

    collaboration = agent.configuration.communication.collaboration
    if agent.learning_mode == LearningMode.STATIC and collaboration.enabled:
        issues.append(_error(
            compat, "Static learning mode should not have collaboration enabled",
            learning_mode=agent.learning_mode.value, collaboration_enabled=True,
        ))

    perf = agent.configuration.performance
    if perf.max_concurrent_tasks > 5 and perf.priority < 8:
        issues.append(_error(
            compat, "High concurrent tasks require higher priority",
            max_concurrent_tasks=perf.max_concurrent_tasks,
            priority=perf.priority,
            recommendation="Increase priority to 8+ or reduce concurrent tasks",
        ))
    return issues


def check_definition(agent: AgentDefinition) -> list[CheckIssue]:
    """Run every definition check and return all issues found (empty = clean).

    Issues with severity 'error' make a definition unusable; 'warning'
    issues are advisory. The ``Custom`` role skips keyword alignment.
    """
    return [
        *_check_schema_limits(agent),
        *_check_performance(agent),
        *_check_security(agent),
        *_check_compatibility(agent),
    ]


def has_errors(issues: list[CheckIssue]) -> bool:
    return any(issue.severity == "error" for issue in issues)
