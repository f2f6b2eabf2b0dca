"""Tests for agent definition checks."""

from __future__ import annotations

import pytest

from agentforge.schemas.agent import PREDEFINED_ROLES, AgentRole, LearningMode
from agentforge.validation import CheckCategory, check_definition, has_errors


def _messages(issues, severity: str | None = None) -> list[str]:
    return [i.message for i in issues if severity is None or i.severity == severity]


class TestCanonicalDefinitions:
    @pytest.mark.parametrize("role", list(PREDEFINED_ROLES))
    def test_no_errors(self, definitions, role: AgentRole) -> None:
        issues = check_definition(definitions.get_definition(role))
        assert not has_errors(issues), _messages(issues, "error")

    @pytest.mark.parametrize("role", list(PREDEFINED_ROLES))
    def test_role_alignment(self, definitions, role: AgentRole) -> None:
        issues = check_definition(definitions.get_definition(role))
        compat = [i for i in issues if i.category == CheckCategory.COMPATIBILITY]
        assert compat == []


class TestSchemaLimits:
    def test_short_description(self, definitions) -> None:
        agent = definitions.get_definition("QA")
        agent.description = "Tests"
        assert "Description must be between 10 and 1000 characters" in _messages(check_definition(agent))

    def test_short_backstory(self, definitions) -> None:
        agent = definitions.get_definition("QA")
        agent.backstory = "Too short"
        assert "Backstory must be between 20 and 2000 characters" in _messages(check_definition(agent))

    def test_goal_count(self, definitions) -> None:
        agent = definitions.get_definition("SM")
        agent.goals = []
        issues = check_definition(agent)
        assert "Agent must have between 1 and 10 goals" in _messages(issues, "error")

    def test_short_goal(self, definitions) -> None:
        agent = definitions.get_definition("SM")
        agent.goals.append("Go")
        issue = next(i for i in check_definition(agent) if i.message.startswith("Goals must"))
        assert issue.details["goals"] == ["Go"]

    def test_skill_count(self, definitions) -> None:
        agent = definitions.get_definition("Architect")
        agent.core_skills = agent.core_skills[:4]
        assert "Agent must have between 5 and 20 core skills" in _messages(check_definition(agent))

    def test_performance_ranges(self, definitions) -> None:
        agent = definitions.get_definition("CLI Dev")
        agent.configuration.performance.max_execution_time = 601
        agent.configuration.performance.memory_limit = 32
        agent.configuration.performance.max_concurrent_tasks = 0
        errors = _messages(check_definition(agent), "error")
        assert "Max execution time must be between 5 and 600 seconds" in errors
        assert "Memory limit must be between 64 and 8192 MB" in errors
        assert "Max concurrent tasks must be between 1 and 10" in errors

    def test_requires_a_tool(self, definitions) -> None:
        agent = definitions.get_definition("QA")
        agent.configuration.capabilities.allowed_tools = []
        assert has_errors(check_definition(agent))


class TestAdvisoryChecks:
    def test_slow_execution_warns(self, definitions) -> None:
        agent = definitions.get_definition("Architect")
        issues = [i for i in check_definition(agent) if i.category == CheckCategory.PERFORMANCE]
        assert len(issues) == 1
        assert issues[0].severity == "warning"
        assert issues[0].details["current_value"] == 90

    def test_memory_warning(self, definitions) -> None:
        agent = definitions.get_definition("QA")
        agent.configuration.performance.memory_limit = 6000
        assert "Memory limit exceeds 4GB" in _messages(check_definition(agent), "warning")

    def test_execute_without_restricted_paths(self, definitions) -> None:
        agent = definitions.get_definition("QA")
        fs = agent.configuration.capabilities.file_system_access
        fs.execute = True
        fs.restricted_paths = None
        warnings = _messages(check_definition(agent), "warning")
        assert "File system execute access requires restricted paths" in warnings

    def test_external_apis_without_domains(self, definitions) -> None:
        agent = definitions.get_definition("QA")
        net = agent.configuration.capabilities.network_access
        net.external_apis = True
        net.allowed_domains = []
        warnings = _messages(check_definition(agent), "warning")
        assert "External API access requires allowed domains" in warnings

    def test_misaligned_goals(self, definitions) -> None:
        agent = definitions.get_definition("QA")
        agent.goals = ["Paint watercolor landscapes"]
        issue = next(i for i in check_definition(agent) if i.message.startswith("Goals do not align"))
        assert issue.severity == "warning"
        assert issue.details["role"] == "QA"


class TestCompatibilityErrors:
    def test_static_learning_with_collaboration(self, definitions) -> None:
        agent = definitions.get_definition("UX Expert")
        agent.learning_mode = LearningMode.STATIC
        assert "Static learning mode should not have collaboration enabled" in _messages(
            check_definition(agent), "error"
        )

    def test_static_learning_without_collaboration(self, definitions) -> None:
        agent = definitions.get_definition("UX Expert")
        agent.learning_mode = LearningMode.STATIC
        agent.configuration.communication.collaboration.enabled = False
        assert not has_errors(check_definition(agent))

    def test_high_concurrency_needs_priority(self, definitions) -> None:
        agent = definitions.get_definition("QA")
        agent.configuration.performance.max_concurrent_tasks = 6
        issues = check_definition(agent)
        assert "High concurrent tasks require higher priority" in _messages(issues, "error")

    def test_high_concurrency_with_priority(self, definitions) -> None:
        agent = definitions.get_definition("Architect")
        agent.configuration.performance.max_concurrent_tasks = 6
        assert not has_errors(check_definition(agent))

    def test_custom_role_skips_keyword_alignment(self, definitions) -> None:
        agent = definitions.get_definition("QA")
        agent.role = AgentRole.CUSTOM
        agent.goals = ["Paint watercolor landscapes"]
        compat = [i for i in check_definition(agent) if i.category == CheckCategory.COMPATIBILITY]
        assert compat == []


class TestHasErrors:
    def test_empty(self) -> None:
        assert has_errors([]) is False
