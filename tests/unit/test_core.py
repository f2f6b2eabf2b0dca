"""Tests for core identifiers and errors."""

from __future__ import annotations

import pytest

from agentforge.core import (
    AgentForgeError,
    AgentId,
    CatalogError,
    TemplateRenderError,
    generate_agent_id,
    role_slug,
)


class TestAgentIds:
    @pytest.mark.parametrize(
        ("role", "slug"),
        [("FrontendDev", "frontenddev"), ("CLI Dev", "cli-dev"), ("UX Expert", "ux-expert"), ("SM", "sm")],
    )
    def test_role_slug(self, role: str, slug: str) -> None:
        assert role_slug(role) == slug

    def test_agent_id_prefix(self) -> None:
        agent_id = generate_agent_id("CLI Dev")
        assert agent_id.startswith("cli-dev-")
        assert len(agent_id) == len("cli-dev-") + 12

    def test_agent_ids_unique(self) -> None:
        assert len({generate_agent_id("QA") for _ in range(100)}) == 100

    def test_agent_id_type(self) -> None:
        assert AgentId.__supertype__ is str


class TestErrorHierarchy:
    @pytest.mark.parametrize("exc_type", [CatalogError, TemplateRenderError])
    def test_subclasses_base(self, exc_type) -> None:
        assert issubclass(exc_type, AgentForgeError)
        with pytest.raises(AgentForgeError, match="boom"):
            raise exc_type("boom")
