"""Template registry — one customizable template per role plus a fallback."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from agentforge.core.errors import CatalogError
from agentforge.schemas.agent import AgentRole
from agentforge.schemas.template import AgentTemplate

FALLBACK_ROLE = AgentRole.CUSTOM


class TemplateRegistry:
    """Read-only catalog of agent templates keyed by role.

    Every predefined role's template must specialize that role. The
    fallback (``Custom``) slot may be built on any role's base.
    """

    def __init__(self, templates: Mapping[str, AgentTemplate]) -> None:
        self._templates: dict[str, AgentTemplate] = {}
        seen_ids: set[str] = set()
        for key, template in templates.items():
            try:
                role = AgentRole(key)
            except ValueError:
                raise CatalogError(f"Unknown role '{key}' in template registry") from None
            if role is not FALLBACK_ROLE and template.base_role != role:
                raise CatalogError(
                    f"Template '{template.id}' specializes '{template.base_role}' "
                    f"but is registered under '{role}'"
                )
            if template.id in seen_ids:
                raise CatalogError(f"Duplicate template id '{template.id}'")
            option_ids = [option.id for option in template.customization_options]
            if len(option_ids) != len(set(option_ids)):
                raise CatalogError(f"Template '{template.id}' declares duplicate option ids")
            seen_ids.add(template.id)
            self._templates[role] = template.model_copy(deep=True)

    def get_template(self, role: Any) -> AgentTemplate | None:
        """Return a copy of the template for ``role``, or None if unknown."""
        if not isinstance(role, str):
            return None
        template = self._templates.get(role)
        if template is None:
            return None
        return template.model_copy(deep=True)

    def get_template_by_id(self, template_id: str) -> AgentTemplate | None:
        for template in self._templates.values():
            if template.id == template_id:
                return template.model_copy(deep=True)
        return None

    def get_all_templates(self) -> list[AgentTemplate]:
        return [t.model_copy(deep=True) for t in self._templates.values()]

    def has_template(self, role: Any) -> bool:
        return isinstance(role, str) and role in self._templates

    def get_template_roles(self) -> list[AgentRole]:
        """Every role with a template, the fallback included."""
        return [AgentRole(role) for role in self._templates]

    def __len__(self) -> int:
        return len(self._templates)
