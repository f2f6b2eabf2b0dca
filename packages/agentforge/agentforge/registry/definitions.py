"""Definition registry — one canonical agent definition per predefined role."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from agentforge.core.errors import CatalogError
from agentforge.schemas.agent import PREDEFINED_ROLES, AgentDefinition, AgentRole

_PREDEFINED_VALUES = frozenset(role.value for role in PREDEFINED_ROLES)


def is_predefined_role(candidate: Any) -> bool:
    """Case-sensitive membership test against the predefined roles.

    ``None``, empty strings and the ``Custom`` fallback are not predefined.
    """
    return isinstance(candidate, str) and candidate in _PREDEFINED_VALUES


class DefinitionRegistry:
    """Read-only catalog of canonical agent definitions keyed by role.

    Every read returns a deep copy, so callers can never mutate the
    catalog held by the registry.
    """

    def __init__(self, definitions: Mapping[str, AgentDefinition]) -> None:
        self._definitions: dict[str, AgentDefinition] = {}
        seen_ids: set[str] = set()
        seen_names: set[str] = set()
        for key, definition in definitions.items():
            if not is_predefined_role(key):
                raise CatalogError(f"'{key}' is not a predefined role and cannot have a definition")
            role = AgentRole(key)
            if definition.role != role:
                raise CatalogError(
                    f"Definition '{definition.id}' has role '{definition.role}' "
                    f"but is registered under '{role}'"
                )
            if definition.id in seen_ids:
                raise CatalogError(f"Duplicate definition id '{definition.id}'")
            if definition.name in seen_names:
                raise CatalogError(f"Duplicate definition name '{definition.name}'")
            seen_ids.add(definition.id)
            seen_names.add(definition.name)
            self._definitions[role] = definition.model_copy(deep=True)

    def get_definition(self, role: Any) -> AgentDefinition | None:
        """Return a copy of the definition for ``role``, or None if unknown."""
        if not isinstance(role, str):
            return None
        definition = self._definitions.get(role)
        if definition is None:
            return None
        return definition.model_copy(deep=True)

    def get_all_definitions(self) -> list[AgentDefinition]:
        """Return a fresh list holding one copy per predefined role."""
        return [d.model_copy(deep=True) for d in self._definitions.values()]

    def roles(self) -> list[AgentRole]:
        return [AgentRole(role) for role in self._definitions]

    def is_predefined_role(self, candidate: Any) -> bool:
        return is_predefined_role(candidate)

    def __contains__(self, role: object) -> bool:
        return isinstance(role, str) and role in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)
