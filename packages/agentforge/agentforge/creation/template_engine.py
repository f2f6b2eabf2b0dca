"""Template engine — fills ``{{placeholder}}`` markers in a blueprint."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from agentforge.core.errors import TemplateRenderError
from agentforge.schemas.agent import AgentBlueprint

_PLACEHOLDER_RE = re.compile(r"{{([^}]+)}}")


def _lookup(variables: Mapping[str, Any], path: str) -> Any:
    """Resolve a dotted path ('a.b.c') in nested mappings; None if absent."""
    current: Any = variables
    for key in path.split("."):
        if not isinstance(current, Mapping) or key not in current:
            return None
        current = current[key]
    return current


class TemplateEngine:
    """Substitutes variables into every string of a blueprint.

    Substitution is a single pass: text coming from a variable is never
    scanned for further placeholders. Placeholders with no matching
    variable are left untouched unless rendering in strict mode.
    """

    def render_string(self, text: str, variables: Mapping[str, Any]) -> str:
        return self._render_text(text, variables, [])

    def render(
        self,
        blueprint: AgentBlueprint,
        variables: Mapping[str, Any],
        *,
        strict: bool = False,
    ) -> dict[str, Any]:
        """Render ``blueprint`` into a fresh plain-data dict.

        Raises:
            TemplateRenderError: In strict mode, if any placeholder is unresolved.
        """
        unresolved: list[str] = []
        rendered = self._substitute(blueprint.model_dump(mode="json"), variables, unresolved)
        if strict and unresolved:
            raise TemplateRenderError(
                f"Unresolved template placeholders: {', '.join(sorted(set(unresolved)))}"
            )
        return rendered

    def _render_text(
        self, text: str, variables: Mapping[str, Any], unresolved: list[str]
    ) -> str:
        def replace(match: re.Match[str]) -> str:
            name = match.group(1).strip()
            value = _lookup(variables, name)
            if value is None:
                unresolved.append(name)
                return match.group(0)
            return str(value)

        return _PLACEHOLDER_RE.sub(replace, text)

    def _substitute(self, obj: Any, variables: Mapping[str, Any], unresolved: list[str]) -> Any:
        if isinstance(obj, str):
            return self._render_text(obj, variables, unresolved)
        if isinstance(obj, Mapping):
            return {key: self._substitute(value, variables, unresolved) for key, value in obj.items()}
        if isinstance(obj, list):
            return [self._substitute(item, variables, unresolved) for item in obj]
        return obj
