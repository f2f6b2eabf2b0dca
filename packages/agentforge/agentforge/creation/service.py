"""Agent creation service — builds agent definitions from templates."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from agentforge.core.errors import TemplateRenderError
from agentforge.core.identifiers import generate_agent_id
from agentforge.creation.monitor import CreationMonitor, CreationRecord
from agentforge.creation.template_engine import TemplateEngine
from agentforge.registry.definitions import DefinitionRegistry
from agentforge.registry.templates import TemplateRegistry
from agentforge.schemas.agent import AgentDefinition
from agentforge.schemas.template import AgentTemplate, ValidationResult
from agentforge.settings import ForgeSettings
from agentforge.validation.customizations import merge_customizations, validate_customizations
from agentforge.validation.definition_checks import CheckIssue, check_definition

logger = logging.getLogger(__name__)

# Template options that map onto a structural field of the rendered agent.
_OPTION_TARGETS: dict[str, tuple[str, ...]] = {
    "learning_mode": ("learning_mode",),
    "max_execution_time": ("configuration", "performance", "max_execution_time"),
    "memory_limit": ("configuration", "performance", "memory_limit"),
    "max_concurrent_tasks": ("configuration", "performance", "max_concurrent_tasks"),
    "priority": ("configuration", "performance", "priority"),
    "communication_style": ("configuration", "communication", "style"),
    "response_format": ("configuration", "communication", "response_format"),
    "collaboration_enabled": ("configuration", "communication", "collaboration", "enabled"),
    "allowed_tools": ("configuration", "capabilities", "allowed_tools"),
}


class CreationOptions(BaseModel):
    """Caller options for a single creation request."""

    skip_validation: bool = Field(default=False, description="Skip definition checks (not recommended)")
    performance_overrides: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial performance config applied over the rendered agent",
    )


class CreationMetadata(BaseModel):
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    creation_time_ms: float = 0.0
    performance_target_met: bool = False
    check_issues: list[CheckIssue] = Field(default_factory=list)


class CreateAgentResponse(BaseModel):
    success: bool
    agent: AgentDefinition | None = None
    metadata: CreationMetadata = Field(default_factory=CreationMetadata)
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


def _set_path(data: dict[str, Any], path: tuple[str, ...], value: Any) -> None:
    target = data
    for key in path[:-1]:
        target = target.setdefault(key, {})
    target[path[-1]] = value


def _format_validation_error(exc: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]


class AgentCreationService:
    """Creates agent definitions from templates or caller-supplied definitions.

    Created agents are returned to the caller, never persisted.
    """

    def __init__(
        self,
        definitions: DefinitionRegistry,
        templates: TemplateRegistry,
        settings: ForgeSettings | None = None,
        engine: TemplateEngine | None = None,
        monitor: CreationMonitor | None = None,
    ) -> None:
        self._definitions = definitions
        self._templates = templates
        self._settings = settings or ForgeSettings()
        self._engine = engine or TemplateEngine()
        self._monitor = monitor or CreationMonitor(target_ms=self._settings.creation_time_target_ms)

    @property
    def monitor(self) -> CreationMonitor:
        return self._monitor

    def available_agents(self) -> list[AgentDefinition]:
        return self._definitions.get_all_definitions()

    def available_templates(self) -> list[AgentTemplate]:
        return self._templates.get_all_templates()

    def find_template(self, template_ref: str) -> AgentTemplate | None:
        """Look a template up by template id first, then by role."""
        return self._templates.get_template_by_id(template_ref) or self._templates.get_template(
            template_ref
        )

    def validate_template_customizations(
        self, template_ref: str, customizations: Mapping[str, Any] | None
    ) -> ValidationResult:
        template = self.find_template(template_ref)
        if template is None:
            return ValidationResult(valid=False, errors=[f"Template not found: {template_ref}"])
        return validate_customizations(template, customizations)

    def create_from_template(
        self,
        template_ref: str,
        customizations: Mapping[str, Any] | None = None,
        options: CreationOptions | None = None,
    ) -> CreateAgentResponse:
        """Validate customizations, render the template, and check the result."""
        start = time.perf_counter()
        options = options or CreationOptions()
        customizations = customizations if customizations is not None else {}

        template = self.find_template(template_ref)
        if template is None:
            return self._failure(start, [f"Template not found: {template_ref}"])
        role = template.template.role

        validation = validate_customizations(template, customizations)
        if not validation.valid:
            return self._failure(start, validation.errors, role)

        merged = merge_customizations(template, customizations)
        agent_id = generate_agent_id(role)
        try:
            data = self._engine.render(
                template.template, {**merged, "agent_id": agent_id}, strict=True
            )
        except TemplateRenderError as exc:
            return self._failure(start, [str(exc)], role)

        for option in template.customization_options:
            path = _OPTION_TARGETS.get(option.id)
            if path is not None and merged.get(option.id) is not None:
                _set_path(data, path, merged[option.id])
        data["configuration"]["performance"].update(options.performance_overrides)
        data["id"] = agent_id
        data["metadata"] = self._new_metadata(template)

        try:
            agent = AgentDefinition.model_validate(data)
        except ValidationError as exc:
            return self._failure(start, _format_validation_error(exc), role)
        logger.debug("Rendered agent %s from template %s", agent.id, template.id)
        return self._finish(agent, options, start)

    def create_from_definition(
        self, agent: AgentDefinition, options: CreationOptions | None = None
    ) -> CreateAgentResponse:
        """Check a caller-supplied definition, applying performance overrides."""
        start = time.perf_counter()
        options = options or CreationOptions()
        data = agent.model_dump()
        data["configuration"]["performance"].update(options.performance_overrides)
        try:
            candidate = AgentDefinition.model_validate(data)
        except ValidationError as exc:
            return self._failure(start, _format_validation_error(exc), agent.role)
        return self._finish(candidate, options, start)

    def _new_metadata(self, template: AgentTemplate) -> dict[str, Any]:
        now = datetime.now(UTC)
        return {
            "created_at": now,
            "updated_at": now,
            "version": "1.0.0",
            "author": self._settings.default_author,
            "tags": [template.base_role.value, "generated"],
            "dependencies": [],
        }

    def _finish(
        self, agent: AgentDefinition, options: CreationOptions, start: float
    ) -> CreateAgentResponse:
        metadata = CreationMetadata()
        errors: list[str] = []
        warnings: list[str] = []
        if not options.skip_validation:
            metadata.check_issues = check_definition(agent)
            for issue in metadata.check_issues:
                (errors if issue.severity == "error" else warnings).append(issue.message)

        metadata.creation_time_ms = (time.perf_counter() - start) * 1000
        target = self._settings.creation_time_target_ms
        metadata.performance_target_met = metadata.creation_time_ms < target
        if not metadata.performance_target_met:
            warnings.append(
                f"Agent creation took {metadata.creation_time_ms:.0f}ms, "
                f"exceeding the {target:.0f}ms target"
            )

        if errors:
            logger.info("Agent %s failed definition checks: %s", agent.id, "; ".join(errors))
            self._record(metadata, agent.role, errors)
            return CreateAgentResponse(
                success=False, metadata=metadata, errors=errors, warnings=warnings,
            )
        logger.info("Created agent %s (%s)", agent.id, agent.role)
        self._record(metadata, agent.role)
        return CreateAgentResponse(
            success=True, agent=agent, metadata=metadata, warnings=warnings,
        )

    def _failure(
        self, start: float, errors: list[str], role: str | None = None
    ) -> CreateAgentResponse:
        elapsed_ms = (time.perf_counter() - start) * 1000
        metadata = CreationMetadata(
            creation_time_ms=elapsed_ms,
            performance_target_met=elapsed_ms < self._settings.creation_time_target_ms,
        )
        logger.info("Agent creation failed: %s", "; ".join(errors))
        self._record(metadata, role, errors)
        return CreateAgentResponse(success=False, metadata=metadata, errors=errors)

    def _record(
        self, metadata: CreationMetadata, role: str | None, errors: list[str] | None = None
    ) -> None:
        self._monitor.record(CreationRecord(
            timestamp=metadata.created_at,
            duration_ms=metadata.creation_time_ms,
            success=not errors,
            target_met=metadata.performance_target_met,
            role=str(role) if role is not None else None,
            error="; ".join(errors) if errors else None,
        ))
