"""Agent template schema — blueprints plus the fields a caller may override."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, model_validator

from agentforge.schemas.agent import SEMVER_PATTERN, AgentBlueprint, AgentRole


class OptionType(StrEnum):
    """Declared value type of a customization option."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


def is_number(value: Any) -> bool:
    """True for int/float values other than bool and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


_TYPE_CHECKS: dict[OptionType, Callable[[Any], bool]] = {
    OptionType.STRING: lambda v: isinstance(v, str),
    OptionType.NUMBER: is_number,
    OptionType.BOOLEAN: lambda v: isinstance(v, bool),
    OptionType.ARRAY: lambda v: isinstance(v, (list, tuple)),
    OptionType.OBJECT: lambda v: isinstance(v, Mapping),
}


def matches_type(option_type: OptionType, value: Any) -> bool:
    return _TYPE_CHECKS[option_type](value)


class RuleType(StrEnum):
    MIN = "min"
    MAX = "max"
    ENUM = "enum"
    PATTERN = "pattern"


class ValidationRule(BaseModel):
    """A constraint attached to a customization option.

    ``params`` depends on ``type``: ``length`` (strings) or ``value``
    (numbers) for min/max, ``values`` for enum, ``pattern`` for pattern.
    ``message`` is reported verbatim on violation.
    """

    type: RuleType
    params: dict[str, Any] = Field(default_factory=dict)
    message: str


class CustomizationOption(BaseModel):
    """One overridable field on a template.

    A ``default_value`` of ``None`` means the option has no default.
    """

    id: str = Field(min_length=1)
    name: str
    description: str = ""
    type: OptionType
    default_value: Any = None
    required: bool = False
    validation: list[ValidationRule] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_default(self) -> CustomizationOption:
        if self.default_value is None:
            if not self.required:
                raise ValueError(f"Optional option '{self.id}' must declare a default value")
        elif not matches_type(self.type, self.default_value):
            raise ValueError(
                f"Default value of option '{self.id}' does not match its type '{self.type}'"
            )
        return self

    @property
    def has_default(self) -> bool:
        return self.default_value is not None


class TemplateMetadata(BaseModel):
    created_at: datetime
    author: str
    version: str = Field(pattern=SEMVER_PATTERN)
    usage_count: int = Field(default=0, ge=0)
    average_rating: float = Field(default=0.0, ge=0, le=5)


class AgentTemplate(BaseModel):
    """A reusable blueprint for producing customized agent definitions."""

    id: str = Field(min_length=1)
    name: str
    description: str = ""
    base_role: AgentRole = Field(description="Role this template specializes")
    template: AgentBlueprint
    customization_options: list[CustomizationOption] = Field(default_factory=list)
    template_metadata: TemplateMetadata

    def get_option(self, option_id: str) -> CustomizationOption | None:
        for option in self.customization_options:
            if option.id == option_id:
                return option
        return None


class ValidationResult(BaseModel):
    """Outcome of validating customizations against a template."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
