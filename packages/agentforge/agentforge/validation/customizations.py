"""Customization validator — checks caller overrides against a template.

Validation never raises on bad input. Every problem found across every
option is collected into a single ``ValidationResult``.
"""

from __future__ import annotations

import copy
import re
from collections.abc import Callable, Mapping
from typing import Any

from agentforge.schemas.template import (
    AgentTemplate,
    CustomizationOption,
    OptionType,
    RuleType,
    ValidationResult,
    ValidationRule,
    is_number,
    matches_type,
)

# Marks an option with neither a caller value nor a default.
_MISSING: Any = object()

_TYPE_NOUNS: dict[OptionType, str] = {
    OptionType.STRING: "a string",
    OptionType.NUMBER: "a number",
    OptionType.BOOLEAN: "a boolean",
    OptionType.ARRAY: "an array",
    OptionType.OBJECT: "an object",
}


def merge_customizations(
    template: AgentTemplate, customizations: Mapping[str, Any]
) -> dict[str, Any]:
    """Apply template defaults underneath caller overrides.

    A key present in ``customizations`` always wins, even when its value is
    None. Options the caller omitted take their default when one is
    declared, otherwise they are left out. Keys that are not template
    options are passed through untouched. Neither input is mutated.
    """
    merged: dict[str, Any] = {}
    for option in template.customization_options:
        if option.id in customizations:
            merged[option.id] = customizations[option.id]
        elif option.has_default:
            merged[option.id] = copy.deepcopy(option.default_value)
    for key, value in customizations.items():
        if key not in merged:
            merged[key] = value
    return merged


def _check_bound(value: Any, rule: ValidationRule) -> bool:
    """Return True if a min/max rule is satisfied (or not applicable)."""
    if isinstance(value, str):
        bound = rule.params.get("length")
        measured: Any = len(value)
    elif is_number(value):
        bound = rule.params.get("value")
        measured = value
    else:
        return True
    if not is_number(bound):
        return True
    if rule.type == RuleType.MIN:
        return measured >= bound
    return measured <= bound


def _check_enum(value: Any, rule: ValidationRule) -> bool:
    values = rule.params.get("values")
    if not isinstance(values, list):
        return False
    return value in values


def _check_pattern(value: Any, rule: ValidationRule) -> bool:
    if not isinstance(value, str):
        return True
    pattern = rule.params.get("pattern")
    if not isinstance(pattern, str):
        return False
    try:
        return re.search(pattern, value) is not None
    except re.error:
        return False


_RULE_CHECKS: dict[RuleType, Callable[[Any, ValidationRule], bool]] = {
    RuleType.MIN: _check_bound,
    RuleType.MAX: _check_bound,
    RuleType.ENUM: _check_enum,
    RuleType.PATTERN: _check_pattern,
}


def _validate_option(option: CustomizationOption, value: Any) -> list[str]:
    if option.required:
        if value is None:
            return [f"{option.name} cannot be null"]
        if value is _MISSING or (isinstance(value, str) and value == ""):
            return [f"{option.name} is required"]

    if value is _MISSING or value is None:
        return []

    if not matches_type(option.type, value):
        return [f"{option.name} must be {_TYPE_NOUNS[option.type]}"]

    return [
        rule.message
        for rule in option.validation
        if not _RULE_CHECKS[rule.type](value, rule)
    ]


def validate_customizations(
    template: AgentTemplate, customizations: Mapping[str, Any] | None
) -> ValidationResult:
    """Validate ``customizations`` against ``template``'s options.

    Checks performed for each option, in order:
    - presence: required options may not resolve to None ("cannot be null")
      or be missing/empty ("is required")
    - type: the effective value must match the declared option type
    - rules: min/max/enum/pattern, only once the type check has passed

    Keys that are not template options are ignored.
    """
    if customizations is None:
        customizations = {}
    if not isinstance(customizations, Mapping):
        return ValidationResult(valid=False, errors=["Customizations must be an object"])

    merged = merge_customizations(template, customizations)
    errors: list[str] = []
    for option in template.customization_options:
        errors.extend(_validate_option(option, merged.get(option.id, _MISSING)))

    return ValidationResult(valid=not errors, errors=errors)
