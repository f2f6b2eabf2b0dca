"""AgentForge validation — customization and definition checks."""

from agentforge.validation.customizations import merge_customizations, validate_customizations
from agentforge.validation.definition_checks import (
    CheckCategory,
    CheckIssue,
    check_definition,
    has_errors,
)

__all__ = [
    "CheckCategory",
    "CheckIssue",
    "check_definition",
    "has_errors",
    "merge_customizations",
    "validate_customizations",
]
