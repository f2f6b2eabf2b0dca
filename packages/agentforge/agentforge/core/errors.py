"""Core error hierarchy for AgentForge."""

from __future__ import annotations


class AgentForgeError(Exception):
    """Base exception for all AgentForge errors."""


class CatalogError(AgentForgeError):
    """Raised when the bundled agent catalog is malformed or inconsistent."""


class TemplateRenderError(AgentForgeError):
    """Raised when a template blueprint cannot be rendered into an agent."""
