"""Core identifier types for AgentForge."""

from __future__ import annotations

import re
import uuid
from typing import NewType

AgentId = NewType("AgentId", str)

_SLUG_RE = re.compile(r"[^a-z0-9]+")


def role_slug(role: str) -> str:
    """Lowercase a role tag into an id-safe slug ('CLI Dev' -> 'cli-dev')."""
    return _SLUG_RE.sub("-", role.lower()).strip("-")


def generate_agent_id(role: str) -> AgentId:
    """Generate a new AgentId prefixed with the role slug."""
    return AgentId(f"{role_slug(role)}-{uuid.uuid4().hex[:12]}")
