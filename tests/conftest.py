"""Shared test fixtures for AgentForge."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from agentforge.catalog import load_catalog, load_registries
from agentforge.catalog.loader import _DATA_DIR
from agentforge.creation import AgentCreationService
from agentforge.registry import DefinitionRegistry, TemplateRegistry
from agentforge.schemas.template import AgentTemplate, CustomizationOption
from agentforge.settings import ForgeSettings


# ── Fixtures ───────────────────────────────────────────────────────


@pytest.fixture()
def registries() -> tuple[DefinitionRegistry, TemplateRegistry]:
    """Registries over the bundled catalog."""
    return load_registries()


@pytest.fixture()
def definitions(registries) -> DefinitionRegistry:
    return registries[0]


@pytest.fixture()
def templates(registries) -> TemplateRegistry:
    return registries[1]


@pytest.fixture()
def service(registries) -> AgentCreationService:
    definitions, templates = registries
    return AgentCreationService(definitions, templates, settings=ForgeSettings())


@pytest.fixture()
def catalog():
    return load_catalog()


@pytest.fixture()
def make_template(templates):
    """Build a template on the Custom blueprint with the given options."""

    def _make(options: list[dict[str, Any]]) -> AgentTemplate:
        base = templates.get_template("Custom")
        return base.model_copy(update={
            "customization_options": [CustomizationOption.model_validate(o) for o in options],
        })

    return _make


@pytest.fixture()
def name_age_template(make_template) -> AgentTemplate:
    """Required ``name`` (3..50, no default) and optional ``age`` (18..100, default 25)."""
    return make_template([
        {
            "id": "name",
            "name": "Agent Name",
            "type": "string",
            "required": True,
            "validation": [
                {"type": "min", "params": {"length": 3}, "message": "Name must be at least 3 characters"},
                {"type": "max", "params": {"length": 50}, "message": "Name must not exceed 50 characters"},
            ],
        },
        {
            "id": "age",
            "name": "Age",
            "type": "number",
            "default_value": 25,
            "required": False,
            "validation": [
                {"type": "min", "params": {"value": 18}, "message": "Age must be at least 18"},
                {"type": "max", "params": {"value": 100}, "message": "Age must not exceed 100"},
            ],
        },
    ])


@pytest.fixture()
def catalog_copy(tmp_path) -> Path:
    """Writable copy of the bundled catalog directory."""
    root = tmp_path / "catalog"
    for sub in ("definitions", "templates"):
        (root / sub).mkdir(parents=True)
        for path in (_DATA_DIR / sub).glob("*.json"):
            (root / sub / path.name).write_text(path.read_text())
    return root
