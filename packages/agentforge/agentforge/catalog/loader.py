"""Catalog loader — reads the bundled agent definitions and templates."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from agentforge.core.errors import CatalogError
from agentforge.registry.definitions import DefinitionRegistry
from agentforge.registry.templates import FALLBACK_ROLE, TemplateRegistry
from agentforge.schemas.agent import PREDEFINED_ROLES, AgentDefinition, AgentRole
from agentforge.schemas.template import AgentTemplate

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
_DEFINITIONS_SUBDIR = "definitions"
_TEMPLATES_SUBDIR = "templates"


class Catalog(BaseModel):
    """Raw catalog content, keyed by role."""

    definitions: dict[AgentRole, AgentDefinition] = Field(default_factory=dict)
    templates: dict[AgentRole, AgentTemplate] = Field(default_factory=dict)


def _read_json(path: Path) -> dict:
    try:
        raw = json.loads(path.read_text())
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Failed to read catalog file {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise CatalogError(f"Catalog file {path} must contain a JSON object")
    return raw


def _load_definitions(directory: Path) -> dict[AgentRole, AgentDefinition]:
    definitions: dict[AgentRole, AgentDefinition] = {}
    if not directory.exists():
        return definitions
    for path in sorted(directory.glob("*.json")):
        try:
            definition = AgentDefinition.model_validate(_read_json(path))
        except ValidationError as exc:
            raise CatalogError(f"Invalid agent definition in {path}: {exc}") from exc
        if definition.role in definitions:
            raise CatalogError(f"Role '{definition.role}' is defined more than once ({path})")
        definitions[definition.role] = definition
    return definitions


def _load_templates(directory: Path) -> dict[AgentRole, AgentTemplate]:
    """Load template files.

    A file is registered under its ``base_role`` unless it names another
    slot via a top-level ``_role`` key (how the fallback slot can borrow
    another role's base).
    """
    templates: dict[AgentRole, AgentTemplate] = {}
    if not directory.exists():
        return templates
    for path in sorted(directory.glob("*.json")):
        raw = _read_json(path)
        slot = raw.pop("_role", None)
        try:
            template = AgentTemplate.model_validate(raw)
            role = AgentRole(slot) if slot is not None else template.base_role
        except ValidationError as exc:
            raise CatalogError(f"Invalid agent template in {path}: {exc}") from exc
        except ValueError:
            raise CatalogError(f"Unknown role '{slot}' in {path}") from None
        if role in templates:
            raise CatalogError(f"Role '{role}' has more than one template ({path})")
        templates[role] = template
    return templates


def load_catalog(catalog_dir: str | Path | None = None) -> Catalog:
    """Load definitions and templates from ``catalog_dir`` (default: bundled data).

    Raises:
        CatalogError: If a file is unreadable or fails schema validation.
    """
    root = Path(catalog_dir) if catalog_dir else _DATA_DIR
    catalog = Catalog(
        definitions=_load_definitions(root / _DEFINITIONS_SUBDIR),
        templates=_load_templates(root / _TEMPLATES_SUBDIR),
    )
    logger.debug(
        "Loaded %d definitions and %d templates from %s",
        len(catalog.definitions), len(catalog.templates), root,
    )
    return catalog


def check_consistency(catalog: Catalog) -> None:
    """Enforce cross-registry coverage.

    Every predefined role needs both a definition and a template, and the
    fallback role needs a template but no definition.
    """
    for role in PREDEFINED_ROLES:
        if role not in catalog.definitions:
            raise CatalogError(f"Missing definition for predefined role '{role}'")
        if role not in catalog.templates:
            raise CatalogError(f"Missing template for predefined role '{role}'")
    if FALLBACK_ROLE in catalog.definitions:
        raise CatalogError(f"Role '{FALLBACK_ROLE}' must not have a canonical definition")
    if FALLBACK_ROLE not in catalog.templates:
        raise CatalogError(f"Missing fallback template for role '{FALLBACK_ROLE}'")


def build_registries(catalog: Catalog) -> tuple[DefinitionRegistry, TemplateRegistry]:
    """Check ``catalog`` and wrap it in read-only registries."""
    check_consistency(catalog)
    return DefinitionRegistry(catalog.definitions), TemplateRegistry(catalog.templates)


def load_registries(
    catalog_dir: str | Path | None = None,
) -> tuple[DefinitionRegistry, TemplateRegistry]:
    return build_registries(load_catalog(catalog_dir))
