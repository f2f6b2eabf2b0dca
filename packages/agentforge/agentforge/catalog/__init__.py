"""AgentForge catalog — bundled agent definitions and templates."""

from agentforge.catalog.loader import (
    Catalog,
    build_registries,
    check_consistency,
    load_catalog,
    load_registries,
)

__all__ = [
    "Catalog",
    "build_registries",
    "check_consistency",
    "load_catalog",
    "load_registries",
]
