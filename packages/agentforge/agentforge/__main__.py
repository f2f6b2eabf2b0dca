"""Entry point: python -m agentforge.

Usage:
    python -m agentforge roles
    python -m agentforge show "CLI Dev"
    python -m agentforge template QA
    python -m agentforge validate FrontendDev --set name=Ada --set max_execution_time=120
    python -m agentforge create Custom --set name=Helper --set "description=Writes release notes for every sprint"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from agentforge.catalog import load_registries
from agentforge.core.errors import AgentForgeError
from agentforge.creation import AgentCreationService, CreationOptions
from agentforge.settings import SettingsManager

logger = logging.getLogger(__name__)


def parse_assignments(pairs: list[str]) -> dict[str, Any]:
    """Parse ``key=value`` pairs; values are decoded as JSON when possible."""
    result: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got '{pair}'")
        try:
            result[key] = json.loads(raw)
        except json.JSONDecodeError:
            result[key] = raw
    return result


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="agentforge", description="Agent catalog and creation")
    parser.add_argument("--catalog-dir", default=None, help="Catalog directory (default: bundled)")
    parser.add_argument("--config-dir", default=None, help="Settings directory (default: ~/.agentforge)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("roles", help="List predefined roles")
    show = sub.add_parser("show", help="Show the canonical definition for a role")
    show.add_argument("role")
    template = sub.add_parser("template", help="Show the template for a role or template id")
    template.add_argument("ref")

    for name, help_text in (
        ("validate", "Validate customizations against a template"),
        ("create", "Create an agent from a template"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("ref", help="Role or template id")
        cmd.add_argument("--set", dest="assignments", action="append", default=[], metavar="KEY=VALUE")
        if name == "create":
            cmd.add_argument("--skip-validation", action="store_true")
    return parser


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = SettingsManager(args.config_dir).load()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        definitions, templates = load_registries(args.catalog_dir or settings.catalog_dir)
    except AgentForgeError as exc:
        logger.error("%s", exc)
        return 1
    service = AgentCreationService(definitions, templates, settings=settings)

    if args.command == "roles":
        _emit([str(role) for role in definitions.roles()])
        return 0

    if args.command == "show":
        agent = definitions.get_definition(args.role)
        if agent is None:
            logger.error("Unknown role: %s", args.role)
            return 1
        _emit(agent.model_dump(mode="json"))
        return 0

    if args.command == "template":
        found = service.find_template(args.ref)
        if found is None:
            logger.error("Template not found: %s", args.ref)
            return 1
        _emit(found.model_dump(mode="json"))
        return 0

    try:
        customizations = parse_assignments(args.assignments)
    except ValueError as exc:
        logger.error("%s", exc)
        return 1

    if args.command == "validate":
        result = service.validate_template_customizations(args.ref, customizations)
        _emit(result.model_dump(mode="json"))
        return 0 if result.valid else 1

    response = service.create_from_template(
        args.ref, customizations, CreationOptions(skip_validation=args.skip_validation)
    )
    _emit(response.model_dump(mode="json"))
    return 0 if response.success else 1


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
