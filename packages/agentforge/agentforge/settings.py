"""AgentForge settings — local configuration persistence."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

_DEFAULT_DIR = os.path.expanduser("~/.agentforge")
_SETTINGS_FILE = "settings.json"


class ForgeSettings(BaseModel):
    """User-configurable settings, persisted to the local filesystem."""

    # Directory holding definitions/ and templates/ (None = bundled catalog)
    catalog_dir: str | None = None

    # Author recorded on agents created from templates
    default_author: str = "Agent Creator"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Root log level for the CLI",
    )

    # Creation slower than this is flagged in the response
    creation_time_target_ms: float = Field(default=30_000, gt=0)


class SettingsManager:
    """Manages loading and saving settings from the local filesystem."""

    def __init__(self, config_dir: str | None = None) -> None:
        self._config_dir = Path(config_dir or _DEFAULT_DIR)

    @property
    def settings_path(self) -> Path:
        return self._config_dir / _SETTINGS_FILE

    def load(self) -> ForgeSettings:
        """Load settings from disk. Returns defaults if the file doesn't exist."""
        if not self.settings_path.exists():
            return ForgeSettings()
        try:
            data = json.loads(self.settings_path.read_text())
            return ForgeSettings.model_validate(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Failed to load settings from %s: %s", self.settings_path, exc)
            return ForgeSettings()

    def save(self, settings: ForgeSettings) -> None:
        self._config_dir.mkdir(parents=True, exist_ok=True)
        self.settings_path.write_text(settings.model_dump_json(indent=2) + "\n")

    def update(self, updates: dict) -> ForgeSettings:
        """Load current settings, apply non-None updates, save, and return."""
        settings = self.load()
        updated = settings.model_copy(update={
            k: v for k, v in updates.items() if v is not None
        })
        self.save(updated)
        return updated
