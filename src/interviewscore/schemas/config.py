"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StorageConfig(BaseModel):
    path: Path | None = None

    model_config = ConfigDict(extra="forbid")


class NotificationConfig(BaseModel):
    dismiss_after_ms: int = Field(default=3500, gt=0)

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    storage: StorageConfig = Field(default_factory=StorageConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        if self.storage.path is not None:
            settings["storage"] = {"path": self.storage.path}
        if "dismiss_after_ms" in self.notifications.model_fields_set:
            settings["notifications"] = self.notifications.model_dump()
        return settings


def load_config(raw: Any) -> AppConfig:
    """Validate a parsed YAML document; an empty document yields defaults."""
    if raw is None:
        return AppConfig()
    return AppConfig.model_validate(raw)
