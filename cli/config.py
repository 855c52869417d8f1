"""Configuration loader for the scpgen CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULTS = {
    "output": None,
    "indent": 1,
    "warn_on_extra_reports": True,
}


@dataclass(slots=True)
class Settings:
    output: Path | None = DEFAULTS["output"]
    indent: int = DEFAULTS["indent"]
    warn_on_extra_reports: bool = DEFAULTS["warn_on_extra_reports"]

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Settings":
        output = data.get("output", DEFAULTS["output"])
        return cls(
            output=Path(output) if output else None,
            indent=int(data.get("indent", DEFAULTS["indent"])),
            warn_on_extra_reports=bool(data.get("warn_on_extra_reports", DEFAULTS["warn_on_extra_reports"])),
        )

    def merge_cli(self, output: Path | None = None) -> "Settings":
        return Settings(
            output=output or self.output,
            indent=self.indent,
            warn_on_extra_reports=self.warn_on_extra_reports,
        )


def load_settings(path: Path) -> Settings:
    if not path.exists():
        return Settings()

    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    if not isinstance(data, dict):
        raise ValueError("Configuration file must be a mapping of keys to values.")

    return Settings.from_mapping(data)


__all__ = ["Settings", "load_settings"]
