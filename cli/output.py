"""Output helpers for the scpgen CLI."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel


def render(data: Any, indent: int | None = 1) -> str:
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True)
    return json.dumps(data, indent=indent)


def emit(data: Any, output_path: Path | None = None, indent: int | None = 1) -> None:
    rendered = render(data, indent=indent)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered + ("\n" if not rendered.endswith("\n") else ""), encoding="utf-8")
    else:
        print(rendered)


__all__ = ["emit", "render"]
