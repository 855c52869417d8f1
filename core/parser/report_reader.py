"""Decode scanner usage reports into Report models."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from core.errors import MalformedInput
from core.models import Report


def _decode(data: bytes | str) -> Any:
    try:
        text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
        return json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        raise MalformedInput(f"scanner report is not valid JSON: {exc}") from exc


def _validate(raw: Any, index: int = 0) -> Report:
    if not isinstance(raw, dict):
        raise MalformedInput(f"report {index} must be a JSON object, got {type(raw).__name__}")
    try:
        return Report.model_validate(raw)
    except ValidationError as exc:
        raise MalformedInput(f"report {index} does not match the scanner schema: {exc}") from exc


def load_reports(data: bytes | str) -> list[Report]:
    """Return every report in a scanner document.

    The document is either a JSON array of reports or a single report object.
    """
    payload = _decode(data)
    if isinstance(payload, dict):
        return [_validate(payload)]
    if isinstance(payload, list):
        return [_validate(item, index) for index, item in enumerate(payload)]
    raise MalformedInput(f"scanner report must be a JSON array or object, got {type(payload).__name__}")


def parse_report(data: bytes | str, *, warn_on_extra: bool = True) -> Report:
    """Return the first report of a scanner document.

    Only the first array element is consumed; any further reports are skipped
    without being validated.
    """
    payload = _decode(data)
    if isinstance(payload, dict):
        return _validate(payload)
    if not isinstance(payload, list):
        raise MalformedInput(f"scanner report must be a JSON array or object, got {type(payload).__name__}")
    if not payload:
        raise MalformedInput("scanner report contains no reports")
    if warn_on_extra and len(payload) > 1:
        print(f"Warning: ignoring {len(payload) - 1} additional report(s); only the first is used.", file=sys.stderr)
    return _validate(payload[0])


def read_source(path: str | Path) -> bytes:
    """Read raw scanner bytes from disk."""
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise MalformedInput(f"cannot read scanner report {path}: {exc.strerror or exc}") from exc


__all__ = ["load_reports", "parse_report", "read_source"]
