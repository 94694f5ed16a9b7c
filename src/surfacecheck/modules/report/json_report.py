"""JSON rendering of scan and breach reports."""

import json
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any


def _default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_dict(report: Any) -> Any:
    """Convert a report dataclass into plain containers."""
    if is_dataclass(report) and not isinstance(report, type):
        return asdict(report)
    return report


def to_json(report: Any, indent: int = 2) -> str:
    """Serialize a report dataclass to JSON."""
    return json.dumps(to_dict(report), indent=indent, default=_default)
