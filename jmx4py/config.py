"""Default response size limits for requests built from the command line."""

from __future__ import annotations

import os
import tomllib
import warnings
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, PositiveInt


LIMIT_FIELDS = ("max_depth", "max_objects", "max_list_size")


class Limits(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    max_depth: Optional[PositiveInt] = None
    max_objects: Optional[PositiveInt] = None
    max_list_size: Optional[PositiveInt] = None

    def as_options(self) -> Dict[str, int]:
        return self.model_dump(exclude_none=True)


def _env_name(field: str) -> str:
    return f"JMX4PY_{field.upper()}"


def _load_config_limits(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        return {}

    try:
        config = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        warnings.warn(
            f"Ignoring unreadable {config_path}: {exc}",
            RuntimeWarning,
            stacklevel=3,
        )
        return {}

    limits = config.get("limits", {})
    if not isinstance(limits, dict):
        warnings.warn(f"Ignoring non-table [limits] in {config_path}", RuntimeWarning, stacklevel=3)
        return {}
    return {key: limits[key] for key in LIMIT_FIELDS if key in limits}


def load_limits(
    overrides: Optional[Mapping[str, Any]] = None,
    config_path: Optional[Path] = None,
) -> Limits:
    """Resolve each limit from ``overrides``, the environment, then ``config.toml``.

    ``None`` overrides fall through to the next source. Raises
    :class:`pydantic.ValidationError` when a resolved value is not a positive
    integer.
    """
    overrides = overrides or {}
    from_file = _load_config_limits(config_path or Path("config.toml"))

    resolved: Dict[str, Any] = {}
    for field in LIMIT_FIELDS:
        if overrides.get(field) is not None:
            resolved[field] = overrides[field]
        elif os.environ.get(_env_name(field)):
            resolved[field] = os.environ[_env_name(field)]
        elif field in from_file:
            resolved[field] = from_file[field]
    return Limits.model_validate(resolved)
