"""Config loader — reads YAML, applies BANDCHART_* env var overrides."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from bandchart.config.schema import AppConfig

# env var -> key path inside the config mapping
ENV_OVERRIDES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("BANDCHART_DATA_PATH", ("data_path",)),
    ("BANDCHART_LOG_LEVEL", ("logging", "level")),
    ("BANDCHART_LOG_FORMAT", ("logging", "format")),
    ("BANDCHART_API_PORT", ("api", "port")),
)


def _set_path(data: dict, keys: tuple[str, ...], value: str) -> None:
    *parents, leaf = keys
    for key in parents:
        data = data.setdefault(key, {})
    data[leaf] = value


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from a YAML file, then apply env var overrides.

    If *path* is None or the file doesn't exist, returns defaults. Non-empty
    variables listed in ``ENV_OVERRIDES`` win over the file; pydantic coerces
    their string values.
    """
    data: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p) as f:
                data = yaml.safe_load(f) or {}

    for env_var, keys in ENV_OVERRIDES:
        value = os.environ.get(env_var)
        if value:
            _set_path(data, keys, value)

    return AppConfig.model_validate(data)
