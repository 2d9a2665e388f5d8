"""
mongo_automation/utils/documents.py

Functions for reading/writing an AutomationConfig from/to a local file. The
format is picked from the file suffix: `.yaml`/`.yml` for YAML, anything else
for JSON. The CLI uses these to load the previously deployed document (the
version-diff baseline) and to write the new one.
"""

from __future__ import annotations

import os
from typing import Optional

import yaml
from pydantic import ValidationError

from mongo_automation.errors import AutomationConfigLoadError
from mongo_automation.models.automation_config import AutomationConfig

YAML_SUFFIXES = (".yaml", ".yml")


def _is_yaml(path: str) -> bool:
    return path.lower().endswith(YAML_SUFFIXES)


def parse_automation_config(
    raw: str, *, yaml_format: bool = False, source: Optional[str] = None
) -> AutomationConfig:
    """
    Parse a serialized AutomationConfig.

    Args:
        raw: The document text.
        yaml_format: Parse as YAML instead of JSON.
        source: Where the text came from, for error messages.

    Returns:
        The validated AutomationConfig.

    Raises:
        AutomationConfigLoadError: If the text is not valid JSON/YAML or does not
            match the AutomationConfig schema.
    """
    origin = source or "<string>"
    try:
        if yaml_format:
            return AutomationConfig.from_yaml(raw)
        return AutomationConfig.from_json(raw)
    except ValidationError as ve:
        raise AutomationConfigLoadError(
            f"Failed to parse AutomationConfig from '{origin}': {ve}", source=source
        ) from ve
    except yaml.YAMLError as ye:
        raise AutomationConfigLoadError(
            f"Invalid YAML in '{origin}': {ye}", source=source
        ) from ye


def load_automation_config(path: str) -> AutomationConfig:
    """
    Load the AutomationConfig stored at `path`.

    A missing file means nothing has been deployed yet, so an empty document
    (version 0) is returned.

    Raises:
        AutomationConfigLoadError: If the file exists but cannot be parsed.
        OSError: If the file exists but cannot be read.
    """
    if not os.path.exists(path):
        return AutomationConfig()
    with open(path, "r", encoding="utf-8") as f:
        raw = f.read()
    return parse_automation_config(raw, yaml_format=_is_yaml(path), source=path)


def render_automation_config(config: AutomationConfig, *, yaml_format: bool) -> str:
    if yaml_format:
        return config.to_yaml()
    return config.to_json(indent=2) + "\n"


def write_automation_config(config: AutomationConfig, path: str) -> None:
    """Write `config` to `path`, as YAML or JSON depending on the suffix."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_automation_config(config, yaml_format=_is_yaml(path)))


__all__ = [
    "parse_automation_config",
    "load_automation_config",
    "render_automation_config",
    "write_automation_config",
]
