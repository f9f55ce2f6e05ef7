"""Settings loading with optional JSON-schema validation of the raw YAML."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import jsonschema

from .settings import BridgeSettings, read_yaml


def load_settings(
    config_path: str | Path,
    schema: str | Path | Mapping[str, Any] | None = None,
) -> BridgeSettings:
    """Build BridgeSettings from YAML.

    ``schema`` may be an in-memory JSON schema or a path to one (JSON is a
    subset of YAML, so both encodings read the same way). Validation runs on
    the raw mapping, before pydantic coerces any value.
    """

    if schema is None:
        return BridgeSettings.from_yaml(config_path)

    payload = read_yaml(config_path)
    resolved = schema if isinstance(schema, Mapping) else read_yaml(schema)
    jsonschema.validate(instance=payload, schema=resolved)
    return BridgeSettings(**payload)


__all__ = ["load_settings"]
