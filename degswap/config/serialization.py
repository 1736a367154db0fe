"""JSON serialization and deserialization for null-model configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from degswap.config.experiment import NullModelConfig

_DACITE_CONFIG = DaciteConfig(
    cast=[tuple],
    check_types=True,
    strict=True,
)


def config_to_json(config: NullModelConfig) -> str:
    """Serialize a NullModelConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> NullModelConfig:
    """Deserialize a JSON string to a NullModelConfig.

    Uses dacite with strict=True to reject unknown keys (catches schema drift)
    and cast=[tuple] to convert JSON arrays back to tuples for tags.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: NullModelConfig) -> dict[str, Any]:
    """Convert a NullModelConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> NullModelConfig:
    """Reconstruct a NullModelConfig from a plain dictionary."""
    return from_dict(data_class=NullModelConfig, data=d, config=_DACITE_CONFIG)
