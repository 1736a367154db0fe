"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from degswap.config.experiment import NullModelConfig

# Labels that never change which graphs a config produces.
METADATA_FIELDS = ("description", "tags")


def config_hash(config: Any, exclude: tuple[str, ...] = ()) -> str:
    """First 16 hex characters of the SHA-256 of ``config`` as sorted JSON.

    Args:
        config: Any dataclass instance (or sub-config).
        exclude: Top-level field names left out of the hash.
    """
    d = {k: v for k, v in asdict(config).items() if k not in exclude}
    serialized = json.dumps(d, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def sampler_config_hash(config: NullModelConfig) -> str:
    """Hash of everything that determines the sampled graphs.

    Two configs differing only in description or tags hash identically.
    """
    return config_hash(config, exclude=METADATA_FIELDS)


def full_config_hash(config: NullModelConfig) -> str:
    """Hash for full run identity, descriptive labels included."""
    return config_hash(config)
