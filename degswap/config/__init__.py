"""Null-model configuration system with frozen, hashable, serializable dataclasses."""

from degswap.config.experiment import (
    METHODS,
    ConfModelConfig,
    NullModelConfig,
    RandomizeConfig,
)
from degswap.config.defaults import ANCHOR_CONFIG
from degswap.config.hashing import config_hash, full_config_hash, sampler_config_hash
from degswap.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "ANCHOR_CONFIG",
    "METHODS",
    "ConfModelConfig",
    "NullModelConfig",
    "RandomizeConfig",
    "config_from_dict",
    "config_from_json",
    "config_hash",
    "config_to_dict",
    "config_to_json",
    "full_config_hash",
    "sampler_config_hash",
]
