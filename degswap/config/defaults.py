"""Anchor configuration: single source of truth for default null-model parameters."""

from degswap.config.experiment import NullModelConfig

# All-default values: connected randomizer, 10 rounds, initial limit 15,
# one sample, seed 42.
ANCHOR_CONFIG = NullModelConfig()
