"""Degree-preserving randomization: swap moves, round orchestration, samplers."""

from degswap.randomize.conf_model import EdgeListCache, sample_configuration_model
from degswap.randomize.pipeline import NullSample, generate_null_graphs, generate_null_sample
from degswap.randomize.rounds import (
    LIMIT_INCREMENT,
    RELAXED_DECREASE_PROBABILITY,
    randomize,
    run_randomization,
)
from degswap.randomize.swap import switch_connections, switch_link_pair_ends
from degswap.randomize.types import RandomizationResult, RoundRecord, SwapExhaustedError

__all__ = [
    "EdgeListCache",
    "LIMIT_INCREMENT",
    "NullSample",
    "RELAXED_DECREASE_PROBABILITY",
    "RandomizationResult",
    "RoundRecord",
    "SwapExhaustedError",
    "generate_null_graphs",
    "generate_null_sample",
    "randomize",
    "run_randomization",
    "sample_configuration_model",
    "switch_connections",
    "switch_link_pair_ends",
]
