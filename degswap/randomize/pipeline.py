"""Batch generation of null-model graphs from a NullModelConfig.

Each sample starts from its own copy of the input graph and its own random
stream (master seed + sample index), so any single sample can be reproduced
without regenerating the ones before it.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from degswap.config.experiment import NullModelConfig
from degswap.config.hashing import sampler_config_hash
from degswap.graph.store import Graph
from degswap.randomize.conf_model import sample_configuration_model
from degswap.randomize.rounds import run_randomization
from degswap.randomize.types import RandomizationResult
from degswap.reproducibility.seed import derive_seed, make_rng

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class NullSample:
    """One null-model graph and how it was produced."""

    index: int
    seed: int
    method: str
    config_hash: str
    graph: Graph
    randomization: RandomizationResult | None = None  # method == "randomize"
    successful_swaps: int | None = None  # method == "conf_model"


def generate_null_sample(
    graph: Graph,
    config: NullModelConfig,
    index: int,
    should_stop: Callable[[], bool] | None = None,
) -> NullSample:
    """Produce sample ``index`` of the batch described by ``config``.

    The input graph is copied, never modified. The initial traversal limit is
    clamped to the graph size so small graphs work with default settings.
    """
    seed = derive_seed(config.seed, index)
    rng = make_rng(seed)
    sample_graph = graph.copy()
    key = sampler_config_hash(config)

    if config.method == "conf_model":
        attempts = config.conf_model.attempts_per_edge * graph.number_of_edges()
        swaps = sample_configuration_model(sample_graph, rng, attempts)
        log.info(
            "Sample %d (seed %d): configuration model, %d/%d swaps succeeded",
            index, seed, swaps, attempts,
        )
        return NullSample(
            index=index,
            seed=seed,
            method=config.method,
            config_hash=key,
            graph=sample_graph,
            successful_swaps=swaps,
        )

    initial_limit = min(config.randomize.initial_limit, graph.size())
    if initial_limit != config.randomize.initial_limit:
        log.info(
            "initial_limit %d exceeds graph size, clamped to %d",
            config.randomize.initial_limit, initial_limit,
        )
    result = run_randomization(
        sample_graph,
        rng,
        config.randomize.rounds,
        initial_limit,
        should_stop=should_stop,
        max_proposals_per_swap=config.randomize.max_proposals_per_swap,
    )
    log.info(
        "Sample %d (seed %d): %d round(s), %d rollback(s), final limit %d",
        index, seed, result.rounds_completed,
        result.total_disconnections, result.final_limit,
    )
    return NullSample(
        index=index,
        seed=seed,
        method=config.method,
        config_hash=key,
        graph=sample_graph,
        randomization=result,
    )


def generate_null_graphs(
    graph: Graph,
    config: NullModelConfig,
    should_stop: Callable[[], bool] | None = None,
) -> list[NullSample]:
    """Produce ``config.n_samples`` independent null-model graphs.

    Samples run one after another. ``should_stop`` is forwarded to the
    connected randomizer (polled between rounds) and also checked between
    samples; a stop request returns the samples finished so far.
    """
    log.info(
        "Generating %d null graph(s) with method=%s (config %s)",
        config.n_samples, config.method, sampler_config_hash(config),
    )
    samples: list[NullSample] = []
    for index in range(config.n_samples):
        if should_stop is not None and should_stop():
            log.info("Stop requested after %d sample(s)", len(samples))
            break
        sample = generate_null_sample(graph, config, index, should_stop)
        samples.append(sample)
        if sample.randomization is not None and sample.randomization.cancelled:
            break
    return samples
