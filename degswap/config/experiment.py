"""Null-model configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field

METHODS: tuple[str, ...] = ("randomize", "conf_model")


@dataclass(frozen=True, slots=True)
class RandomizeConfig:
    """Connected randomizer parameters."""

    rounds: int = 10  # 10 adequate, 100 plentiful
    initial_limit: int = 15  # starting bounded-search budget
    max_proposals_per_swap: int | None = None  # None = draw until accepted


@dataclass(frozen=True, slots=True)
class ConfModelConfig:
    """Configuration-model sampler parameters."""

    attempts_per_edge: int = 10  # swap attempts = attempts_per_edge * L


@dataclass(frozen=True, slots=True)
class NullModelConfig:
    """Top-level configuration for producing a batch of null-model graphs.

    All fields are frozen and typed. Cross-parameter validation runs
    in __post_init__ to reject invalid configurations early.
    """

    randomize: RandomizeConfig = field(default_factory=RandomizeConfig)
    conf_model: ConfModelConfig = field(default_factory=ConfModelConfig)
    method: str = "randomize"
    n_samples: int = 1
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.method not in METHODS:
            raise ValueError(
                f"method must be one of {METHODS}, got {self.method!r}"
            )
        if self.n_samples < 1:
            raise ValueError(f"n_samples must be >= 1, got {self.n_samples}")
        if self.seed < 0:
            raise ValueError(f"seed must be >= 0, got {self.seed}")
        if self.randomize.rounds < 0:
            raise ValueError(
                f"randomize.rounds must be >= 0, got {self.randomize.rounds}"
            )
        if self.randomize.initial_limit < 1:
            raise ValueError(
                f"randomize.initial_limit must be >= 1, "
                f"got {self.randomize.initial_limit}"
            )
        max_proposals = self.randomize.max_proposals_per_swap
        if max_proposals is not None and max_proposals < 1:
            raise ValueError(
                f"randomize.max_proposals_per_swap must be >= 1 or None, "
                f"got {max_proposals}"
            )
        if self.conf_model.attempts_per_edge < 0:
            raise ValueError(
                f"conf_model.attempts_per_edge must be >= 0, "
                f"got {self.conf_model.attempts_per_edge}"
            )
