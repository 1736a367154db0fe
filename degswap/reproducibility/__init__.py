"""Reproducibility infrastructure: explicit, seedable random streams."""

from degswap.reproducibility.seed import derive_seed, make_rng, verify_seed_determinism

__all__ = [
    "derive_seed",
    "make_rng",
    "verify_seed_determinism",
]
