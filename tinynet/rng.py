"""Process-wide random generator shared by every component."""

import random

_GENERATOR = random.Random()


def global_rng() -> random.Random:
    """Return the shared Mersenne Twister generator."""
    return _GENERATOR


def set_seed(seed: int) -> None:
    """Reseed the shared generator so runs are reproducible."""
    _GENERATOR.seed(seed)