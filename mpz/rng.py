"""Random numbers for unique identifiers and bounded picks."""

import random

_generator = random.Random()


def seed() -> None:
    """Reseed the shared generator from the operating system's entropy."""
    _generator.seed()


def bounded(maximum: int) -> int:
    """Return a random integer in ``[0, maximum)``."""
    if maximum <= 0:
        raise ValueError(f"upper bound must be positive, got {maximum}")
    return _generator.randrange(maximum)


def generate_uid() -> int:
    """Return a random unsigned 64-bit integer."""
    return _generator.getrandbits(64)