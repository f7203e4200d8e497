"""Seeded random number generator for reproducible mazes."""

import random
from typing import Optional

SEED_BITS = 64


class SeededRNG:
    """Seeded random number generator for reproducible results."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> Optional[int]:
        """Get the current seed."""
        return self._seed

    def randrange(self, stop: int) -> int:
        """Generate a random index in [0, stop)."""
        return self._rng.randrange(stop)

    def coin(self) -> bool:
        """Flip a fair coin; True means heads."""
        return self._rng.getrandbits(8) % 2 == 0

    def choice(self, seq):
        """Choose a random element from a non-empty sequence."""
        return self._rng.choice(seq)


def new_seed() -> int:
    """Draw a fresh 64-bit seed from system entropy."""
    return random.SystemRandom().getrandbits(SEED_BITS)


def check_seed(seed: int) -> int:
    """
    Validate an explicit seed and return it.

    Raises:
        ValueError: If the seed is not an int in [0, 2**64)
    """
    # random.Random folds negative seeds onto their absolute value
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise ValueError(f"Seed must be an integer, got {seed!r}")
    if not 0 <= seed < 2 ** SEED_BITS:
        raise ValueError(f"Seed must be in [0, 2**{SEED_BITS}), got {seed}")
    return seed


def resolve_seed(seed: Optional[int]) -> int:
    """Return a validated ``seed``, or a fresh one when it is None."""
    if seed is None:
        return new_seed()
    return check_seed(seed)


def parse_seed(text: str) -> Optional[int]:
    """
    Parse a seed typed by the user. Blank text means a random seed (None).

    Raises:
        ValueError: If the text is not a valid seed
    """
    text = text.strip()
    if not text:
        return None
    try:
        seed = int(text)
    except ValueError:
        raise ValueError(f"Seed must be an integer, got '{text}'") from None
    return check_seed(seed)
