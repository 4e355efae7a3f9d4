"""Random fixture filename synthesis."""

from __future__ import annotations

import random
from typing import Final

HEX_ALPHABET: Final = "0123456789abcdef"
RANDOM_NAME_LENGTH: Final = 16
FIXTURE_SUFFIX: Final = ".dat"

_DEFAULT_RNG = random.Random()


def generate_random_filename(rng: random.Random | None = None) -> str:
    """Return 16 random lowercase hex characters followed by ``.dat``."""

    source = rng or _DEFAULT_RNG
    chars = [HEX_ALPHABET[source.randrange(len(HEX_ALPHABET))] for _ in range(RANDOM_NAME_LENGTH)]
    return "".join(chars) + FIXTURE_SUFFIX

