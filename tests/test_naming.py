import random
import re

from jobfixtures.naming import FIXTURE_SUFFIX, HEX_ALPHABET, generate_random_filename

NAME_RE = re.compile(r"^[0-9a-f]{16}\.dat$")


def test_name_shape():
    for _ in range(200):
        name = generate_random_filename()
        assert len(name) == 20
        assert NAME_RE.match(name)
        assert name.endswith(FIXTURE_SUFFIX)


def test_seeded_source_is_reproducible():
    assert generate_random_filename(random.Random(7)) == generate_random_filename(random.Random(7))


def test_collisions_are_negligible():
    names = [generate_random_filename() for _ in range(10_000)]
    # 64 bits of entropy: a single collision here is already astronomically unlikely
    assert len(set(names)) >= 9_999


def test_every_symbol_gets_used():
    rng = random.Random(1234)
    seen = set()
    for _ in range(500):
        seen.update(generate_random_filename(rng)[:16])
    assert seen == set(HEX_ALPHABET)

