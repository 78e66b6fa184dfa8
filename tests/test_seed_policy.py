from __future__ import annotations
import re

from patcore.rng import mint_seed, resolve_seed, rng_for

SEED_RE = re.compile(r"^[0-9a-z]{8}$")


class FixedEntropy:
    def __init__(self, value: int):
        self.value = value
        self.calls = 0

    def randbelow(self, n: int) -> int:
        self.calls += 1
        return self.value % n


def test_mint_seed_format():
    seeds = [mint_seed() for _ in range(32)]
    assert all(SEED_RE.match(s) for s in seeds)
    assert len(set(seeds)) > 1


def test_mint_seed_injected_entropy():
    assert mint_seed(FixedEntropy(0)) == "00000000"
    assert mint_seed(FixedEntropy(35)) == "0000000z"
    assert mint_seed(FixedEntropy(36 ** 8 - 1)) == "zzzzzzzz"


def test_given_seed_is_kept_and_entropy_untouched():
    ent = FixedEntropy(0)
    assert resolve_seed("my-seed", ent) == "my-seed"
    assert ent.calls == 0
    # vide == absent
    assert resolve_seed("", ent) == "00000000"
    assert resolve_seed(None, ent) == "00000000"
    assert ent.calls == 2


def test_rng_for_replays():
    seed, rng = rng_for(None, FixedEntropy(12345))
    first = [rng.next() for _ in range(5)]
    _, again = rng_for(seed)
    assert [again.next() for _ in range(5)] == first
