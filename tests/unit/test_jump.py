"""
Contract tests for generator jump-ahead.
A valid jump implementation must:
- Land on exactly the state reached by calling next() n times
- Leave the state unchanged for n = 0
- Compose: jump(a + b) == jump(a) then jump(b)
- Wrap around the period consistently
- Reject negative and non-integer counts without touching the state
"""

import pytest


def stepped(rng, n):
    for _ in range(n):
        rng.next()
    return rng


@pytest.mark.parametrize("n", [0, 1, 2, 17, 10000])
def test_jump_matches_stepping(generator_cls, default_seed, n):
    rng_ja = generator_cls(default_seed)
    rng_ja.jump(n)
    rng = stepped(generator_cls(default_seed), n)
    assert rng_ja.get_state() == rng.get_state()
    assert rng_ja.next() == rng.next()


@pytest.mark.parametrize("n", [1, 17, 1000])
def test_jump_matches_stepping_all_seeds(generator_cls, seed, n):
    rng_ja = generator_cls(seed)
    rng_ja.jump(n)
    assert rng_ja == stepped(generator_cls(seed), n)


def test_jump_zero_is_identity(rng):
    before = rng.get_state()
    rng.jump(0)
    assert rng.get_state() == before


@pytest.mark.parametrize("a, b", [(0, 0), (3, 5), (1000, 1), (2**40, 12345), (10**18, 10**18 + 7)])
def test_jump_is_additive(generator_cls, default_seed, a, b):
    rng_ab = generator_cls(default_seed)
    rng_ab.jump(a + b)
    rng_seq = generator_cls(default_seed)
    rng_seq.jump(a)
    rng_seq.jump(b)
    assert rng_ab == rng_seq


def test_jump_by_period_returns_to_state(rng):
    # One step first: a freshly seeded Tausworthe word can carry arbitrary
    # low bits, which the first step replaces with bits on the cycle.
    rng.next()
    before = rng.get_state()
    rng.jump(rng.period)
    assert rng.get_state() == before


def test_jump_by_period_minus_one_then_step(rng):
    rng.next()
    before = rng.get_state()
    rng.jump(rng.period - 1)
    assert rng.get_state() != before
    rng.next()
    assert rng.get_state() == before


def test_jump_past_period_wraps(rng):
    rng.next()
    wrapped = rng.copy()
    rng.jump(5)
    wrapped.jump(3 * rng.period + 5)
    assert wrapped == rng


def test_jump_on_unseeded_uses_default_seed(generator_cls):
    rng = generator_cls()
    rng.jump(100)
    expected = generator_cls(generator_cls.default_seed)
    stepped(expected, 100)
    assert rng == expected


@pytest.mark.parametrize("n", [-1, -(2**64)])
def test_negative_jump_rejected(rng, n):
    before = rng.get_state()
    with pytest.raises(ValueError, match=">= 0"):
        rng.jump(n)
    assert rng.get_state() == before


@pytest.mark.parametrize("n", [2.0, "10", None])
def test_non_integer_jump_rejected(rng, n):
    with pytest.raises(TypeError):
        rng.jump(n)
