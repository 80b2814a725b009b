"""
Central fixtures shared across all test modules.
Tests reach generators through these fixtures, so a new family only has to
be added to ALL_GENERATORS to be covered by every contract test.
"""

import pytest

from kissjump import KISS, KISS2, LFSR88, LFSR113, MWC1, MWC2, MWC64, SHR3, Cong


# ---------------------------------------------------------------------------
# Generator fixtures
# ---------------------------------------------------------------------------

ALL_GENERATORS = [Cong, SHR3, MWC1, MWC2, MWC64, KISS, KISS2, LFSR88, LFSR113]
SIMPLE_GENERATORS = [Cong, SHR3, MWC1, MWC2, MWC64, LFSR88, LFSR113]
COMPOSITES = [KISS, KISS2]


@pytest.fixture(params=ALL_GENERATORS, ids=[g.name for g in ALL_GENERATORS])
def generator_cls(request: pytest.FixtureRequest):
    """Parametrized over every generator class."""
    return request.param


@pytest.fixture(params=COMPOSITES, ids=[g.name for g in COMPOSITES])
def composite_cls(request: pytest.FixtureRequest):
    return request.param


# ---------------------------------------------------------------------------
# Seed fixtures
# ---------------------------------------------------------------------------

STANDARD_SEEDS = [0, 1, 42, 12345, 2**31 - 1, 2**32 - 1]

@pytest.fixture(params=STANDARD_SEEDS, ids=[f"seed={s}" for s in STANDARD_SEEDS])
def seed(request: pytest.FixtureRequest):
    """Parametrized over a range of representative seed values."""
    return request.param


@pytest.fixture
def default_seed():
    """A single stable seed for non-parametrized tests."""
    return (2247183469, 99545079, 3269400377, 3950144837)


@pytest.fixture
def rng(generator_cls, default_seed):
    """A seeded instance of each generator."""
    return generator_cls(default_seed)
