"""
Name registry for the built-in generators.

    from kissjump.interface import create

    rng = create("kiss", seed=(1, 2, 3, 4))
    rng.jump(10**18)
"""

from kissjump.composite import KISS, KISS2
from kissjump.generators import LFSR88, LFSR113, MWC1, MWC2, MWC64, SHR3, Cong

GENERATORS = {}


def register_generator(cls):
    """Add a generator class under ``cls.name``; usable as a decorator."""
    name = cls.name
    if not name:
        raise ValueError(f"{cls.__name__} has no registry name")
    if name in GENERATORS:
        raise ValueError(f"a generator named {name!r} is already registered")
    GENERATORS[name] = cls
    return cls


def create(name: str, seed=None):
    """Instantiate a registered generator by name (case-insensitive)."""
    try:
        cls = GENERATORS[name.lower()]
    except KeyError:
        raise ValueError(f"unknown generator {name!r}; available: {', '.join(available())}") from None
    return cls(seed)


def available() -> list:
    return sorted(GENERATORS)


for _cls in (Cong, SHR3, MWC1, MWC2, MWC64, KISS, KISS2, LFSR88, LFSR113):
    register_generator(_cls)
