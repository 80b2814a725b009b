"""kissjump — Marsaglia/L'Ecuyer generators with seed normalization and O(log n) jump-ahead."""

from kissjump.composite import KISS, KISS2, CompositeGenerator
from kissjump.generators import LFSR88, LFSR113, MWC1, MWC2, MWC64, SHR3, Cong, Generator
from kissjump.interface import GENERATORS, available, create, register_generator

__all__ = [
    "Generator",
    "CompositeGenerator",
    "Cong",
    "SHR3",
    "MWC1",
    "MWC2",
    "MWC64",
    "KISS",
    "KISS2",
    "LFSR88",
    "LFSR113",
    "GENERATORS",
    "available",
    "create",
    "register_generator",
]
