"""
Composite generators — KISS and KISS2.

A composite is a generator whose state is the concatenation of its component
states: seed words are dealt out to the components in order, every step and
jump runs each component's own recurrence on its slice of the state, and the
component outputs are mixed by a fixed combiner.

    KISS   = MWC2  + Cong + SHR3    out = ((mwc ^ cong) + shr3) mod 2^32
    KISS2  = MWC64 + Cong + SHR3    out = (mwc + cong + shr3)   mod 2^32
"""

import abc
import math

from kissjump import algorithm, config
from kissjump.generators import MWC2, MWC64, SHR3, Cong, Generator
from kissjump.operators import ProductOperator


class CompositeGenerator(Generator):
    """Base class: subclasses set ``components`` and ``_combine``."""

    components = ()

    @staticmethod
    @abc.abstractmethod
    def _combine(*outputs: int) -> int:
        """Mix one output per component into a 32-bit value."""

    @classmethod
    def _deal(cls, words: tuple, size):
        """Yield (component, its slice of ``words``), slice lengths from ``size(component)``."""
        start = 0
        for part in cls.components:
            end = start + size(part)
            yield part, words[start:end]
            start = end

    @classmethod
    def _normalize(cls, words):
        chunks = cls._deal(words, lambda part: part.seed_words)
        return tuple(w for part, chunk in chunks for w in part._normalize(chunk))

    @classmethod
    def _step(cls, state):
        new, outputs = [], []
        for part, chunk in cls._deal(state, lambda part: len(part.state_widths)):
            chunk, out = part._step(chunk)
            new.extend(chunk)
            outputs.append(out)
        return tuple(new), cls._combine(*outputs)

    @classmethod
    def _operator(cls):
        return ProductOperator(lane for part in cls.components for lane in part._operator().lanes)

    @classmethod
    def _check_words(cls, words):
        for part, chunk in cls._deal(words, lambda part: len(part.state_widths)):
            part._check_words(chunk)


class KISS(CompositeGenerator):
    """Marsaglia's KISS (1999): MWC2, Cong and SHR3. State: (upper, lower, cong, shr3)."""

    name = "kiss"
    components = (MWC2, Cong, SHR3)
    seed_words = 4
    state_widths = MWC2.state_widths + Cong.state_widths + SHR3.state_widths
    default_seed = config.DEFAULT_KISS_SEED
    period = math.lcm(MWC2.period, Cong.period, SHR3.period)
    _combine = staticmethod(algorithm.kiss_output)


class KISS2(CompositeGenerator):
    """Marsaglia's KISS (2011): MWC64, Cong and SHR3. State: (mwc64, cong, shr3)."""

    name = "kiss2"
    components = (MWC64, Cong, SHR3)
    seed_words = 4
    state_widths = MWC64.state_widths + Cong.state_widths + SHR3.state_widths
    default_seed = config.DEFAULT_KISS_SEED
    period = math.lcm(MWC64.period, Cong.period, SHR3.period)
    _combine = staticmethod(algorithm.kiss2_output)
