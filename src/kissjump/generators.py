"""
Generator facade.

A generator is a state tuple plus the class-level family descriptor. It is
Unseeded until ``seed`` is called; any state-touching call on an Unseeded
instance applies the family's default seed first, so there is no failed
state.

    seed(raw)         raw seed -> normalized state
    next()            one step, returns the 32-bit output
    jump(n)           n steps in O(log n) operator compositions
    get_state()       the state tuple, one int per entry of ``state_widths``
    set_state(state)  restore a tuple previously returned by get_state()

Instances are plain mutable values; share one across threads only under an
external lock, or give each thread its own instance (``split`` helps with
that).
"""

import abc
import logging
import math
import numbers

from kissjump import algorithm, config, seeding
from kissjump.jump import check_count, jump as jump_state
from kissjump.operators import ProductOperator

logger = logging.getLogger(__name__)


def _lanes(*operators) -> ProductOperator:
    return ProductOperator(operators)


class Generator(abc.ABC):
    """
    Base class for every generator.

    Subclasses set the class attributes and implement ``_normalize``,
    ``_step`` and ``_operator``; ``_check_words`` is optional.

    Class attributes:
        name:          registry name.
        seed_words:    number of 32-bit words a seed is coerced into.
        state_widths:  bit width of each exported state word.
        default_seed:  seed applied when stepping an Unseeded instance.
        period:        cycle length of the reachable states.
    """

    name = None
    seed_words = 1
    state_widths = (32,)
    default_seed = ()
    period = None

    def __init__(self, seed=None):
        self._state = None
        if seed is not None:
            self.seed(seed)

    # -- family hooks --------------------------------------------------------

    @classmethod
    @abc.abstractmethod
    def _normalize(cls, words: tuple) -> tuple:
        """seed words -> state tuple with every bad word replaced."""

    @classmethod
    @abc.abstractmethod
    def _step(cls, state: tuple):
        """state -> (new state, output)."""

    @classmethod
    @abc.abstractmethod
    def _operator(cls) -> ProductOperator:
        """One-step operator, one lane per state word."""

    @classmethod
    def _check_words(cls, words: tuple):
        """Raise ValueError if the words are not a reachable state."""

    # -- core operations -----------------------------------------------------

    @property
    def seeded(self) -> bool:
        return self._state is not None

    def seed(self, raw=None):
        if raw is None:
            raw = self.default_seed
        self._state = self._normalize(seeding.seed_words(raw, self.seed_words))

    def _ready(self) -> tuple:
        if self._state is None:
            logger.debug("%s used before seeding, applying default seed %s", self.name, self.default_seed)
            self.seed()
        return self._state

    def next(self) -> int:
        self._state, out = self._step(self._ready())
        return out

    def jump(self, n):
        n = check_count(n)
        logger.debug("%s jump by %d", self.name, n)
        self._state = jump_state(self._operator(), self._ready(), n)

    def get_state(self) -> tuple:
        return self._ready()

    @classmethod
    def check_state(cls, state) -> tuple:
        """Validate a state tuple for this generator; returns it as a tuple of ints."""
        if isinstance(state, (str, bytes)):
            raise ValueError(f"{cls.name} state must be a tuple of ints, got {type(state).__name__}")
        try:
            words = tuple(state)
        except TypeError:
            raise ValueError(f"{cls.name} state must be a tuple of ints, got {type(state).__name__}") from None
        if len(words) != len(cls.state_widths):
            raise ValueError(f"{cls.name} state needs {len(cls.state_widths)} words, got {len(words)}")
        for word, width in zip(words, cls.state_widths):
            if isinstance(word, bool) or not isinstance(word, numbers.Integral):
                raise ValueError(f"{cls.name} state words must be ints, got {type(word).__name__}")
            if not 0 <= word < (1 << width):
                raise ValueError(f"{cls.name} state word {word} does not fit in {width} bits")
        words = tuple(int(w) for w in words)
        cls._check_words(words)
        return words

    def set_state(self, state):
        self._state = self.check_state(state)

    # -- derived operations --------------------------------------------------

    def next_u64(self) -> int:
        """Two consecutive outputs, the first in the low half."""
        lo = self.next()
        hi = self.next()
        return (hi << 32) | lo

    def fill_bytes(self, count: int) -> bytes:
        """``count`` output bytes, little-endian, 8 bytes per next_u64()."""
        count = check_count(count)
        out = bytearray()
        while count - len(out) >= 8:
            out += self.next_u64().to_bytes(8, "little")
        left = count - len(out)
        if left > 4:
            out += self.next_u64().to_bytes(8, "little")[:left]
        elif left > 0:
            out += self.next().to_bytes(4, "little")[:left]
        return bytes(out)

    def split(self, num: int, stride: int) -> list:
        """
        ``num`` copies of this generator, copy i jumped ahead by i * stride.

        With stride at least the number of outputs each consumer draws, the
        copies produce disjoint stretches of the same sequence. Raises
        ValueError when the copies would not start at distinct points of the
        cycle, i.e. for num > 1 with stride 0 or (num - 1) * stride >= period.
        """
        num = check_count(num)
        stride = check_count(stride)
        if num > 1 and not 0 < (num - 1) * stride < self.period:
            raise ValueError(
                f"{self.name} split({num}, stride={stride}) overlaps: "
                f"(num - 1) * stride must be in 1..{self.period - 1}"
            )
        children = []
        for i in range(num):
            child = self.copy()
            child.jump(i * stride)
            children.append(child)
        return children

    def copy(self) -> "Generator":
        """Independent instance with the same state; an Unseeded copy stays Unseeded."""
        clone = type(self)()
        clone._state = self._state
        return clone

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._state == other._state

    __hash__ = None

    def __repr__(self):
        if not self.seeded:
            return f"{type(self).__name__}(unseeded)"
        return f"{type(self).__name__}(state={self.get_state()})"


# ---------------------------------------------------------------------------
# Congruential / xorshift
# ---------------------------------------------------------------------------

class Cong(Generator):
    """Linear congruential generator x = 69069*x + 12345 mod 2^32. State: (x,)."""

    name = "cong"
    family = config.CONG
    seed_words = 1
    state_widths = (32,)
    default_seed = config.DEFAULT_CONG_SEED
    period = config.CONG.period

    @classmethod
    def _normalize(cls, words):
        return (seeding.normalize_cong(words[0]),)

    @classmethod
    def _step(cls, state):
        x = algorithm.cong_step(state[0], cls.family)
        return (x,), x

    @classmethod
    def _operator(cls):
        return _lanes(algorithm.cong_operator(cls.family))


class SHR3(Generator):
    """32-bit xorshift with shifts (13, 17, 5). State: (x,), x != 0."""

    name = "shr3"
    family = config.SHR3
    seed_words = 1
    state_widths = (32,)
    default_seed = config.DEFAULT_SHR3_SEED
    period = config.SHR3.period

    @classmethod
    def _normalize(cls, words):
        return (seeding.normalize_shr3(words[0]),)

    @classmethod
    def _step(cls, state):
        x = algorithm.xorshift_step(state[0], cls.family.shifts, cls.family.width)
        return (x,), x

    @classmethod
    def _operator(cls):
        return _lanes(algorithm.xorshift_operator(cls.family))

    @classmethod
    def _check_words(cls, words):
        if seeding.is_bad_shr3(words[0]):
            raise ValueError("SHR3 state 0 is a fixed point")


# ---------------------------------------------------------------------------
# Multiply-with-carry
# ---------------------------------------------------------------------------

def _check_mwc_word(name: str, x: int, lane):
    if not 0 < x < lane.modulus:
        raise ValueError(f"{name} state word {x} is not a residue in 1..{lane.modulus - 1}")


class _MWCPair(Generator):
    """Two 32-bit MWC lanes. State: (upper, lower), each a residue 1..m-1."""

    upper_lane = config.MWC_UPPER
    lower_lane = config.MWC_LOWER
    seed_words = 2
    state_widths = (32, 32)
    default_seed = config.DEFAULT_MWC_SEED
    period = math.lcm(config.MWC_UPPER.period, config.MWC_LOWER.period)

    @staticmethod
    @abc.abstractmethod
    def _output(upper: int, lower: int) -> int:
        """Combine the two lane words into one 32-bit output."""

    @classmethod
    def _normalize(cls, words):
        return (
            seeding.normalize_mwc(words[0], cls.upper_lane),
            seeding.normalize_mwc(words[1], cls.lower_lane),
        )

    @classmethod
    def _step(cls, state):
        upper = algorithm.mwc_step(state[0], cls.upper_lane)
        lower = algorithm.mwc_step(state[1], cls.lower_lane)
        return (upper, lower), cls._output(upper, lower)

    @classmethod
    def _operator(cls):
        return _lanes(algorithm.mwc_operator(cls.upper_lane), algorithm.mwc_operator(cls.lower_lane))

    @classmethod
    def _check_words(cls, words):
        _check_mwc_word(cls.name, words[0], cls.upper_lane)
        _check_mwc_word(cls.name, words[1], cls.lower_lane)


class MWC1(_MWCPair):
    """Output lower + (upper << 16)."""

    name = "mwc1"
    _output = staticmethod(algorithm.mwc1_output)


class MWC2(_MWCPair):
    """Output lower + (upper << 16) + (upper >> 16); the MWC part of KISS."""

    name = "mwc2"
    _output = staticmethod(algorithm.mwc2_output)


class MWC64(Generator):
    """
    One 64-bit MWC lane, multiplier 698769069. State: (x,), a residue 1..m-1.

    Seeded from two words as (upper << 32) ^ lower; next() returns the low
    32 bits of the lane.
    """

    name = "mwc64"
    lane = config.MWC64_LANE
    seed_words = 2
    state_widths = (64,)
    default_seed = config.DEFAULT_MWC_SEED
    period = config.MWC64_LANE.period

    @classmethod
    def _normalize(cls, words):
        return (seeding.normalize_mwc((words[0] << 32) ^ words[1], cls.lane),)

    @classmethod
    def _step(cls, state):
        x = algorithm.mwc_step(state[0], cls.lane)
        return (x,), algorithm.mwc64_output(x)

    @classmethod
    def _operator(cls):
        return _lanes(algorithm.mwc_operator(cls.lane))

    @classmethod
    def _check_words(cls, words):
        _check_mwc_word(cls.name, words[0], cls.lane)


# ---------------------------------------------------------------------------
# Combined Tausworthe
# ---------------------------------------------------------------------------

class _Tausworthe(Generator):
    """XOR of independent Tausworthe lanes. State: one 32-bit word per lane."""

    family = None

    @classmethod
    def _normalize(cls, words):
        return tuple(seeding.normalize_tausworthe(w, lane) for w, lane in zip(words, cls.family.lanes))

    @classmethod
    def _step(cls, state):
        new = tuple(algorithm.tausworthe_step(z, lane) for z, lane in zip(state, cls.family.lanes))
        return new, algorithm.xor_lanes(*new)

    @classmethod
    def _operator(cls):
        return algorithm.tausworthe_operator(cls.family)

    @classmethod
    def _check_words(cls, words):
        for i, (z, lane) in enumerate(zip(words, cls.family.lanes)):
            if seeding.is_bad_tausworthe(z, lane):
                raise ValueError(f"{cls.name} lane {i} word {z} is below {lane.min_value}")


class LFSR113(_Tausworthe):
    """L'Ecuyer's four-lane combined Tausworthe generator, period ~2^113."""

    name = "lfsr113"
    family = config.LFSR113
    seed_words = 4
    state_widths = (32,) * 4
    default_seed = config.DEFAULT_LFSR113_SEED
    period = config.LFSR113.period


class LFSR88(_Tausworthe):
    """L'Ecuyer's three-lane combined Tausworthe generator, period ~2^88."""

    name = "lfsr88"
    family = config.LFSR88
    seed_words = 3
    state_widths = (32,) * 3
    default_seed = config.DEFAULT_LFSR88_SEED
    period = config.LFSR88.period
