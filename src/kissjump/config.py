"""
kissjump/config.py

Family descriptors — the fixed constant tables behind every generator.

Each family gets one frozen dataclass holding its step coefficients; the
derived quantities the jump and seeding code need (moduli, masks, periods)
are properties computed from those coefficients, never stored separately.
Descriptors validate their constants on construction and are hashable, so
operator builders can cache on them.

Usage:
    from kissjump.config import MWC_UPPER, LFSR113

    MWC_UPPER.modulus    # 36969 * 2^16 - 1
    LFSR113.period       # ~2^113
"""

import math
from dataclasses import dataclass

U32 = 0xFFFFFFFF


@dataclass(frozen=True)
class MWCLane:
    """
    One multiply-with-carry lane: x' = a * (x mod 2^h) + (x >> h).

    The low half of the word is the value, the high half is the carry. On
    the residues 1..m-1 of m = a*2^h - 1 the step is exactly x -> a*x mod m.

    Args:
        multiplier:  a, with 1 < a < 2^h.
        half_width:  h, 16 for 32-bit lanes and 32 for 64-bit lanes.
    """

    multiplier: int
    half_width: int

    def __post_init__(self):
        if self.half_width not in (16, 32):
            raise ValueError(f"half_width must be 16 or 32 — got {self.half_width}")
        if not 1 < self.multiplier < (1 << self.half_width):
            raise ValueError(f"multiplier must be in (1, 2^{self.half_width}) — got {self.multiplier}")

    @property
    def width(self) -> int:
        return 2 * self.half_width

    @property
    def modulus(self) -> int:
        return (self.multiplier << self.half_width) - 1

    @property
    def period(self) -> int:
        # m is a safe prime and a is a quadratic residue mod m (2 is one,
        # since m = -1 mod 8, and a = 2^-h), so a has order (m - 1) / 2.
        return (self.modulus - 1) // 2


@dataclass(frozen=True)
class CongConfig:
    """Linear congruential recurrence x' = a*x + c mod 2^width."""

    multiplier: int
    increment: int
    width: int = 32

    def __post_init__(self):
        # Hull-Dobell conditions for modulus 2^w: c odd, a = 1 mod 4.
        if self.multiplier % 4 != 1:
            raise ValueError(f"multiplier must be 1 mod 4 for a full period — got {self.multiplier}")
        if self.increment % 2 != 1:
            raise ValueError(f"increment must be odd for a full period — got {self.increment}")

    @property
    def modulus(self) -> int:
        return 1 << self.width

    @property
    def period(self) -> int:
        return 1 << self.width


# The shift triple first published with SHR3 in 1999. It does not give a
# single cycle over the nonzero words and is refused everywhere.
REJECTED_SHR3_SHIFTS = (17, 13, 5)


@dataclass(frozen=True)
class XorShiftConfig:
    """
    Three-step xorshift: x ^= x << a; x ^= x >> b; x ^= x << c.

    ``period`` assumes a full-period triple (2^w - 1 over the nonzero words);
    the unit tests check that claim for the shipped constants.
    """

    shifts: tuple
    width: int = 32

    def __post_init__(self):
        shifts = tuple(self.shifts)
        object.__setattr__(self, "shifts", shifts)
        if len(shifts) != 3:
            raise ValueError(f"expected three shift amounts — got {shifts}")
        if any(not 0 < s < self.width for s in shifts):
            raise ValueError(f"shift amounts must be in (0, {self.width}) — got {shifts}")
        if self.width == 32 and shifts == REJECTED_SHR3_SHIFTS:
            raise ValueError(f"shift triple {shifts} has short cycles and is not supported")

    @property
    def period(self) -> int:
        return (1 << self.width) - 1


@dataclass(frozen=True)
class TauswortheLane:
    """
    One Tausworthe sub-register on a 32-bit word:

        b = ((z << q1) ^ z) >> q2
        z = ((z & mask) << q3) ^ b

    The low log2(min_value) bits are not part of the register; ``mask`` clears
    them. A word below ``min_value`` has an all-zero register.
    """

    q1: int
    q2: int
    q3: int
    min_value: int

    def __post_init__(self):
        if self.min_value < 2 or self.min_value & (self.min_value - 1):
            raise ValueError(f"min_value must be a power of two >= 2 — got {self.min_value}")
        for q in (self.q1, self.q2, self.q3):
            if not 0 < q < 32:
                raise ValueError(f"shift amounts must be in (0, 32) — got {(self.q1, self.q2, self.q3)}")

    @property
    def mask(self) -> int:
        return U32 - (self.min_value - 1)

    @property
    def degree(self) -> int:
        return 32 - (self.min_value.bit_length() - 1)

    @property
    def period(self) -> int:
        return (1 << self.degree) - 1


@dataclass(frozen=True)
class TauswortheConfig:
    """Combined Tausworthe generator: the XOR of independent lanes."""

    lanes: tuple

    def __post_init__(self):
        lanes = tuple(self.lanes)
        object.__setattr__(self, "lanes", lanes)
        if not lanes:
            raise ValueError("a combined Tausworthe generator needs at least one lane")

    @property
    def period(self) -> int:
        return math.lcm(*(lane.period for lane in self.lanes))


# ---------------------------------------------------------------------------
# Constant tables
# ---------------------------------------------------------------------------

MWC_UPPER = MWCLane(multiplier=36969, half_width=16)
MWC_LOWER = MWCLane(multiplier=18000, half_width=16)
MWC64_LANE = MWCLane(multiplier=698769069, half_width=32)

CONG = CongConfig(multiplier=69069, increment=12345)

SHR3 = XorShiftConfig(shifts=(13, 17, 5))

LFSR113 = TauswortheConfig(lanes=(
    TauswortheLane(q1=6, q2=13, q3=18, min_value=2),
    TauswortheLane(q1=2, q2=27, q3=2, min_value=8),
    TauswortheLane(q1=13, q2=21, q3=7, min_value=16),
    TauswortheLane(q1=3, q2=12, q3=13, min_value=128),
))

LFSR88 = TauswortheConfig(lanes=(
    TauswortheLane(q1=13, q2=19, q3=12, min_value=2),
    TauswortheLane(q1=2, q2=25, q3=4, min_value=8),
    TauswortheLane(q1=3, q2=11, q3=17, min_value=16),
))

# Default seeds, used when a generator is stepped before it is seeded.
DEFAULT_MWC_SEED = (362436069, 521288629)
DEFAULT_CONG_SEED = (380116160,)
DEFAULT_SHR3_SEED = (123456789,)
DEFAULT_KISS_SEED = DEFAULT_MWC_SEED + DEFAULT_CONG_SEED + DEFAULT_SHR3_SEED
DEFAULT_LFSR88_SEED = (12345,) * 3
DEFAULT_LFSR113_SEED = (12345,) * 4
