"""
Seed coercion and bad-state normalization.

A raw seed (None, an int, or a sequence of ints) is first coerced into a
fixed number of 32-bit seed words, then each family maps its words into
state space and replaces any word that would land in a degenerate state.
Every input has exactly one output; nothing here draws on entropy.

Bad-state sets, derived from each recurrence's absorbing condition:

  MWC lane     x = 0 mod m. 0 is the fixed point of x -> a*x mod m, and every
               multiple of m below 2^(2h) reduces to it.
  Cong         none. Every word lies on the single 2^32 cycle.
  SHR3         x = 0, the fixed point of any linear map.
  Tausworthe   z < min_value: all register bits zero, so the lane collapses to
               a constant.
"""

import logging
import numbers
from collections.abc import Iterable

from kissjump.config import U32
from kissjump.maths import mask

logger = logging.getLogger(__name__)

WORD_BITS = 32


def _check_int(value, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}")
    return int(value)


def seed_words(raw, count: int) -> tuple:
    """
    Coerce a raw seed into ``count`` 32-bit words.

    An int is split least-significant word first; negative ints use two's
    complement and bits beyond ``count`` words are ignored. A shorter sequence
    is padded with zeros; a longer one is folded in by XOR (word i goes into
    slot i mod count).
    """
    if isinstance(raw, (str, bytes)) or not (
        isinstance(raw, Iterable) or isinstance(raw, numbers.Integral)
    ):
        raise TypeError(f"seed must be an int or a sequence of ints, got {type(raw).__name__}")
    if isinstance(raw, Iterable):
        words = [0] * count
        for i, value in enumerate(raw):
            words[i % count] ^= _check_int(value, "seed word") & U32
        return tuple(words)
    raw = _check_int(raw, "seed")
    return tuple((raw >> (WORD_BITS * i)) & U32 for i in range(count))


# ---------------------------------------------------------------------------
# MWC
# ---------------------------------------------------------------------------

def is_bad_mwc(x: int, lane) -> bool:
    return x % lane.modulus == 0


def mwc_bad_words(lane) -> range:
    """Every lane word that reduces to the absorbing residue 0."""
    return range(0, 1 << lane.width, lane.modulus)


def normalize_mwc(raw: int, lane) -> int:
    """
    Lane word -> residue in 1..m-1.

    A bad word is replaced by its complement reduced mod m. That is never 0:
    the complement of a multiple of m is (2^(2h) - 1) mod m = a^-2 - 1, and
    a^2 != 1 mod m.
    """
    x = raw % lane.modulus
    if x == 0:
        x = (raw ^ mask(lane.width)) % lane.modulus
        logger.debug("MWC word %d is degenerate for modulus %d, replaced by %d", raw, lane.modulus, x)
    return x


# ---------------------------------------------------------------------------
# Cong / SHR3
# ---------------------------------------------------------------------------

def normalize_cong(raw: int) -> int:
    return raw & U32


SHR3_BAD_WORDS = (0,)


def is_bad_shr3(x: int) -> bool:
    return x == 0


def normalize_shr3(raw: int) -> int:
    x = raw & U32
    if is_bad_shr3(x):
        logger.debug("SHR3 word 0 is a fixed point, replaced by 0x%08X", U32)
        x = U32
    return x


# ---------------------------------------------------------------------------
# Tausworthe
# ---------------------------------------------------------------------------

def tausworthe_seed_z(seed: int) -> int:
    """Spread a seed word over the register: z = seed ^ (seed << 16)."""
    return (seed ^ (seed << 16)) & U32


def is_bad_tausworthe(z: int, lane) -> bool:
    return z < lane.min_value


def tausworthe_bad_seeds(lane) -> tuple:
    """Seed words whose spread value falls below ``lane.min_value``."""
    # z = s ^ (s << 16) keeps the low half of s and xors it into the high
    # half, so z < min_value exactly when both halves equal some v < min_value.
    return tuple(v | (v << 16) for v in range(lane.min_value))


def normalize_tausworthe(seed: int, lane) -> int:
    z = tausworthe_seed_z(seed)
    if is_bad_tausworthe(z, lane):
        logger.debug("Tausworthe word 0x%08X is below %d, replaced by its complement", z, lane.min_value)
        z ^= U32
    return z
