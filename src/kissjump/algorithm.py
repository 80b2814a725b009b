"""
Step formulas and transition operators, one pair per family.

Design principles:
  - Step functions are pure: (word, descriptor) -> word, fixed-width
    wraparound done with explicit masks.
  - Every step has a matching TransitionOperator that represents the same map
    algebraically, so jump(n) = operator^n applied once.
  - Operators are built from the descriptor alone and cached per descriptor.

Families:
  MWC lane      x' = a*(x & (2^h - 1)) + (x >> h)      AffineOperator(a, 0, a*2^h - 1)
  Cong          x' = a*x + c  mod 2^32                   AffineOperator(a, c, 2^32)
  Xorshift      x ^= x<<a; x ^= x>>b; x ^= x<<c          LinearOperator((I + S^c)(I + S^-b)(I + S^a))
  Tausworthe    b = ((z<<q1) ^ z) >> q2                  LinearOperator(S^q3 D + S^-q2 (S^q1 + I))
                z' = ((z & mask) << q3) ^ b

Output combiners mix the lane words of one generator into a 32-bit value.
"""

import functools

from kissjump.config import U32
from kissjump.gf2 import BitMatrix
from kissjump.maths import mask
from kissjump.operators import AffineOperator, LinearOperator, ProductOperator


# ---------------------------------------------------------------------------
# Step formulas
# ---------------------------------------------------------------------------

def mwc_step(x: int, lane) -> int:
    h = lane.half_width
    return (x & mask(h)) * lane.multiplier + (x >> h)


def cong_step(x: int, cfg) -> int:
    return (cfg.multiplier * x + cfg.increment) & (cfg.modulus - 1)


def xorshift_step(x: int, shifts, width: int = 32) -> int:
    m = mask(width)
    a, b, c = shifts
    x ^= (x << a) & m
    x ^= x >> b
    x ^= (x << c) & m
    return x


def tausworthe_step(z: int, lane) -> int:
    b = (((z << lane.q1) & U32) ^ z) >> lane.q2
    return (((z & lane.mask) << lane.q3) & U32) ^ b


# ---------------------------------------------------------------------------
# Output combiners
# ---------------------------------------------------------------------------

def mwc1_output(upper: int, lower: int) -> int:
    return (lower + (upper << 16)) & U32


def mwc2_output(upper: int, lower: int) -> int:
    return (lower + (upper << 16) + (upper >> 16)) & U32


def mwc64_output(x: int) -> int:
    """Low 32 bits of the 64-bit lane."""
    return x & U32


def kiss_output(mwc: int, cong: int, shr3: int) -> int:
    return ((mwc ^ cong) + shr3) & U32


def kiss2_output(mwc: int, cong: int, shr3: int) -> int:
    return (mwc + cong + shr3) & U32


def xor_lanes(*words: int) -> int:
    out = 0
    for w in words:
        out ^= w
    return out


# ---------------------------------------------------------------------------
# GF(2) matrices
# ---------------------------------------------------------------------------

def xorshift_matrix(shifts, width: int = 32) -> BitMatrix:
    """Matrix of one xorshift step. No validation of the triple."""
    a, b, c = shifts
    one = BitMatrix.identity(width)
    return (one + (one << c)) @ (one + (one >> b)) @ (one + (one << a))


def tausworthe_matrix(lane) -> BitMatrix:
    """Matrix of one Tausworthe lane step on the full 32-bit word."""
    one = BitMatrix.identity(32)
    feedback = ((one << lane.q1) + one) >> lane.q2
    return (BitMatrix.diagonal(lane.mask, 32) << lane.q3) + feedback


# ---------------------------------------------------------------------------
# Transition operators
# ---------------------------------------------------------------------------

@functools.lru_cache(maxsize=None)
def mwc_operator(lane) -> AffineOperator:
    return AffineOperator(lane.multiplier, 0, lane.modulus)


@functools.lru_cache(maxsize=None)
def cong_operator(cfg) -> AffineOperator:
    return AffineOperator(cfg.multiplier, cfg.increment, cfg.modulus)


@functools.lru_cache(maxsize=None)
def xorshift_operator(cfg) -> LinearOperator:
    return LinearOperator(xorshift_matrix(cfg.shifts, cfg.width))


@functools.lru_cache(maxsize=None)
def tausworthe_operator(cfg) -> ProductOperator:
    return ProductOperator(LinearOperator(tausworthe_matrix(lane)) for lane in cfg.lanes)
