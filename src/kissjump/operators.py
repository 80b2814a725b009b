"""
Transition operators — "apply the recurrence once" as an algebraic value.

Every operator supports the minimal capability the jump driver needs:

    identity()      operator for zero steps
    compose(other)  operator for "other, then self"
    apply(state)    run the operator on a concrete state

Three variants cover every family:

  AffineOperator   x -> a*x + c (mod M).  MWC lanes (c = 0, M prime) and the
                   congruential generator (M = 2^32).  Composition folds the
                   additive term analytically, so x -> a*x + c stays closed
                   under composition and exponentiation.
  LinearOperator   x -> T x over GF(2), T a square BitMatrix.  Xorshift and
                   Tausworthe registers.
  ProductOperator  direct sum of independent lanes; state is a tuple with one
                   entry per lane.
"""

import abc

from kissjump.gf2 import BitMatrix
from kissjump.jump import power
from kissjump.maths import mul_mod


class TransitionOperator(abc.ABC):
    """Composable one-step transition of a recurrence."""

    @abc.abstractmethod
    def identity(self) -> "TransitionOperator":
        ...

    @abc.abstractmethod
    def compose(self, other: "TransitionOperator") -> "TransitionOperator":
        ...

    @abc.abstractmethod
    def apply(self, state):
        ...

    def __pow__(self, n) -> "TransitionOperator":
        return power(self, n)

    __hash__ = None


class AffineOperator(TransitionOperator):
    """x -> (multiplier * x + offset) mod modulus."""

    def __init__(self, multiplier: int, offset: int, modulus: int):
        if modulus < 2:
            raise ValueError(f"modulus must be >= 2, got {modulus}")
        self.modulus = modulus
        self.multiplier = multiplier % modulus
        self.offset = offset % modulus

    def identity(self) -> "AffineOperator":
        return AffineOperator(1, 0, self.modulus)

    def compose(self, other: "AffineOperator") -> "AffineOperator":
        if not isinstance(other, AffineOperator) or other.modulus != self.modulus:
            raise ValueError("can only compose affine operators with the same modulus")
        # a1*(a2*x + c2) + c1
        return AffineOperator(
            mul_mod(self.multiplier, other.multiplier, self.modulus),
            mul_mod(self.multiplier, other.offset, self.modulus) + self.offset,
            self.modulus,
        )

    def apply(self, state: int) -> int:
        return (mul_mod(self.multiplier, state, self.modulus) + self.offset) % self.modulus

    def __eq__(self, other):
        if not isinstance(other, AffineOperator):
            return NotImplemented
        return (self.multiplier, self.offset, self.modulus) == (
            other.multiplier, other.offset, other.modulus
        )

    def __repr__(self):
        return f"AffineOperator(multiplier={self.multiplier}, offset={self.offset}, modulus={self.modulus})"


class LinearOperator(TransitionOperator):
    """x -> T x over GF(2)."""

    def __init__(self, matrix: BitMatrix):
        self.matrix = matrix

    @property
    def width(self) -> int:
        return self.matrix.width

    def identity(self) -> "LinearOperator":
        return LinearOperator(BitMatrix.identity(self.width))

    def compose(self, other: "LinearOperator") -> "LinearOperator":
        if not isinstance(other, LinearOperator):
            raise ValueError("can only compose a linear operator with another linear operator")
        return LinearOperator(self.matrix @ other.matrix)

    def apply(self, state: int) -> int:
        return self.matrix.dot_vec(state)

    def __eq__(self, other):
        if not isinstance(other, LinearOperator):
            return NotImplemented
        return self.matrix == other.matrix

    def __repr__(self):
        return f"LinearOperator({self.matrix!r})"


class ProductOperator(TransitionOperator):
    """Independent lanes stepped together; the state is a tuple of lane states."""

    def __init__(self, lanes):
        self.lanes = tuple(lanes)
        if not self.lanes:
            raise ValueError("ProductOperator needs at least one lane")

    def identity(self) -> "ProductOperator":
        return ProductOperator(lane.identity() for lane in self.lanes)

    def compose(self, other: "ProductOperator") -> "ProductOperator":
        if not isinstance(other, ProductOperator) or len(other.lanes) != len(self.lanes):
            raise ValueError("can only compose product operators with the same lane count")
        return ProductOperator(a.compose(b) for a, b in zip(self.lanes, other.lanes))

    def apply(self, state) -> tuple:
        state = tuple(state)
        if len(state) != len(self.lanes):
            raise ValueError(f"expected {len(self.lanes)} lane states, got {len(state)}")
        return tuple(lane.apply(x) for lane, x in zip(self.lanes, state))

    def __eq__(self, other):
        if not isinstance(other, ProductOperator):
            return NotImplemented
        return self.lanes == other.lanes

    def __repr__(self):
        return f"ProductOperator({list(self.lanes)!r})"
