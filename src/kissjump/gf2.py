"""
Dense bit matrices over GF(2).

A ``BitMatrix`` of width w is a linear map on w-bit unsigned words. It is held
as a (w, w) uint8 ``jax.numpy`` array with ``M[i, j]`` = bit i of the image of
bit j, so column j is the image of the word ``1 << j`` and composition is an
integer matmul reduced mod 2.

Shift-and-xor recurrences (xorshift, Tausworthe) are assembled from three
building blocks:

    BitMatrix.identity(w)        x
    BitMatrix.shift(n, w)        x << n  (n < 0: x >> -n), truncated to w bits
    BitMatrix.diagonal(mask, w)  x & mask

combined with ``+`` (xor of the two images) and ``@`` (composition).
"""

import jax
jax.config.update("jax_enable_x64", True)
import jax.numpy as jnp


@jax.jit
def _gf2_matmul(a: jnp.ndarray, b: jnp.ndarray) -> jnp.ndarray:
    """a @ b over GF(2). int32 accumulation, then keep the parity bit."""
    acc = jnp.matmul(a.astype(jnp.int32), b.astype(jnp.int32))
    return (acc & 1).astype(jnp.uint8)


def _unpack(word: int, width: int) -> jnp.ndarray:
    """w-bit word -> (w,) bit vector, least-significant bit first."""
    return jnp.asarray([(word >> i) & 1 for i in range(width)], dtype=jnp.uint8)


def _pack(bits: jnp.ndarray) -> int:
    return sum(1 << i for i, bit in enumerate(bits.tolist()) if bit)


class BitMatrix:
    """Square matrix over GF(2) acting on ``width``-bit words."""

    __hash__ = None

    def __init__(self, bits):
        bits = jnp.asarray(bits, dtype=jnp.uint8)
        if bits.ndim != 2 or bits.shape[0] != bits.shape[1] or bits.shape[0] < 1:
            raise ValueError(f"BitMatrix needs a non-empty square array, got shape {bits.shape}")
        self.bits = bits & jnp.uint8(1)

    # -- constructors --------------------------------------------------------

    @classmethod
    def identity(cls, width: int) -> "BitMatrix":
        return cls(jnp.eye(width, dtype=jnp.uint8))

    @classmethod
    def shift(cls, n: int, width: int) -> "BitMatrix":
        """Matrix of ``x << n`` for n >= 0, ``x >> -n`` for n < 0."""
        return cls(jnp.eye(width, k=-n, dtype=jnp.uint8))

    @classmethod
    def diagonal(cls, mask: int, width: int) -> "BitMatrix":
        """Matrix of ``x & mask``."""
        return cls(jnp.diag(_unpack(mask, width)))

    @classmethod
    def from_columns(cls, columns) -> "BitMatrix":
        """Build from the images of bits 0..w-1, given as w-bit words."""
        columns = [int(c) for c in columns]
        width = len(columns)
        if width == 0:
            raise ValueError("from_columns needs at least one column")
        if any(c < 0 or c >> width for c in columns):
            raise ValueError(f"every column must be a {width}-bit word")
        return cls(jnp.stack([_unpack(c, width) for c in columns], axis=1))

    # -- properties ----------------------------------------------------------

    @property
    def width(self) -> int:
        return self.bits.shape[0]

    def columns(self) -> tuple:
        return tuple(_pack(self.bits[:, j]) for j in range(self.width))

    # -- algebra -------------------------------------------------------------

    def _check_width(self, other):
        if not isinstance(other, BitMatrix):
            return NotImplemented
        if other.width != self.width:
            raise ValueError(f"width mismatch: {self.width} vs {other.width}")
        return None

    def __add__(self, other):
        bad = self._check_width(other)
        if bad is NotImplemented:
            return bad
        return BitMatrix(self.bits ^ other.bits)

    def __matmul__(self, other):
        bad = self._check_width(other)
        if bad is NotImplemented:
            return bad
        return BitMatrix(_gf2_matmul(self.bits, other.bits))

    def __lshift__(self, n: int) -> "BitMatrix":
        return BitMatrix.shift(n, self.width) @ self

    def __rshift__(self, n: int) -> "BitMatrix":
        return BitMatrix.shift(-n, self.width) @ self

    def __eq__(self, other):
        if not isinstance(other, BitMatrix):
            return NotImplemented
        return self.width == other.width and bool(jnp.array_equal(self.bits, other.bits))

    def __repr__(self):
        cols = ", ".join(f"0x{c:0{(self.width + 3) // 4}X}" for c in self.columns())
        return f"BitMatrix(width={self.width}, columns=[{cols}])"

    def dot_vec(self, word: int) -> int:
        """Apply the matrix to a word."""
        if word < 0 or word >> self.width:
            raise ValueError(f"expected a {self.width}-bit word, got {word}")
        vec = _unpack(word, self.width)
        return _pack(_gf2_matmul(self.bits, vec[:, None])[:, 0])
