"""
Fixed-width and modular integer arithmetic.

Python integers never overflow, so every "wrapping" operation here is an
exact product followed by an explicit mask. That keeps results bit-exact
with 32/64-bit unsigned arithmetic on any platform, while MWC64 products
(~2^122 before reduction) stay exact.
"""


def mask(width: int) -> int:
    """All-ones word of the given bit width."""
    if width < 1:
        raise ValueError(f"width must be >= 1, got {width}")
    return (1 << width) - 1


def mul_mod(a: int, b: int, m: int) -> int:
    """a * b mod m, for 0 <= a, b."""
    if m < 1:
        raise ValueError(f"modulus must be >= 1, got {m}")
    return (a * b) % m


def pow_mod(base: int, n: int, m: int) -> int:
    """base^n mod m."""
    if n < 0:
        raise ValueError(f"exponent must be >= 0, got {n}")
    if m < 1:
        raise ValueError(f"modulus must be >= 1, got {m}")
    return pow(base, n, m)


def wrapping_pow(base: int, n: int, width: int = 32) -> int:
    """base^n with width-bit wraparound."""
    if n < 0:
        raise ValueError(f"exponent must be >= 0, got {n}")
    return pow(base, n, 1 << width)


def wrapping_geom_series(r: int, n: int, width: int = 32) -> int:
    """
    1 + r + r^2 + ... + r^(n-1), with width-bit wraparound.

    The division in (r^n - 1) / (r - 1) is not available mod 2^w when r - 1
    is even, so the sum is built by doubling: a block of 2^k terms has sum
    s_k and ratio r_k = r^(2^k), and s_{k+1} = s_k * (1 + r_k).
    """
    if n < 0:
        raise ValueError(f"term count must be >= 0, got {n}")
    m = mask(width)
    total, total_ratio = 0, 1
    block_sum, block_ratio = 1, r & m
    while n:
        if n & 1:
            total = (total + total_ratio * block_sum) & m
            total_ratio = (total_ratio * block_ratio) & m
        n >>= 1
        if n:
            block_sum = (block_sum * (1 + block_ratio)) & m
            block_ratio = (block_ratio * block_ratio) & m
    return total
