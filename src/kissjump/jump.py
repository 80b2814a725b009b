"""
Jump-ahead driver.

Generic binary exponentiation over any "composable" transition object, i.e.
anything exposing:

    identity()      -> the operator for "apply the recurrence 0 times"
    compose(other)  -> the operator for "apply other, then self"
    apply(state)    -> the state after running the operator (jump only)

``power(op, n)`` needs O(log2 n) compositions, so jumping a generator by a
distance close to its full period (2^113 for LFSR113) costs about a hundred
compositions rather than 2^113 steps.
"""

import numbers


def check_count(n) -> int:
    """Validate a step count: a non-negative integer (bool is rejected)."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"step count must be an integer, got {type(n).__name__}")
    n = int(n)
    if n < 0:
        raise ValueError(f"step count must be >= 0, got {n}")
    return n


def power(operator, n):
    """operator^n by square-and-compose."""
    n = check_count(n)
    result = operator.identity()
    base = operator
    while n:
        if n & 1:
            result = base.compose(result)
        n >>= 1
        if n:
            base = base.compose(base)
    return result


def jump(operator, state, n):
    """State reached after applying ``operator`` to ``state`` n times."""
    return power(operator, n).apply(state)
