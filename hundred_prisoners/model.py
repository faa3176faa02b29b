from __future__ import annotations

from itertools import islice
from typing import Callable, Iterator, Optional, Sequence

from . import config


def follow_cycle(boxes: Sequence[int], prisoner: int) -> Iterator[int]:
    """
    Yield the contents of each box prisoner opens, starting at their own box.

    The walk never ends on its own; callers cap it at the attempt limit.
    Because `boxes` is a bijection the walk traces exactly the cycle holding
    `prisoner`, so their number comes up after (cycle length) boxes.
    """
    box = prisoner
    while True:
        contents = boxes[box - 1]
        yield contents
        box = contents


def prisoner_attempts(
    permutation: Sequence[int],
    prisoner: int,
    attempt_limit: int = config.ATTEMPT_LIMIT,
) -> Optional[int]:
    """Number of boxes `prisoner` opens to find their number, or None past the limit."""
    boxes = [int(x) for x in permutation]
    for attempt, contents in enumerate(islice(follow_cycle(boxes, prisoner), attempt_limit), start=1):
        if contents == prisoner:
            return attempt
    return None


def _all_prisoners_succeed(boxes: list[int], attempt_limit: int) -> bool:
    for prisoner in range(1, len(boxes) + 1):
        # The first box opened counts as attempt #1.
        if prisoner not in islice(follow_cycle(boxes, prisoner), attempt_limit):
            return False
    return True


def run_trial(
    permutation_source: Callable[[int], Sequence[int]],
    n: int = config.N_PRISONERS,
    attempt_limit: int = config.ATTEMPT_LIMIT,
) -> bool:
    """
    Simulate one room of `n` prisoners and return whether everyone escapes.

    `permutation_source(n)` is called exactly once for the box contents. Each
    prisoner k opens box k, then keeps opening the box numbered by what they
    just found, for at most `attempt_limit` boxes. The trial succeeds only if
    every prisoner finds their own number; evaluation stops at the first
    prisoner who does not.

    Equivalent to: no cycle of the permutation is longer than `attempt_limit`.
    """
    if n < 1:
        raise ValueError("n must be positive")
    if attempt_limit < 1:
        raise ValueError("attempt_limit must be positive")

    boxes = [int(x) for x in permutation_source(n)]
    if len(boxes) != n:
        raise ValueError(f"permutation source returned {len(boxes)} boxes, expected {n}")
    if any(b < 1 or b > n for b in boxes):
        raise ValueError(f"box contents must lie in [1, {n}]")

    return _all_prisoners_succeed(boxes, attempt_limit)


def success_probability(
    n: int = config.N_PRISONERS,
    attempt_limit: int = config.ATTEMPT_LIMIT,
) -> float:
    """
    Exact probability that a uniform permutation of n has no cycle longer
    than `attempt_limit`.

    Uses a_0 = 1, a_m = (1/m) * sum_{k=1}^{min(L, m)} a_{m-k}, where a_m is the
    fraction of permutations of m elements whose cycles all fit in L. For
    n = 100, L = 50 this is 1 - (H_100 - H_50) ≈ 0.3118.

    The sum is kept as a sliding window over the last L terms, so the cost
    is O(n) whatever the limit.
    """
    if n < 1:
        raise ValueError("n must be positive")
    if attempt_limit < 1:
        raise ValueError("attempt_limit must be positive")

    a = [1.0]
    window = 0.0  # a[max(0, m - L)] + ... + a[m - 1]
    for m in range(1, n + 1):
        window += a[m - 1]
        if m > attempt_limit:
            window -= a[m - 1 - attempt_limit]
        a.append(window / m)
    return a[n]
