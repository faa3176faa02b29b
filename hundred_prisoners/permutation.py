from __future__ import annotations

from typing import Callable, Sequence

import numpy as np


def generate_permutation(n: int, rng: np.random.Generator) -> np.ndarray:
    """
    Return a uniformly random permutation of 1..n (Fisher–Yates shuffle).

    Starts from the identity [1..n] and walks positions from the last down to
    the second, swapping each with a uniform index in [0, position]. Every one
    of the n! orderings is equally likely.

    Position i (0-based) holds the number inside box i + 1.
    """
    if n < 1:
        raise ValueError("n must be positive")

    boxes = np.arange(1, n + 1, dtype=np.int64)
    if n == 1:
        return boxes

    # One draw per position, drawn up front: js[k] is uniform in [0, n - 1 - k].
    positions = np.arange(n - 1, 0, -1)
    js = rng.integers(0, positions + 1)
    for i, j in zip(positions.tolist(), js.tolist()):
        boxes[i], boxes[j] = boxes[j], boxes[i]
    return boxes


def permutation_source(rng: np.random.Generator) -> Callable[[int], np.ndarray]:
    """Bind `rng` so the result can be passed to `run_trial` as its source."""

    def _source(n: int) -> np.ndarray:
        return generate_permutation(n, rng)

    return _source


def cycle_lengths(permutation: Sequence[int]) -> list[int]:
    """
    Lengths of the disjoint cycles of `permutation` (values in 1..n).

    Cycles are listed in order of their smallest element.
    """
    boxes = [int(x) for x in permutation]
    n = len(boxes)
    seen = [False] * n
    lengths: list[int] = []
    for start in range(n):
        if seen[start]:
            continue
        length = 0
        i = start
        while not seen[i]:
            seen[i] = True
            length += 1
            i = boxes[i] - 1
        lengths.append(length)
    return lengths
