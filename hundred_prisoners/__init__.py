"""
100 Prisoners — Monte Carlo Estimator

This package estimates the success probability of the "100 prisoners" puzzle
under the cycle-following strategy: each prisoner opens the box carrying their
own number, then the box numbered by what they found, and so on until they
find their number or run out of attempts.
"""

from .config import (  # noqa: F401
    ATTEMPT_LIMIT,
    DEFAULT_REPEATS,
    DEFAULT_RUNS,
    MIN_ACCURATE_RUNS,
    N_PRISONERS,
    VALIDATION_ATTEMPT_LIMITS,
    VALIDATION_CYCLE_SAMPLE,
    VALIDATION_RUNS,
    VALIDATION_SEED,
)
from .model import run_trial, success_probability  # noqa: F401
from .permutation import cycle_lengths, generate_permutation, permutation_source  # noqa: F401
