"""
Configuration for the 100 prisoners simulation.

Only numpy/pandas/tqdm are assumed available in the environment.
"""

# Puzzle size
N_PRISONERS = 100
ATTEMPT_LIMIT = 50  # half the boxes

# Driver defaults
DEFAULT_RUNS = 1000
MIN_ACCURATE_RUNS = 100  # below this the CLI warns
DEFAULT_REPEATS = 1

# Validation script (fixed so its output is reproducible)
VALIDATION_RUNS = 10_000
VALIDATION_SEED = 123
VALIDATION_ATTEMPT_LIMITS = [40, 45, 50, 55, 60]
VALIDATION_CYCLE_SAMPLE = 2_000
