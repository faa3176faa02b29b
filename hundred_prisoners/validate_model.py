from __future__ import annotations

"""
Sanity-check / validation script.

This script writes nothing to disk. It runs fixed-seed simulations and prints
key diagnostics to console: a hand-built scenario, the cycle structure of
sampled permutations, and empirical vs exact success rates for a few attempt
limits around the classic 50.
"""

import numpy as np

from . import config
from .experiments import run_trials, spawn_generators
from .model import prisoner_attempts, run_trial, success_probability
from .permutation import cycle_lengths, generate_permutation


def _pct(x: float) -> str:
    return f"{100.0 * x:.2f}%"


def main() -> None:
    N = config.N_PRISONERS
    L = config.ATTEMPT_LIMIT
    seed = config.VALIDATION_SEED

    # ---- Hand-built scenario: two 2-cycles, (1 2) and (3 4)
    print("[VALIDATION] scenario n=4, boxes=[2, 1, 4, 3]")
    boxes = [2, 1, 4, 3]
    for limit in (1, 2, 4):
        ok = run_trial(lambda n: boxes, n=4, attempt_limit=limit)
        print(f"attempt_limit={limit}: success={ok}")
    print(f"prisoner 1 needs {prisoner_attempts(boxes, 1, attempt_limit=4)} attempts")
    print("")

    # ---- Cycle structure of sampled permutations
    print(f"[VALIDATION] cycle structure (N={N}, {config.VALIDATION_CYCLE_SAMPLE} permutations)")
    rng = np.random.default_rng(seed)
    n_cycles = []
    longest = []
    for _ in range(config.VALIDATION_CYCLE_SAMPLE):
        lengths = cycle_lengths(generate_permutation(N, rng))
        n_cycles.append(len(lengths))
        longest.append(max(lengths))
    n_cycles_arr = np.asarray(n_cycles, dtype=float)
    longest_arr = np.asarray(longest, dtype=float)
    harmonic = float(np.sum(1.0 / np.arange(1, N + 1)))
    print(f"mean(#cycles)={float(np.mean(n_cycles_arr)):.4g} (H_N={harmonic:.4g})")
    print(f"mean(longest cycle)={float(np.mean(longest_arr)):.4g}")
    print(f"share with a cycle longer than {L}: {_pct(float(np.mean(longest_arr > L)))}")
    print("")

    # ---- Empirical vs exact success rate
    print(f"[VALIDATION] success rate by attempt limit (runs={config.VALIDATION_RUNS}, seed={seed})")
    limits = config.VALIDATION_ATTEMPT_LIMITS
    for limit, rng_i in zip(limits, spawn_generators(seed, len(limits))):
        stats = run_trials(
            runs=config.VALIDATION_RUNS,
            rng=rng_i,
            n_prisoners=N,
            attempt_limit=limit,
            progress=False,
        )
        exact = success_probability(N, limit)
        print(
            f"attempt_limit={limit}: empirical={stats.success_rate:.2f}% "
            f"exact={_pct(exact)} ({stats.elapsed_ms:.0f} ms)"
        )
    print("")

    print("[VALIDATION COMPLETE] Simulation consistent with cycle analysis.")


if __name__ == "__main__":
    main()
