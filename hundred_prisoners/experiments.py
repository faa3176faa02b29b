from __future__ import annotations

import os
import time
from dataclasses import asdict, dataclass
from typing import Callable, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from . import config
from .model import run_trial
from .permutation import permutation_source

WEAK_SEED_WARNING = (
    "Unable to generate random seed with cryptographically secure source. "
    "Falling back to time seed."
)


@dataclass(frozen=True)
class RunStats:
    """Counts and timing for one batch of trials."""

    attempts: int
    successes: int
    fails: int
    success_rate: float  # percent
    elapsed_ms: float


def acquire_seed(warn_hook: Optional[Callable[[str], None]] = None) -> int:
    """
    Draw a 64-bit seed from the OS entropy source.

    Falls back to the wall clock (and warns via warn_hook) when no
    cryptographically secure source is available.
    """
    try:
        return int.from_bytes(os.urandom(8), "little")
    except (NotImplementedError, OSError):
        if warn_hook is not None:
            warn_hook(WEAK_SEED_WARNING)
        return time.time_ns()


def spawn_generators(seed: int, n_streams: int) -> list[np.random.Generator]:
    """Independent, decorrelated generators spawned from one SeedSequence."""
    if n_streams < 1:
        raise ValueError("n_streams must be positive")
    children = np.random.SeedSequence(seed).spawn(n_streams)
    return [np.random.default_rng(child) for child in children]


def _std_across_repeats(x: pd.Series) -> float:
    if len(x) <= 1:
        return 0.0
    return float(x.std(ddof=1))


def run_trials(
    *,
    runs: int,
    rng: np.random.Generator,
    n_prisoners: int = config.N_PRISONERS,
    attempt_limit: int = config.ATTEMPT_LIMIT,
    progress: bool = True,
    desc: str = "trials",
) -> RunStats:
    """Call `run_trial` exactly `runs` times and count the outcomes."""
    if runs < 1:
        raise ValueError("runs must be greater than 0")

    source = permutation_source(rng)
    attempts = 0
    successes = 0
    fails = 0

    start = time.perf_counter()
    for _ in tqdm(range(runs), desc=desc, disable=not progress, leave=True):
        attempts += 1
        if run_trial(source, n_prisoners, attempt_limit):
            successes += 1
        else:
            fails += 1
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    return RunStats(
        attempts=attempts,
        successes=successes,
        fails=fails,
        success_rate=successes / attempts * 100,
        elapsed_ms=elapsed_ms,
    )


def run_repeats(
    *,
    runs: int,
    n_repeats: int,
    seed: int,
    n_prisoners: int = config.N_PRISONERS,
    attempt_limit: int = config.ATTEMPT_LIMIT,
    progress: bool = True,
    logger_info: Optional[Callable[[str], None]] = None,
) -> pd.DataFrame:
    """
    Run `n_repeats` independent batches of `runs` trials.

    Each repeat gets its own generator spawned from `seed`, so the repeats are
    decorrelated and the whole table is reproducible from `seed` alone.
    Returns one row per repeat.
    """
    if n_repeats < 1:
        raise ValueError("n_repeats must be positive")

    rows = []
    for repeat_index, rng in enumerate(spawn_generators(seed, n_repeats)):
        stats = run_trials(
            runs=runs,
            rng=rng,
            n_prisoners=n_prisoners,
            attempt_limit=attempt_limit,
            progress=progress,
            desc=f"repeat {repeat_index + 1}/{n_repeats}",
        )
        if logger_info is not None:
            logger_info(
                f"repeat {repeat_index}: successes={stats.successes}/{stats.attempts} "
                f"rate={stats.success_rate:.4g}%"
            )
        rows.append({"repeat_index": repeat_index, "seed": int(seed), **asdict(stats)})

    return pd.DataFrame(rows)


def summarise_repeats(repeats: pd.DataFrame) -> dict:
    """Totals and across-repeat mean/std of the success rate."""
    n_repeats = int(len(repeats))
    if n_repeats == 0:
        return {
            "n_repeats": 0,
            "attempts": 0,
            "successes": 0,
            "fails": 0,
            "mean_success_rate": float("nan"),
            "std_success_rate": float("nan"),
            "elapsed_ms": 0.0,
        }
    return {
        "n_repeats": n_repeats,
        "attempts": int(repeats["attempts"].sum()),
        "successes": int(repeats["successes"].sum()),
        "fails": int(repeats["fails"].sum()),
        "mean_success_rate": float(repeats["success_rate"].mean()),
        "std_success_rate": _std_across_repeats(repeats["success_rate"]),
        "elapsed_ms": float(repeats["elapsed_ms"].sum()),
    }
