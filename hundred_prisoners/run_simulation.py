from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from . import config
from .experiments import acquire_seed, run_repeats, run_trials, summarise_repeats
from .io_utils import get_logger
from .model import success_probability


def _bounded_int(label: str, *, minimum: int, message: str):
    def _parse(value: str) -> int:
        try:
            parsed = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"{label} must be an integer (got {value!r})")
        if parsed < minimum:
            raise argparse.ArgumentTypeError(f"{label} must be {message}")
        return parsed

    return _parse


def _positive_int(label: str):
    return _bounded_int(label, minimum=1, message="greater than 0")


def _non_negative_int(label: str):
    # numpy seeds must be >= 0
    return _bounded_int(label, minimum=0, message="0 or greater")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Estimate the 100 prisoners success rate by Monte Carlo simulation."
    )
    p.add_argument(
        "--runs",
        type=_positive_int("runs"),
        default=config.DEFAULT_RUNS,
        help="number of simulation runs to perform",
    )
    p.add_argument(
        "--prisoners",
        type=_positive_int("prisoners"),
        default=config.N_PRISONERS,
        help="number of prisoners (and boxes)",
    )
    p.add_argument(
        "--attempt-limit",
        type=_positive_int("attempt-limit"),
        default=None,
        help="boxes each prisoner may open (default: half the prisoners)",
    )
    p.add_argument(
        "--seed",
        type=_non_negative_int("seed"),
        default=None,
        help="fixed random seed; omit to draw one from the OS",
    )
    p.add_argument(
        "--repeats",
        type=_positive_int("repeats"),
        default=config.DEFAULT_REPEATS,
        help="independent batches of --runs trials (summarised with mean/std)",
    )
    p.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    p.add_argument("--log-file", type=Path, default=None, help="also append logs to this file")
    return p.parse_args(argv)


def _default_attempt_limit(n_prisoners: int) -> int:
    # Half the boxes, as in the classic puzzle (100 -> 50).
    return max(1, n_prisoners // 2)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logger = get_logger(log_path=args.log_file)

    runs = args.runs
    n_prisoners = args.prisoners
    attempt_limit = args.attempt_limit
    if attempt_limit is None:
        attempt_limit = _default_attempt_limit(n_prisoners)

    if runs < config.MIN_ACCURATE_RUNS:
        logger.warning(f"Less than {config.MIN_ACCURATE_RUNS} runs may return inaccurate results.")

    seed = args.seed if args.seed is not None else acquire_seed(logger.warning)
    logger.info(
        f"RUN START runs={runs} repeats={args.repeats} prisoners={n_prisoners} "
        f"attempt_limit={attempt_limit} seed={seed}"
    )

    progress = not args.no_progress
    expected = success_probability(n_prisoners, attempt_limit) * 100

    if args.repeats == 1:
        stats = run_trials(
            runs=runs,
            rng=np.random.default_rng(seed),
            n_prisoners=n_prisoners,
            attempt_limit=attempt_limit,
            progress=progress,
        )
        print("Attempts:", stats.attempts)
        print("Successes:", stats.successes)
        print("Fails:", stats.fails)
        print("Success Rate:", stats.success_rate, "%")
        print(f"Expected Rate: {expected:.4f} %")
        print("Time:", int(stats.elapsed_ms), "ms")
    else:
        repeats = run_repeats(
            runs=runs,
            n_repeats=args.repeats,
            seed=seed,
            n_prisoners=n_prisoners,
            attempt_limit=attempt_limit,
            progress=progress,
            logger_info=logger.info,
        )
        summary = summarise_repeats(repeats)
        print("Repeats:", summary["n_repeats"])
        print("Attempts:", summary["attempts"])
        print("Successes:", summary["successes"])
        print("Fails:", summary["fails"])
        print(f"Mean Success Rate: {summary['mean_success_rate']:.4f} %")
        print(f"Std Success Rate: {summary['std_success_rate']:.4f} %")
        print(f"Expected Rate: {expected:.4f} %")
        print("Time:", int(summary["elapsed_ms"]), "ms")

    logger.info("RUN END")


if __name__ == "__main__":
    main()
