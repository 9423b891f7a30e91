"""Command-line interface for the soccer match simulator.

Usage:
    python -m matchsim                                  # Interactive mode
    python -m matchsim 1.5 1.2 1000
    python -m matchsim 1.5 1.2 1000 --output my_sim --seed 42
"""

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from matchsim.core.config import Settings, get_settings
from matchsim.core.constants import MAX_GOAL_RATE, MAX_SIMULATIONS, MIN_GOAL_RATE
from matchsim.core.exceptions import MatchSimError, SimulationRangeError
from matchsim.core.logging_config import bind_run_context, clear_run_context, setup_logging
from matchsim.output.formatter import format_banner, format_report
from matchsim.output.writer import write_report
from matchsim.simulation.monte_carlo import MonteCarloSimulator
from matchsim.simulation.statistics import calculate_statistics

logger = logging.getLogger(__name__)

USAGE = f"""\
Soccer Match Simulator - Monte Carlo

Usage:
  matchsim                            Interactive mode (prompts for input)
  matchsim <rate_a> <rate_b> ...      Command-line mode

Rates are expected goals per match ({MIN_GOAL_RATE:g}-{MAX_GOAL_RATE:g}); the simulation
count must be between 1 and {MAX_SIMULATIONS:,}."""

EXAMPLES = """\
Examples:
  matchsim                              # Interactive mode
  matchsim 1.5 1.2 1000
  matchsim 1.5 1.2 1000 --output
  matchsim 1.5 1.2 1000 --output my_sim
  matchsim 1.5 1.2 500 --seed 42"""


@dataclass
class RunRequest:
    """Inputs gathered from the command line or the interactive prompts."""

    rate_a: float
    rate_b: float
    count: int
    output_prefix: str | None = None
    seed: int | None = None


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors with exit status 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = _ArgumentParser(
        prog="matchsim",
        description=USAGE,
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("rate_a", type=float, help="Team A's expected goals (0-20, e.g., 1.5)")
    parser.add_argument("rate_b", type=float, help="Team B's expected goals (0-20, e.g., 1.2)")
    parser.add_argument(
        "count",
        type=int,
        nargs="?",
        default=settings.default_simulation_count,
        help=f"Number of simulations (default: {settings.default_simulation_count})",
    )
    parser.add_argument(
        "--output",
        nargs="?",
        const=settings.default_output_prefix,
        default=None,
        metavar="PREFIX",
        help=f"Save results to {settings.results_dir}/<prefix>_<timestamp>.txt",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run")
    return parser


def prompt_for_float(prompt: str, input_fn: Callable[[str], str] | None = None) -> float:
    """Prompt until the user enters a number."""
    input_fn = input_fn or input
    while True:
        raw = input_fn(prompt)
        try:
            return float(raw)
        except ValueError:
            print("Invalid input. Please enter a valid number.")


def prompt_for_int(
    prompt: str,
    default: int,
    input_fn: Callable[[str], str] | None = None,
) -> int:
    """Prompt once for an integer, falling back to ``default``."""
    input_fn = input_fn or input
    raw = input_fn(prompt).strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        print(f"Invalid input. Using default: {default}")
        return default


def prompt_request(
    settings: Settings, input_fn: Callable[[str], str] | None = None
) -> RunRequest:
    """Gather a run request interactively."""
    input_fn = input_fn or input
    print("\n".join(format_banner()))
    print()

    rate_a = prompt_for_float("Enter Team A expected goals (0-20, e.g., 1.5): ", input_fn)
    rate_b = prompt_for_float("Enter Team B expected goals (0-20, e.g., 1.2): ", input_fn)
    count = prompt_for_int(
        f"Enter number of simulations (default {settings.default_simulation_count}): ",
        settings.default_simulation_count,
        input_fn,
    )

    output_prefix = None
    save = input_fn("Save results to file? (y/N): ").strip().lower()
    if save in ("y", "yes"):
        prefix = input_fn(
            f"Enter result file prefix (default '{settings.default_output_prefix}'): "
        ).strip()
        output_prefix = prefix or settings.default_output_prefix
    print()

    return RunRequest(rate_a=rate_a, rate_b=rate_b, count=count, output_prefix=output_prefix)


def run(request: RunRequest, settings: Settings) -> int:
    """Simulate, print the report and optionally save it. Returns the exit status."""
    simulator = MonteCarloSimulator(
        seed=request.seed,
        n_jobs=settings.parallel_jobs,
        backend=settings.parallel_backend,
    )

    try:
        results = simulator.run_simulations(request.rate_a, request.rate_b, request.count)
    except SimulationRangeError as e:
        logger.info("Rejected parameter %s=%r", e.param_name, e.value)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    statistics = calculate_statistics(results)
    logger.info(
        "Simulated %d matches: %d/%d/%d",
        statistics.total_simulations,
        statistics.team_a_wins,
        statistics.draws,
        statistics.team_b_wins,
    )

    report = format_report(results, statistics, request.rate_a, request.rate_b)
    sys.stdout.write(report)

    if request.output_prefix is not None:
        path = write_report(report, request.output_prefix, settings.results_dir)
        print(f"Results written to: {path}")

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point. Returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    settings = get_settings()
    setup_logging(json_output=settings.log_json, log_level=settings.log_level)
    bind_run_context(mode="arguments" if args else "interactive")

    try:
        if args:
            parser = build_parser(settings)
            try:
                namespace = parser.parse_args(args)
            except SystemExit as e:
                # --help exits 0, parse errors exit 1
                return e.code if isinstance(e.code, int) else 1
            request = RunRequest(
                rate_a=namespace.rate_a,
                rate_b=namespace.rate_b,
                count=namespace.count,
                output_prefix=namespace.output,
                seed=namespace.seed,
            )
        else:
            request = prompt_request(settings)

        return run(request, settings)
    except EOFError:
        print("Error: input ended before all values were entered", file=sys.stderr)
        return 1
    except MatchSimError as e:
        logger.info("Simulation run failed: %s", e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    finally:
        clear_run_context()


if __name__ == "__main__":
    sys.exit(main())
