"""Console report formatting for simulation results.

Renders a header box, one table row per simulated match and a summary
box using Unicode box-drawing characters.
"""

from collections.abc import Sequence

from matchsim.simulation.models import MatchResult
from matchsim.simulation.statistics import SimulationStatistics

TITLE = "SOCCER MATCH SIMULATOR - MONTE CARLO"

_BOX_WIDTH = 62


def _signed(value: int) -> str:
    return f"+{value}" if value >= 0 else str(value)


def format_banner() -> list[str]:
    """Title box shared by the report header and the interactive prompt."""
    return [
        "╔" + "═" * _BOX_WIDTH + "╗",
        "║" + TITLE.center(_BOX_WIDTH) + "║",
        "╚" + "═" * _BOX_WIDTH + "╝",
    ]


def _header_lines(rate_a: float, rate_b: float, count: int) -> list[str]:
    return [
        "",
        "╔" + "═" * _BOX_WIDTH + "╗",
        "║" + TITLE.center(_BOX_WIDTH) + "║",
        "╠" + "═" * _BOX_WIDTH + "╣",
        "║" + f"  Team A Seed: {rate_a:<8.2f}  Team B Seed: {rate_b:<8.2f}".ljust(_BOX_WIDTH) + "║",
        "║" + f"  Simulations: {count:<8}".ljust(_BOX_WIDTH) + "║",
        "╚" + "═" * _BOX_WIDTH + "╝",
        "",
    ]


def _results_lines(results: Sequence[MatchResult]) -> list[str]:
    lines = [
        "┌────────┬────────────┬────────────┬────────┬───────────┐",
        "│  Sim # │  Team A    │  Team B    │ Spread │   Total   │",
        "├────────┼────────────┼────────────┼────────┼───────────┤",
    ]

    for index, result in enumerate(results, start=1):
        lines.append(
            f"│ {index:>6} │ {result.goals_team_a:>10} │ {result.goals_team_b:>10} "
            f"│ {_signed(result.spread):>6} │ {result.total_goals:>9} │"
        )

    lines.append("└────────┴────────────┴────────────┴────────┴───────────┘")
    lines.append("")
    return lines


def _summary_lines(stats: SimulationStatistics) -> list[str]:
    def row(text: str) -> str:
        return "│" + text.ljust(_BOX_WIDTH) + "│"

    avg_spread = f"+{stats.avg_spread:.2f}" if stats.avg_spread >= 0 else f"{stats.avg_spread:.2f}"

    return [
        "┌" + "─" * _BOX_WIDTH + "┐",
        row("SUMMARY".center(_BOX_WIDTH)),
        "├" + "─" * _BOX_WIDTH + "┤",
        row(f"  Team A Wins: {stats.team_a_wins:>6}  ({stats.team_a_win_percentage:5.1f}%)"),
        row(f"  Draws:       {stats.draws:>6}  ({stats.draw_percentage:5.1f}%)"),
        row(f"  Team B Wins: {stats.team_b_wins:>6}  ({stats.team_b_win_percentage:5.1f}%)"),
        "├" + "─" * _BOX_WIDTH + "┤",
        row(f"  Avg Goals Team A: {stats.avg_goals_team_a:5.2f}"),
        row(f"  Avg Goals Team B: {stats.avg_goals_team_b:5.2f}"),
        row(f"  Avg Spread:       {avg_spread}"),
        row(f"  Avg Total Goals:  {stats.avg_total_goals:5.2f}"),
        "└" + "─" * _BOX_WIDTH + "┘",
        "",
    ]


def format_report(
    results: Sequence[MatchResult],
    statistics: SimulationStatistics,
    rate_a: float,
    rate_b: float,
) -> str:
    """
    Format results and statistics as console-friendly tables.

    Args:
        results: Simulated matches in simulation order
        statistics: Aggregate statistics for the same batch
        rate_a: Team A's expected goals, shown in the header
        rate_b: Team B's expected goals, shown in the header

    Returns:
        The full report, newline-terminated
    """
    lines = [
        *_header_lines(rate_a, rate_b, statistics.total_simulations),
        *_results_lines(results),
        *_summary_lines(statistics),
    ]
    return "\n".join(lines) + "\n"
