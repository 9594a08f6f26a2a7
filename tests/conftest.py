from collections import defaultdict

from rich.console import Console
from rich.table import Table


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """
    Custom hook to print statistics by marker at the end of the test session.
    """
    _ = (exitstatus, config)  # unused in our reporting helper

    # Defined markers in pyproject.toml
    known_markers = {"unit_table", "unit_common", "unit_gui", "unit_ui"}

    # stats is a dict like {'passed': [Report, ...], 'failed': [...]}
    marker_stats = defaultdict(
        lambda: {"passed": 0, "failed": 0, "skipped": 0, "total": 0, "duration": 0.0}
    )

    for outcome in ["passed", "failed", "skipped"]:
        reports = terminalreporter.stats.get(outcome, [])
        for report in reports:
            # Only count the actual test call, or setup skips
            if report.when == "call" or (report.when == "setup" and report.outcome == "skipped"):
                duration = getattr(report, "duration", 0.0)
                for marker in known_markers:
                    if marker in report.keywords:
                        stats = marker_stats[marker]
                        stats[outcome] += 1
                        stats["total"] += 1
                        stats["duration"] += duration

    if not marker_stats:
        return

    console = Console()
    table = Table(title="Test Statistics by Marker", show_header=True, header_style="bold magenta")
    table.add_column("Marker", style="cyan")
    table.add_column("Total", justify="right")
    table.add_column("Passed", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Skipped", justify="right", style="yellow")
    table.add_column("Duration (s)", justify="right", style="blue")
    table.add_column("Avg (s)", justify="right", style="blue")

    for marker in sorted(marker_stats.keys()):
        stats = marker_stats[marker]
        if stats["total"] > 0:
            avg_duration = stats["duration"] / stats["total"]
            table.add_row(
                marker,
                str(stats["total"]),
                str(stats["passed"]),
                str(stats["failed"]),
                str(stats["skipped"]),
                f"{stats['duration']:.2f}",
                f"{avg_duration:.2f}",
            )

    console.print("\n")
    console.print(table)
