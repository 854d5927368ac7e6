"""Progress reporting utilities using Rich."""

from __future__ import annotations

from datetime import datetime

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from transcribe_turbo.models.transcript import TranscriptResult

console = Console(stderr=True)


def log(message: str, *, style: str = "bold") -> None:
    """Log a timestamped message."""
    ts = datetime.now().strftime("%H:%M:%S")
    console.print(f"[dim]\\[{ts}][/dim] {message}", style=style, highlight=False)


def log_step(step: str, message: str) -> None:
    """Log a processing step."""
    ts = datetime.now().strftime("%H:%M:%S")
    console.print(
        f"[dim]\\[{ts}][/dim] [bold cyan]{step}[/bold cyan] {message}",
        highlight=False,
    )


def log_success(message: str) -> None:
    """Log a success message."""
    log(f"[green]✓[/green] {message}", style="")


def log_warning(message: str) -> None:
    """Log a warning message."""
    log(f"[yellow]⚠[/yellow] {message}", style="")


def log_error(message: str) -> None:
    """Log an error message."""
    log(f"[red]✗[/red] {message}", style="")


def summary_rows(result: TranscriptResult) -> list[tuple[str, str]]:
    """Flatten a TranscriptResult into the label/value rows of the run summary."""
    stats = result.statistics
    rows = [
        ("File", result.filename),
        ("Duration", f"{result.duration:.1f}s"),
        ("Processing Time", f"{result.processing_time:.2f}s"),
        ("Segments", str(stats.total_segments)),
        ("Words", str(stats.total_words)),
        ("Avg Confidence", f"{stats.average_confidence * 100:.1f}%"),
    ]

    analysis = result.political_analysis
    if analysis is not None:
        rows.append(("Key Themes", ", ".join(analysis.key_themes) or "—"))
        rows.append(("Talking Points", str(len(analysis.talking_points))))
        rows.append(("Quotable Moments", str(len(analysis.quotable_moments))))
        for sentiment, ratio in analysis.sentiment_distribution.items():
            rows.append((f"Sentiment: {sentiment}", f"{ratio * 100:.1f}%"))

    return rows


def show_summary(result: TranscriptResult, *, out: Console | None = None) -> None:
    """Show the end-of-run summary panel for a transcript."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()

    for key, value in summary_rows(result):
        table.add_row(key, value)

    (out or console).print(
        Panel(table, title="[bold]Transcription Complete[/bold]", border_style="green")
    )
