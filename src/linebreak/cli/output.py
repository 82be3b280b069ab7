"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library
with formatted messages and summaries.
"""

from rich.console import Console
from rich.text import Text

from linebreak.utils import BreakStats

console = Console()

SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"
SYM_DOT = "·"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Linebreak[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_text_info(text_path: str, paragraph_count: int, text_width: float, algorithm: str) -> None:
    """Print information about the text being broken.

    Args:
        text_path: Path to the text file
        paragraph_count: Number of paragraphs in the text
        text_width: Target line width
        algorithm: Name of the line-breaking algorithm
    """
    line = Text("  ")
    line.append(text_path)
    console.print(line)
    console.print(
        f"  {paragraph_count:,} paragraphs {SYM_DOT} width {text_width:g} {SYM_DOT} {algorithm}"
    )


def print_lines(text: str) -> None:
    """Print broken text without markup interpretation."""
    console.print(Text(text))


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_summary(stats: BreakStats) -> None:
    """Print a summary of the breaking statistics.

    Args:
        stats: Statistics collected by the line breaker
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}"
    )
    overflow_style = "red" if stats.overflow_count > 0 else "green"
    console.print(
        f"  {stats.paragraph_count} paragraphs {SYM_DOT} {stats.line_count} lines {SYM_DOT} "
        f"{stats.box_count} words"
    )
    console.print(
        f"  badness {stats.total_badness:.2f} {SYM_DOT} "
        f"[{overflow_style}]{stats.overflow_count} overflowing lines[/{overflow_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
