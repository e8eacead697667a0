"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from accessible_fonts.domain import FontFamily, FontVariant, FontWeight

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]AccessibleFonts[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_families(rows: list[tuple[FontFamily, tuple[FontWeight, ...], bool]]) -> None:
    """Print the family table.

    Args:
        rows: (family, available weights, has italic) per family
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("Family")
    table.add_column("Identifier")
    table.add_column("Weights")
    table.add_column("Italic", justify="center")

    for family, weights, italic in rows:
        table.add_row(
            family.display_name,
            family.value,
            ", ".join(str(w.numeric_value) for w in weights),
            SYM_OK if italic else "-",
        )

    console.print(table)


def print_weights(family: FontFamily, weights: tuple[FontWeight, ...]) -> None:
    """Print the weights a family ships."""
    console.print(f"\n[bold]{family.display_name}[/bold]")
    for weight in weights:
        console.print(f"  {weight.numeric_value}  {weight.display_name}")


def print_resolution(
    requested: FontVariant,
    resolved: FontVariant,
    canonical_name: str | None,
) -> None:
    """Print how a requested variant resolves.

    Args:
        requested: Variant as requested
        resolved: Variant after weight and style fallback
        canonical_name: PostScript name, or None if nothing matched
    """
    console.print(f"  Requested  {requested}")
    console.print(f"  Resolved   {resolved}")
    if canonical_name is None:
        console.print(f"  [red]{SYM_ERR} No matching font[/red]")
    else:
        line = Text("  Font       ")
        line.append(canonical_name, style="bold")
        console.print(line)


def print_validation(family: FontFamily, missing: list[str], verbose: bool) -> None:
    """Print resource validation result for one family."""
    if not missing:
        console.print(f"  [green]{SYM_OK}[/green] {family.display_name}")
        return

    console.print(
        f"  [red]{SYM_ERR}[/red] {family.display_name} {SYM_DOT} {len(missing)} missing"
    )
    if verbose:
        for file_name in missing:
            console.print(f"      {file_name}")


def print_registration_summary(
    registered: int,
    files_registered: int,
    already_registered: int,
    failed: int,
    duration_s: float,
) -> None:
    """Print registration summary."""
    status_style = "red" if failed > 0 else "green"
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {duration_s * 1000:.0f}ms")
    console.print(
        f"  {registered} families {SYM_DOT} {files_registered} files {SYM_DOT} "
        f"{already_registered} already registered {SYM_DOT} "
        f"[{status_style}]{failed} failed[/{status_style}]"
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
