"""CLI application entry point for accessible_fonts.

This module provides developer tooling for inspecting the catalog and
checking a resource directory using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from accessible_fonts import __version__
from accessible_fonts.cli.output import (
    console,
    print_error,
    print_families,
    print_header,
    print_registration_summary,
    print_resolution,
    print_step,
    print_validation,
    print_weights,
)
from accessible_fonts.config import (
    AccessibleFontsSettings,
    BackendConfig,
    BackendName,
    LoggingConfig,
    ResourceConfig,
)
from accessible_fonts.core import FontCatalog, FontRegistrar
from accessible_fonts.domain import FontFamily, FontStyle, FontVariant, FontWeight
from accessible_fonts.exceptions import AccessibleFontsError
from accessible_fonts.io import FontResourceLocator, create_backend
from accessible_fonts.utils import RegistrationLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="accessible-fonts",
    help="Inspect and register bundled accessibility font families.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]AccessibleFonts[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect and register bundled accessibility font families."""


def parse_family(value: str) -> FontFamily:
    """Parse a family from its identifier, enum name, or display name.

    Raises:
        typer.BadParameter: If no family matches
    """
    key = value.replace(" ", "").replace("-", "").replace("_", "").lower()
    for family in FontFamily:
        candidates = (family.value, family.name, family.display_name)
        if key in {c.replace(" ", "").replace("_", "").lower() for c in candidates}:
            return family

    valid = ", ".join(f.value for f in FontFamily)
    raise typer.BadParameter(f"Unknown family '{value}'. Valid values: {valid}")


def parse_weight(value: str) -> FontWeight:
    """Parse a weight from a numeric value (100-900) or a name.

    Raises:
        typer.BadParameter: If no weight matches
    """
    if value.isdigit():
        try:
            return FontWeight.from_numeric(int(value))
        except ValueError:
            pass
    else:
        key = value.replace(" ", "").replace("-", "").replace("_", "").lower()
        for weight in FontWeight:
            if key == weight.name.replace("_", "").lower():
                return weight

    raise typer.BadParameter(
        f"Unknown weight '{value}'. Use 100-900 or a name such as 'semibold'"
    )


FamilyArgument = Annotated[
    str,
    typer.Argument(help="Font family (e.g. lexend, openDyslexic)", show_default=False),
]
RootOption = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Resource root containing Fonts/ and Licenses/"),
]


@app.command()
def families() -> None:
    """List every bundled family with its weights and italic support."""
    catalog = FontCatalog()
    print_families(
        [(f, catalog.available_weights(f), catalog.has_italic(f)) for f in FontFamily]
    )


@app.command()
def weights(family: FamilyArgument) -> None:
    """List the weights a family ships."""
    parsed = parse_family(family)
    print_weights(parsed, FontCatalog().available_weights(parsed))


@app.command()
def resolve(
    family: FamilyArgument,
    weight: Annotated[
        str,
        typer.Option("--weight", "-w", help="Requested weight (100-900 or name)"),
    ] = "regular",
    italic: Annotated[
        bool,
        typer.Option("--italic", "-i", help="Request the italic style"),
    ] = False,
) -> None:
    """Show which font a (family, weight, style) request resolves to."""
    catalog = FontCatalog()
    requested = FontVariant(
        family=parse_family(family),
        weight=parse_weight(weight),
        style=FontStyle.ITALIC if italic else FontStyle.NORMAL,
    )
    print_resolution(
        requested,
        catalog.resolved_variant(requested),
        catalog.canonical_name_for(requested),
    )


@app.command()
def validate(
    root: RootOption = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="List every missing file"),
    ] = False,
) -> None:
    """Check that every font file is present under the resource root."""
    locator = FontResourceLocator(root)
    print_step(f"Validating {locator.root}")

    missing_total = 0
    for family in FontFamily:
        missing = locator.validate_resources(family)
        missing_total += len(missing)
        print_validation(family, missing, verbose)

    if missing_total:
        raise typer.Exit(code=1)


@app.command()
def register(
    root: RootOption = None,
    family: Annotated[
        str | None,
        typer.Option("--family", "-f", help="Register only this family"),
    ] = None,
    backend: Annotated[
        str,
        typer.Option("--backend", "-b", help="Host backend (auto|fonttools|coretext)"),
    ] = "auto",
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Register font families with the host and report the outcome."""
    try:
        backend_name = BackendName(backend.lower())
    except ValueError:
        print_error(
            f"Invalid backend: {backend}",
            details="Valid values: auto, fonttools, coretext",
        )
        raise typer.Exit(code=1)

    settings = AccessibleFontsSettings(
        resources=ResourceConfig(root=root),
        backend=BackendConfig(name=backend_name),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )

    if not quiet:
        print_header(__version__)

    try:
        logger = None
        if settings.logging.log_file is not None:
            logger = configure_logging(
                log_file=settings.logging.log_file,
                console_level=settings.logging.log_level,
                file_level=settings.logging.file_log_level,
                quiet=quiet,
            )

        registrar = FontRegistrar(
            FontResourceLocator(settings.resources.root),
            create_backend(settings.backend.name.value),
            logger=RegistrationLogger(logger),
        )

        if family is not None:
            parsed = parse_family(family)
            if not quiet:
                print_step(f"Registering {parsed.display_name}")
            registrar.register(parsed)
        else:
            if not quiet:
                print_step("Registering all families")
            registrar.register_all()

        stats = registrar.stats
        if not quiet:
            print_registration_summary(
                registered=stats.families_registered,
                files_registered=stats.files_registered,
                already_registered=stats.files_already_registered,
                failed=stats.files_failed,
                duration_s=stats.duration_seconds,
            )

    except AccessibleFontsError as e:
        print_error(str(e), details=e.recovery_suggestion or None)
        raise typer.Exit(code=1)


@app.command(name="license")
def license_(
    family: FamilyArgument,
    root: RootOption = None,
) -> None:
    """Print the license text and attribution of a family."""
    parsed = parse_family(family)
    console.print(f"\n[bold]{parsed.display_name}[/bold] {parsed.license_type}")
    console.print(f"  {parsed.attribution}\n")

    text = FontResourceLocator(root).license_text(parsed)
    if text is None:
        print_error(f"No license file for {parsed.display_name}")
        raise typer.Exit(code=1)
    console.print(text, markup=False, highlight=False)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
