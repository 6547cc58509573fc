"""Typer CLI for wardrobe configuration suggestions."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError as PydanticValidationError

from wardrobes.application import (
    SuggestDefaultsCommand,
    SuggestionOutput,
    build_configuration_input,
)
from wardrobes.application.config import (
    ConfigError,
    config_to_input,
    config_to_standards,
    load_config,
    merge_config_with_cli,
)
from wardrobes.cli.commands import validate_command
from wardrobes.domain import (
    ConfigurationInput,
    IndustryStandards,
    WardrobeInputError,
    map_to_smart_default_type,
)
from wardrobes.infrastructure import (
    HardwareScheduleFormatter,
    JsonExporter,
    SuggestionFormatter,
)

OUTPUT_FORMATS = ("text", "json")


def _configure_logging(verbose: bool) -> None:
    """Send DEBUG logs to stderr when --verbose is given.

    Args:
        verbose: Value of the --verbose flag.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _resolve_input(
    config_file: Path | None,
    width: float | None,
    height: float | None,
    depth: float | None,
    unit: str | None,
    wardrobe_type: str | None,
) -> tuple[ConfigurationInput, IndustryStandards]:
    """Build advisor input from a config file and/or CLI options.

    CLI options override config file values. Exits with code 1 on any
    invalid input.
    """
    if config_file is not None:
        try:
            config = load_config(config_file)
            config = merge_config_with_cli(
                config,
                width=width,
                height=height,
                depth=depth,
                unit=unit,
                wardrobe_type=wardrobe_type,
            )
            return config_to_input(config), config_to_standards(config)
        except (ConfigError, PydanticValidationError, ValueError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    if width is None or height is None or depth is None:
        typer.echo(
            "Error: --width, --height and --depth are required when no --config is given",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        config_input = build_configuration_input(
            width,
            height,
            depth,
            unit=unit or "mm",
            wardrobe_type=map_to_smart_default_type(wardrobe_type or "openable"),
        )
    except WardrobeInputError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    return config_input, IndustryStandards()


def _run(
    config_file: Path | None,
    width: float | None,
    height: float | None,
    depth: float | None,
    unit: str | None,
    wardrobe_type: str | None,
) -> SuggestionOutput:
    """Resolve input and run the suggestion command.

    Returns:
        SuggestionOutput for the resolved wardrobe.

    Raises:
        typer.Exit: With code 1 if the input is rejected.
    """
    config_input, standards = _resolve_input(
        config_file, width, height, depth, unit, wardrobe_type
    )
    command = SuggestDefaultsCommand(standards=standards)
    try:
        return command.execute(config_input)
    except WardrobeInputError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


app = typer.Typer(
    name="wardrobes",
    help="Suggest wardrobe layouts (columns, shutters, rods, shelves, drawers) from dimensions.",
)

# Register validate command
app.command(name="validate")(validate_command)


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]
WidthOption = Annotated[
    float | None, typer.Option("--width", "-w", help="Wardrobe width in --unit")
]
HeightOption = Annotated[
    float | None, typer.Option("--height", "-h", help="Wardrobe height in --unit")
]
DepthOption = Annotated[
    float | None, typer.Option("--depth", "-d", help="Wardrobe depth in --unit")
]
UnitOption = Annotated[
    str | None, typer.Option("--unit", "-u", help="Dimension unit: mm or ft")
]
TypeOption = Annotated[
    str | None,
    typer.Option("--type", "-t", help="Wardrobe type: openable, sliding, walkin"),
]
FormatOption = Annotated[
    str, typer.Option("--format", "-f", help="Output format: text or json")
]
VerboseOption = Annotated[
    bool, typer.Option("--verbose", "-v", help="Log derivation details")
]


def _check_format(output_format: str) -> str:
    """Normalize --format, exiting with code 1 if it is unknown.

    Args:
        output_format: Value of the --format option.

    Returns:
        The lower-cased format name.
    """
    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)
    return output_format


@app.command()
def suggest(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    depth: DepthOption = None,
    unit: UnitOption = None,
    wardrobe_type: TypeOption = None,
    output_format: FormatOption = "text",
    verbose: VerboseOption = False,
) -> None:
    """Suggest a wardrobe layout from its dimensions.

    Example:
        wardrobes suggest -w 1200 -h 2400 -d 600 --type openable
    """
    _configure_logging(verbose)
    output_format = _check_format(output_format)
    output = _run(config_file, width, height, depth, unit, wardrobe_type)

    if output_format == "json":
        typer.echo(JsonExporter().export(output))
    else:
        typer.echo(SuggestionFormatter().format(output))


@app.command()
def hardware(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    depth: DepthOption = None,
    unit: UnitOption = None,
    wardrobe_type: TypeOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Show the hardware schedule for the suggested layout."""
    _configure_logging(verbose)
    output = _run(config_file, width, height, depth, unit, wardrobe_type)
    typer.echo(HardwareScheduleFormatter().format(output.hardware))


if __name__ == "__main__":
    app()
