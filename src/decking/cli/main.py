"""Typer CLI for deck quotes."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from decking.application import DeckInput, GenerateQuoteCommand, QuoteOutput
from decking.application.config import (
    ConfigError,
    DeckConfiguration,
    config_to_deck_config,
    load_config,
)
from decking.cli.commands import validate_command
from decking.infrastructure import (
    JoistLayoutFormatter,
    LayoutFormatter,
    QuoteFormatter,
)
from decking.infrastructure.exporters import (
    DEFAULT_PROJECT_NAME,
    ExportError,
    ExporterRegistry,
    ExportManager,
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]
ShapeOption = Annotated[
    str | None,
    typer.Option("--shape", help="Deck shape: rectangulaire, L, U"),
]
WidthOption = Annotated[
    float | None,
    typer.Option("--width", "-w", help="Main rectangle width in meters"),
]
HeightOption = Annotated[
    float | None,
    typer.Option("--height", "-h", help="Main rectangle length in meters"),
]
ExtWidthOption = Annotated[
    float | None,
    typer.Option("--ext-width", help="Extension width in meters (L and U shapes)"),
]
ExtHeightOption = Annotated[
    float | None,
    typer.Option("--ext-height", help="Extension length in meters (L and U shapes)"),
]
ColorOption = Annotated[
    str | None,
    typer.Option("--color", help="Board color: gris, acajou, chene, marron"),
]
FinishOption = Annotated[
    str | None,
    typer.Option("--finish", help="Board finish: brossée, structurée, poncée"),
]
EdgeTypeOption = Annotated[
    str | None,
    typer.Option("--edge-type", help="Edge trim: cornières, plinthes"),
]
EdgesOption = Annotated[
    bool | None,
    typer.Option("--edges/--no-edges", help="Include edge trim in the quote"),
]
SidesOption = Annotated[
    str | None,
    typer.Option(
        "--sides",
        help="Comma-separated sides receiving trim: top, bottom, left, right",
    ),
]


app = typer.Typer(
    name="decking",
    help="Composite deck configurator: materials, prices and layout.",
    no_args_is_help=True,
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Composite deck configurator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_file_config(config_file: Path) -> DeckConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _build_input(
    configuration: DeckConfiguration | None,
    shape: str | None = None,
    width: float | None = None,
    height: float | None = None,
    ext_width: float | None = None,
    ext_height: float | None = None,
    color: str | None = None,
    finish: str | None = None,
    edge_type: str | None = None,
    edges: bool | None = None,
    sides: str | None = None,
) -> DeckInput:
    """Merge CLI options over the configuration file (or the defaults)."""
    if configuration is not None:
        deck_input = DeckInput.from_deck_config(config_to_deck_config(configuration))
    else:
        deck_input = DeckInput()

    overrides = {
        "shape": shape,
        "width": width,
        "height": height,
        "extension_width": ext_width,
        "extension_height": ext_height,
        "color": color,
        "finish": finish,
        "edge_type": edge_type,
        "include_edges": edges,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(deck_input, name, value)
    if sides is not None:
        deck_input.edges = [
            side.strip().lower() for side in sides.split(",") if side.strip()
        ]
    return deck_input


def _run_quote(deck_input: DeckInput) -> QuoteOutput:
    output = GenerateQuoteCommand().execute_input(deck_input)
    for warning in output.warnings:
        typer.echo(f"Warning: {warning}", err=True)
    return output


@app.command()
def quote(
    config_file: ConfigOption = None,
    shape: ShapeOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    ext_width: ExtWidthOption = None,
    ext_height: ExtHeightOption = None,
    color: ColorOption = None,
    finish: FinishOption = None,
    edge_type: EdgeTypeOption = None,
    edges: EdgesOption = None,
    sides: SidesOption = None,
) -> None:
    """Print the quote for a deck configuration."""
    configuration = _load_file_config(config_file) if config_file else None
    deck_input = _build_input(
        configuration, shape, width, height, ext_width, ext_height,
        color, finish, edge_type, edges, sides,
    )
    output = _run_quote(deck_input)
    typer.echo(QuoteFormatter().format(output), nl=False)


@app.command()
def joists(
    config_file: ConfigOption = None,
    shape: ShapeOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    ext_width: ExtWidthOption = None,
    ext_height: ExtHeightOption = None,
) -> None:
    """Show joist lines per section and the total joist length."""
    configuration = _load_file_config(config_file) if config_file else None
    deck_input = _build_input(
        configuration, shape, width, height, ext_width, ext_height,
    )
    output = _run_quote(deck_input)
    typer.echo(JoistLayoutFormatter().format(output.joists))


@app.command()
def layout(
    config_file: ConfigOption = None,
    shape: ShapeOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    ext_width: ExtWidthOption = None,
    ext_height: ExtHeightOption = None,
    edges: EdgesOption = None,
    sides: SidesOption = None,
) -> None:
    """Show the deck plan: panels, joist lines and trimmed sides."""
    configuration = _load_file_config(config_file) if config_file else None
    deck_input = _build_input(
        configuration, shape, width, height, ext_width, ext_height,
        edges=edges, sides=sides,
    )
    output = _run_quote(deck_input)
    typer.echo(LayoutFormatter().format(output.layout))


@app.command()
def export(
    config_file: ConfigOption = None,
    shape: ShapeOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    ext_width: ExtWidthOption = None,
    ext_height: ExtHeightOption = None,
    color: ColorOption = None,
    finish: FinishOption = None,
    edge_type: EdgeTypeOption = None,
    edges: EdgesOption = None,
    sides: SidesOption = None,
    formats: Annotated[
        str | None,
        typer.Option(
            "--formats",
            "-f",
            help="Comma-separated export formats (txt, json, csv, pdf) or 'all'",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Directory for exported files"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="File name prefix for exported files"),
    ] = None,
) -> None:
    """Export the quote to one or more file formats."""
    configuration = _load_file_config(config_file) if config_file else None
    deck_input = _build_input(
        configuration, shape, width, height, ext_width, ext_height,
        color, finish, edge_type, edges, sides,
    )

    # Options given on the command line win over the file's output section
    file_output = configuration.output if configuration is not None else None
    if formats is not None:
        if formats.lower() == "all":
            format_list = ExporterRegistry.available_formats()
        else:
            format_list = [f.strip().lower() for f in formats.split(",") if f.strip()]
    elif file_output is not None:
        format_list = list(file_output.formats)
    else:
        format_list = ["txt"]

    available = ExporterRegistry.available_formats()
    invalid = [f for f in format_list if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    if not format_list:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    if output_dir is None:
        if file_output is not None and file_output.output_dir:
            output_dir = Path(file_output.output_dir)
        else:
            output_dir = Path(".")
    if project_name is None:
        if file_output is not None and file_output.project_name:
            project_name = file_output.project_name
        else:
            project_name = DEFAULT_PROJECT_NAME

    output = _run_quote(deck_input)
    manager = ExportManager(output_dir, project_name)
    try:
        files = manager.export_all(format_list, output)
    except ExportError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


if __name__ == "__main__":
    app()
