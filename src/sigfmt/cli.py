"""CLI commands for rendering signatures from a model description."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

import typer

from .config import FormatterConfig, load_config
from .errors import ModelLoadError
from .external_name import get_external_name
from .formatting.formatter import SignatureFormatter
from .model.elements import ClassElement, CodeElement, Field, Method, Parameter
from .model.loader import LoadedModel, load_model
from .options import FormatFlag, FormatOptions

APP_HELP = "Render code-model elements as signature strings."
DEFAULT_PRESET = "tooltip"
KIND_CHOICES = ("all", "class", "method", "field", "parameter")

app = typer.Typer(help=APP_HELP)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Emit debug logging to stderr."),
) -> None:
    """Signature formatter command line."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load_config_or_exit(config: Optional[str]) -> FormatterConfig:
    try:
        return load_config(Path(config) if config else None)
    except ModelLoadError as error:
        typer.echo(str(error))
        raise typer.Exit(code=1) from error


def _load_model_or_exit(model_path: Path) -> LoadedModel:
    try:
        return load_model(model_path)
    except ModelLoadError as error:
        typer.echo(str(error))
        raise typer.Exit(code=1) from error


def _resolve_options(config: FormatterConfig, preset: Optional[str], flags: Optional[str]) -> FormatOptions:
    resolved = FormatOptions()
    if preset is None and flags is None:
        preset = DEFAULT_PRESET
    if preset is not None:
        try:
            resolved = config.preset(preset)
        except KeyError as error:
            raise typer.BadParameter(str(error.args[0]), param_hint="--preset") from error
    if flags is not None:
        try:
            resolved = resolved | flags
        except ValueError as error:
            raise typer.BadParameter(str(error), param_hint="--options") from error
    return resolved


def _selected(elements: Iterable[CodeElement], kind: str) -> Iterator[CodeElement]:
    wanted = {
        "class": (ClassElement,),
        "method": (Method,),
        "field": (Field,),
        "parameter": (Parameter,),
        "all": (ClassElement, Method, Field),
    }[kind]
    for element in elements:
        if isinstance(element, wanted):
            yield element


def _check_kind(kind: str) -> str:
    if kind not in KIND_CHOICES:
        raise typer.BadParameter(f"Expected one of: {', '.join(KIND_CHOICES)}", param_hint="--kind")
    return kind


@app.command()
def render(
    model_path: Path = typer.Argument(..., help="Path to a YAML model description."),
    config: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a formatter configuration file.",
    ),
    preset: Optional[str] = typer.Option(None, "--preset", "-p", help="Named option preset."),
    options: Optional[str] = typer.Option(
        None,
        "--options",
        "-o",
        help="Extra flags, e.g. 'SHOW_NAME|SHOW_TYPE'.",
    ),
    param_options: str = typer.Option(
        "SHOW_TYPE",
        "--param-options",
        help="Flags applied to each method parameter.",
    ),
    max_params: Optional[int] = typer.Option(
        None,
        "--max-params",
        min=0,
        help="Parameters shown before truncating with ', ...'.",
    ),
    kind: str = typer.Option("all", "--kind", "-k", help="class, method, field, parameter or all."),
) -> None:
    """Print ``<external name>\\t<signature>`` for each selected element."""
    kind = _check_kind(kind)
    config_data = _load_config_or_exit(config)
    resolved = _resolve_options(config_data, preset, options)
    try:
        parameter_options = FormatOptions.coerce(param_options)
    except ValueError as error:
        raise typer.BadParameter(str(error), param_hint="--param-options") from error

    formatter = SignatureFormatter.from_config(config_data)
    model = _load_model_or_exit(model_path)
    for element in _selected(model.iter_elements(), kind):
        key = get_external_name(element) or "-"
        if isinstance(element, Method):
            signature = formatter.format_method(element, resolved, parameter_options, max_parameters=max_params)
        else:
            signature = formatter.format(element, resolved, parameter_options)
        typer.echo(f"{key}\t{signature}")


@app.command("external-name")
def external_name(
    model_path: Path = typer.Argument(..., help="Path to a YAML model description."),
    param_names: bool = typer.Option(
        True,
        "--param-names/--no-param-names",
        help="Identify parameters by name instead of position.",
    ),
) -> None:
    """Print the external key of every class, method, field and parameter."""
    model = _load_model_or_exit(model_path)
    for element in _selected(model.iter_elements(), "all"):
        typer.echo(get_external_name(element, param_names))
        if isinstance(element, Method):
            for parameter in element.parameters:
                typer.echo(get_external_name(parameter, param_names))


@app.command()
def flags() -> None:
    """List the known option flags and their bit values."""
    for flag in FormatFlag:
        typer.echo(f"{flag.name:<30} 0x{int(flag):05X}")


if __name__ == "__main__":
    app()
