"""Click CLI entry point for domxform."""

from __future__ import annotations

import json
import logging

import click

from domxform import __version__
from domxform.errors import DomXformError
from domxform.matrix_init import to_array, validate_and_fixup
from domxform.models import TransformFunctionCall
from domxform.transform_parser import parse_transform_list


def _read_init_json(raw: str) -> object:
    """Decode a matrix init from a JSON string, or from stdin when raw is '-'."""
    if raw == "-":
        raw = click.get_text_stream("stdin").read()
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON: {e}") from e


@click.group()
@click.version_option(version=__version__, prog_name="domxform")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def main(verbose: bool = False) -> None:
    """domxform: DOMMatrixInit normalization and CSS transform-list parsing."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("init_json", type=str)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--array",
    "as_array",
    is_flag=True,
    default=False,
    help="With --format json, emit the 6 or 16 element array instead of the record.",
)
def normalize(init_json: str, output_format: str = "text", as_array: bool = False) -> None:
    """Validate and fix up a DOMMatrixInit given as JSON ('-' reads stdin)."""
    init = _read_init_json(init_json)
    try:
        matrix = validate_and_fixup(init)
    except DomXformError as e:
        raise click.ClickException(str(e))

    values = to_array(matrix)
    if output_format == "json":
        payload = values if as_array else matrix.to_init()
        click.echo(json.dumps(payload, indent=2))
        return

    name = "matrix" if matrix.is_2d else "matrix3d"
    click.echo(str(TransformFunctionCall(name=name, params=tuple(values))))


@main.command()
@click.argument("transform", type=str)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)
def parse(transform: str, output_format: str = "text") -> None:
    """Parse a CSS transform list, converting lengths to px and angles to deg."""
    try:
        calls = parse_transform_list(transform)
    except DomXformError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        payload = [{"name": call.name, "params": list(call.params)} for call in calls]
        click.echo(json.dumps(payload, indent=2))
        return

    for call in calls:
        click.echo(str(call))
