"""Command-line entry point for pixelcompare."""

from __future__ import annotations

import sys

import click

from pixelcompare.compositor import CompositeSpec, SplitAxis
from pixelcompare.config import LOSSLESS_FORMATS, check_log_level, load_config
from pixelcompare.decode import load_buffer
from pixelcompare.engine import render_comparison, similarity_of
from pixelcompare.errors import PixelCompareError
from pixelcompare.log import configure_logging
from pixelcompare.metrics import DEFAULT_METRIC, available_metrics


def _fail(exc: PixelCompareError) -> None:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


@click.group()
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """pixelcompare - score and visualize differences between two images."""
    try:
        config = load_config()
        level = check_log_level(log_level or config.log_level)
    except PixelCompareError as exc:
        _fail(exc)
    configure_logging(level)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@cli.command()
@click.argument("image_a", type=click.Path(dir_okay=False))
@click.argument("image_b", type=click.Path(dir_okay=False))
@click.option(
    "--metric",
    type=click.Choice(available_metrics()),
    default=DEFAULT_METRIC,
    show_default=True,
)
def similarity(image_a: str, image_b: str, metric: str) -> None:
    """Print the similarity of IMAGE_A and IMAGE_B (1.0 = identical)."""
    try:
        score = similarity_of(load_buffer(image_a), load_buffer(image_b), metric)
    except PixelCompareError as exc:
        _fail(exc)
    click.echo(f"{score:.6f}")


@cli.command()
@click.argument("image_a", type=click.Path(dir_okay=False))
@click.argument("image_b", type=click.Path(dir_okay=False))
@click.option("--alpha", type=float, default=0.5, show_default=True,
              help="Weight of IMAGE_B when blending.")
@click.option("--split/--blend", default=False, help="Split view instead of an overlay blend.")
@click.option("--horizontal", is_flag=True, help="Split top/bottom instead of left/right.")
@click.option("--divider", is_flag=True, help="Draw a white line at the split.")
@click.option("--output-dir", type=click.Path(file_okay=False), default=None)
@click.option("--format", "image_format", type=click.Choice(sorted(LOSSLESS_FORMATS)), default=None)
@click.pass_context
def composite(
    ctx: click.Context,
    image_a: str,
    image_b: str,
    alpha: float,
    split: bool,
    horizontal: bool,
    divider: bool,
    output_dir: str | None,
    image_format: str | None,
) -> None:
    """Write a comparison image of IMAGE_A and IMAGE_B and print its path."""
    config = ctx.obj["config"]
    if split:
        axis = SplitAxis.HORIZONTAL if horizontal else SplitAxis.VERTICAL
        spec = CompositeSpec.split(axis, divider=divider)
    else:
        spec = CompositeSpec.overlay(alpha)

    try:
        result = render_comparison(
            load_buffer(image_a),
            load_buffer(image_b),
            spec,
            output_dir=output_dir or config.output_path,
            image_format=image_format or config.image_format,
        )
    except PixelCompareError as exc:
        _fail(exc)
    click.echo(result.path)


if __name__ == "__main__":
    cli()
