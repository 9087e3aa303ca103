import sys
import click
import numpy as np
from typing import Optional

from .constants import DEFAULT_DITHER_SIZE, ELEMENT_TYPES, ElementType
from .core.matrix import matrix, threshold_map
from .core.pipeline import dither_image

def format_matrix(values: np.ndarray, normalize: bool = False) -> str:
    """
    Render a matrix as text, one row per line.
    """
    if normalize:
        return "\n".join(" ".join(f"{v:.6f}" for v in row) for row in values)
    return "\n".join(" ".join(str(int(v)) for v in row) for row in values)


@click.group()
def main() -> None:
    """Generate Bayer ordered-dithering matrices and apply them to images."""


@main.command()
@click.argument('rows', type=int)
@click.argument('cols', type=int)
@click.option(
    '--dtype',
    type=click.Choice(list(ELEMENT_TYPES), case_sensitive=False),
    default=None,
    help='Unsigned integer element type of the matrix. Default: uint8.'
)
@click.option(
    '--normalize',
    is_flag=True,
    help='Print thresholds scaled to [0, 1) instead of raw integers.'
)
@click.option(
    '--no-range-check',
    is_flag=True,
    help='Skip the element type range check; values that do not fit are truncated.'
)
def generate(rows: int, cols: int, dtype: Optional[ElementType], normalize: bool, no_range_check: bool) -> None:
    """Print a ROWS x COLS Bayer matrix.

    Square power-of-two dimensions give an exact permutation of
    0..ROWS*COLS-1. Other sizes are cut from the enclosing power-of-two
    square. --normalize prints floats and can't be combined with --dtype
    or --no-range-check.
    """
    if normalize and (dtype is not None or no_range_check):
        raise click.UsageError('--normalize cannot be combined with --dtype or --no-range-check')

    try:
        if normalize:
            values = threshold_map(rows, cols)
        else:
            values = matrix(rows, cols, dtype=(dtype or 'uint8').lower(), check_range=not no_range_check)
        click.echo(format_matrix(values, normalize))
    except Exception as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)


@main.command()
@click.argument('image', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--size',
    type=click.IntRange(min=1),
    default=DEFAULT_DITHER_SIZE,
    show_default=True,
    help='Side of the square Bayer matrix (power of two).'
)
@click.option(
    '--output', '-o',
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help='Output file path. Defaults to automatic naming.'
)
def dither(image: str, size: int, output: Optional[str]) -> None:
    """Dither IMAGE to black and white using a Bayer threshold matrix.

    IMAGE is the path to the input image file (PNG or JPG). The image is
    converted to grayscale and every pixel brighter than its tiled
    threshold becomes white, all others black.
    """
    try:
        output_path = dither_image(image, size=size, output_path=output)
        click.secho(f"✓ Dithered image saved to: {output_path}", fg='green')
    except Exception as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)
