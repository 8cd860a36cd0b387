"""
Building layout generation.
Places box buildings inside a square tile centered at the local origin.
"""

from typing import NamedTuple, Tuple

import numpy as np
import shapely.geometry as sg

from .config import (
    DEPTH_SPREAD,
    HEIGHT_SPREAD,
    MIN_DIMENSION,
    WIDTH_SPREAD,
    ConfigurationError,
    GenerationOptions,
)
from .seeds import RandomSequence
from .transforms import IDENTITY_ROTATION, compose_transform

# Building index that is always placed at the tile center
REFERENCE_INDEX = 0


class Layout(NamedTuple):
    """Placement of one building in local tile coordinates (meters)"""

    transform: np.ndarray
    offset_x: float
    offset_y: float
    height: float
    width: float
    depth: float


def tile_bounds(tile_width: float) -> Tuple[float, float, float, float]:
    """Tile bounds as (min_x, min_y, max_x, max_y)."""
    half = tile_width / 2.0
    return (-half, -half, half, half)


def tile_polygon(tile_width: float) -> sg.Polygon:
    """Tile area as a Shapely box centered at the origin."""
    return sg.box(*tile_bounds(tile_width))


def placement_range(tile_width: float, size: float) -> Tuple[float, float]:
    """
    Range of center positions keeping a span of `size` inside the tile.

    Raises:
        ConfigurationError: If the span is wider than the tile
    """
    low = -tile_width / 2.0 + size / 2.0
    high = tile_width / 2.0 - size / 2.0
    if low > high:
        raise ConfigurationError(
            f"Building span {size}m does not fit in tile of width {tile_width}m"
        )
    return low, high


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def generate_layout(index: int, options: GenerationOptions, rng: RandomSequence) -> Layout:
    """
    Generate dimensions and placement for one building.

    Draws width, depth, height and two fractional offsets from `rng`, in that
    order. Depth follows width so footprints stay roughly square. The
    building at REFERENCE_INDEX ignores its offset draws and sits at the
    tile center.

    Args:
        index: Building index within the set
        options: Validated generation options
        rng: Random sequence, advanced by five draws

    Returns:
        Layout with the placement transform of a unit cube scaled to
        (width, depth, height) and resting on z=0

    Raises:
        ConfigurationError: If a drawn footprint is wider than the tile
    """
    tile_width = options.tile_width

    width = max(options.average_width + (rng.next() - 0.5) * WIDTH_SPREAD, MIN_DIMENSION)
    depth = max(width + (rng.next() - 0.5) * DEPTH_SPREAD, MIN_DIMENSION)
    height = max(options.average_height + (rng.next() - 0.5) * HEIGHT_SPREAD, MIN_DIMENSION)

    min_x, max_x = placement_range(tile_width, width)
    min_y, max_y = placement_range(tile_width, depth)

    range_x = rng.next() - 0.5
    range_y = rng.next() - 0.5
    if index == REFERENCE_INDEX:
        range_x = 0.0
        range_y = 0.0

    x = _clamp(range_x * tile_width, min_x, max_x)
    y = _clamp(range_y * tile_width, min_y, max_y)
    z = height / 2.0  # Resting on the ground plane

    transform = compose_transform((x, y, z), IDENTITY_ROTATION, (width, depth, height))

    return Layout(
        transform=transform,
        offset_x=x,
        offset_y=y,
        height=height,
        width=width,
        depth=depth,
    )
