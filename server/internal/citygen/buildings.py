"""
Building records for 3D tile fixtures.
Each building is a unit cube placed by an affine transform, with a material
and the longitude/latitude/height metadata written to the batch table.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

import numpy as np
import shapely.geometry as sg

from . import geodesy
from . import layout
from . import materials
from .config import GenerationOptions
from .seeds import RandomSequence


@dataclass(frozen=True, eq=False)
class Building:
    """Position, appearance and metadata of one generated building"""

    transform: np.ndarray
    material: materials.Material
    longitude: float
    latitude: float
    height: float

    def __post_init__(self):
        matrix = np.array(self.transform, dtype=np.float64)
        if matrix.shape != (4, 4):
            raise ValueError(f"Building transform must be 4x4, got {matrix.shape}")
        matrix.setflags(write=False)
        object.__setattr__(self, "transform", matrix)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Building):
            return NotImplemented
        return (
            np.array_equal(self.transform, other.transform)
            and self.material == other.material
            and self.longitude == other.longitude
            and self.latitude == other.latitude
            and self.height == other.height
        )

    __hash__ = None

    @property
    def position(self) -> Tuple[float, float, float]:
        """Center of the building box in local tile coordinates"""
        x, y, z = self.transform[:3, 3]
        return (float(x), float(y), float(z))

    @property
    def dimensions(self) -> Tuple[float, float, float]:
        """(width, depth, height) of the box, read from the scale"""
        # Rotation is always identity, so the scale sits on the diagonal
        width, depth, height = np.diag(self.transform)[:3]
        return (float(width), float(depth), float(height))

    def footprint(self) -> sg.Polygon:
        """Horizontal footprint as a Shapely box."""
        x, y, _ = self.position
        width, depth, _ = self.dimensions
        return sg.box(x - width / 2.0, y - depth / 2.0, x + width / 2.0, y + depth / 2.0)

    def batch_properties(self) -> Dict[str, float]:
        """Per-building metadata for the batch table."""
        return {
            "longitude": self.longitude,
            "latitude": self.latitude,
            "height": self.height,
        }

    def to_dict(self) -> Dict[str, Any]:
        width, depth, height = self.dimensions
        return {
            "type": "building",
            "transform": self.transform.tolist(),
            "position": list(self.position),
            "dimensions": {
                "width": width,
                "depth": depth,
                "height": height,
            },
            "material": self.material.to_dict(),
            "properties": self.batch_properties(),
        }


def generate_building(index: int, options: GenerationOptions, rng: RandomSequence) -> Building:
    """
    Generate one building.

    The material is selected before the layout is drawn, so both consume
    the sequence in a fixed order.

    Args:
        index: Building index within the set (0 is the reference building)
        options: Validated generation options
        rng: Random sequence shared by the whole set

    Returns:
        Building record
    """
    material = materials.select_material(
        options.diffuse_type,
        options.translucency_type,
        rng,
        reference=index == layout.REFERENCE_INDEX,
    )
    placement = layout.generate_layout(index, options, rng)

    longitude = options.longitude + geodesy.meters_to_longitude(
        placement.offset_x, options.latitude
    )
    latitude = options.latitude + geodesy.meters_to_latitude(
        placement.offset_y, options.longitude
    )

    return Building(
        transform=placement.transform,
        material=material,
        longitude=longitude,
        latitude=latitude,
        height=placement.height,
    )
