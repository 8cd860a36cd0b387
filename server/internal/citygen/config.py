"""
Configuration management for building generation.
"""

import logging
import os
from typing import Any, Literal, Mapping, Optional, Union

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from . import seeds

logger = logging.getLogger(__name__)

DiffuseType = Literal["white", "color", "textured"]
TranslucencyType = Literal["opaque", "translucent", "mix"]

# Random spread applied around the average dimensions (meters)
WIDTH_SPREAD = 8.0
DEPTH_SPREAD = 4.0
HEIGHT_SPREAD = 8.0
MIN_DIMENSION = 1.0  # No building side is ever shorter than 1m


class ConfigurationError(ValueError):
    """Raised when generation options cannot produce a valid building set"""


def max_footprint_extent(average_width: float) -> float:
    """
    Upper bound of any width or depth drawn for an average width.

    Widths stay below average_width + WIDTH_SPREAD / 2 and depths below
    width + DEPTH_SPREAD / 2, each floored at MIN_DIMENSION.
    """
    widest = max(average_width + WIDTH_SPREAD / 2.0, MIN_DIMENSION)
    return max(widest + DEPTH_SPREAD / 2.0, MIN_DIMENSION)


class Config:
    """Environment configuration for building generation"""

    def __init__(self):
        # Seed used when generation options don't carry one
        raw_seed = os.getenv("BUILDINGS_SEED", str(seeds.DEFAULT_SEED))
        try:
            self.seed = int(raw_seed)
        except ValueError as e:
            raise ConfigurationError(f"BUILDINGS_SEED must be an integer, got {raw_seed!r}") from e


def load_config() -> Config:
    """Load configuration from .env file and environment variables"""
    load_dotenv(find_dotenv(usecwd=True), override=False)
    return Config()


class GenerationOptions(BaseModel):
    """Options controlling a generated building set"""

    model_config = ConfigDict(
        populate_by_name=True, frozen=True, extra="forbid", allow_inf_nan=False
    )

    number_of_buildings: int = Field(
        default=10, ge=0, alias="numberOfBuildings", description="Number of buildings to create"
    )
    tile_width: float = Field(
        default=200.0, gt=0.0, alias="tileWidth", description="Tile side length in meters"
    )
    average_width: float = Field(
        default=4.0, alias="averageWidth", description="Average building width and depth in meters"
    )
    average_height: float = Field(
        default=5.0, alias="averageHeight", description="Average building height in meters"
    )
    diffuse_type: DiffuseType = Field(
        default="white", alias="diffuseType", description="Diffuse style: white, color, textured"
    )
    translucency_type: TranslucencyType = Field(
        default="opaque",
        alias="translucencyType",
        description="Translucency style: opaque, translucent, mix",
    )
    longitude: float = Field(default=-1.31968, description="Tile center longitude in radians")
    latitude: float = Field(default=0.698874, description="Tile center latitude in radians")
    seed: Optional[int] = Field(
        default=None, description="Random seed (uses environment config if not provided)"
    )

    @model_validator(mode="after")
    def _check_footprint_fits_tile(self) -> "GenerationOptions":
        extent = max_footprint_extent(self.average_width)
        if extent > self.tile_width:
            raise ValueError(
                f"averageWidth {self.average_width} allows footprints up to {extent}m, "
                f"wider than tileWidth {self.tile_width}m"
            )
        return self


def resolve_options(
    options: Union[None, GenerationOptions, Mapping[str, Any]]
) -> GenerationOptions:
    """
    Validate generation options.

    Args:
        options: None for defaults, a mapping of option names, or GenerationOptions

    Returns:
        Validated GenerationOptions

    Raises:
        ConfigurationError: If any option is unknown or invalid
    """
    if isinstance(options, GenerationOptions):
        return options
    try:
        return GenerationOptions.model_validate(dict(options or {}))
    except ValidationError as e:
        logger.error(f"Invalid generation options: {e}")
        raise ConfigurationError(f"Invalid generation options: {e}") from e
