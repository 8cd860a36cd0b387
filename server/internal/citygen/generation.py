"""
Building set generation.
Produces the same buildings for the same seed and options on every run.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from . import buildings
from . import config
from .seeds import RandomSequence

logger = logging.getLogger(__name__)

# Load configuration once; generation itself reads no files or variables
cfg = config.load_config()


def generate_buildings(
    options: Union[None, config.GenerationOptions, Mapping[str, Any]] = None,
    rng: Optional[RandomSequence] = None,
) -> List[buildings.Building]:
    """
    Create a set of buildings to be converted to a tile.

    Options are validated before anything is generated, and the random
    sequence is reset to the seed before the first building, so repeated
    calls return identical buildings.

    Args:
        options: None for defaults, a mapping of option names (numberOfBuildings,
            tileWidth, averageWidth, averageHeight, diffuseType, translucencyType,
            longitude, latitude, seed) or GenerationOptions
        rng: Random sequence to reuse (a new one is created if not provided)

    Returns:
        List of numberOfBuildings buildings; index 0 is the reference building
        at the tile center

    Raises:
        ConfigurationError: If the options are invalid
    """
    opts = config.resolve_options(options)

    seed = opts.seed if opts.seed is not None else cfg.seed
    if rng is None:
        rng = RandomSequence(seed)
    rng.set_seed(seed)

    logger.debug(
        f"Generating {opts.number_of_buildings} buildings (seed={seed}, "
        f"diffuse={opts.diffuse_type}, translucency={opts.translucency_type})"
    )

    return [
        buildings.generate_building(i, opts, rng)
        for i in range(opts.number_of_buildings)
    ]
