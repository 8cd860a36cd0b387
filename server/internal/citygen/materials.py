"""
Building materials and the material selection policy.

A material carries a diffuse term that is either an RGBA color with channels
in [0, 1] or a texture resource identifier. The diffuse alpha encodes opacity.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple, Union

from .config import ConfigurationError
from .seeds import RandomSequence

Color = Tuple[float, float, float, float]

WHITE = (1.0, 1.0, 1.0, 1.0)
WHITE_TRANSLUCENT = (1.0, 1.0, 1.0, 0.5)
RED = (1.0, 0.0, 0.0, 1.0)
OPAQUE_ALPHA = 1.0
TRANSLUCENT_ALPHA = 0.5
TEXTURE_URI = "data/wood_red.png"


@dataclass(frozen=True)
class Material:
    """Surface appearance of a building"""

    diffuse: Union[Color, str]

    @property
    def is_textured(self) -> bool:
        return isinstance(self.diffuse, str)

    @property
    def alpha(self) -> float:
        if self.is_textured:
            return OPAQUE_ALPHA
        return self.diffuse[3]

    @property
    def is_translucent(self) -> bool:
        return self.alpha < OPAQUE_ALPHA

    def to_dict(self) -> Dict[str, Any]:
        if self.is_textured:
            return {"diffuse": self.diffuse}
        return {"diffuse": list(self.diffuse)}


def white_opaque_material() -> Material:
    return Material(diffuse=WHITE)


def white_translucent_material() -> Material:
    return Material(diffuse=WHITE_TRANSLUCENT)


def textured_material() -> Material:
    return Material(diffuse=TEXTURE_URI)


def red_material() -> Material:
    """Marker material for the reference building"""
    return Material(diffuse=RED)


def random_color_material(rng: RandomSequence, alpha: float) -> Material:
    """Random RGB color, drawn in red, green, blue order"""
    red = rng.next()
    green = rng.next()
    blue = rng.next()
    return Material(diffuse=(red, green, blue, alpha))


def _white_mix(rng: RandomSequence) -> Material:
    if rng.next() < 0.5:
        return white_opaque_material()
    return white_translucent_material()


def _color_opaque(rng: RandomSequence) -> Material:
    return random_color_material(rng, OPAQUE_ALPHA)


def _color_translucent(rng: RandomSequence) -> Material:
    return random_color_material(rng, TRANSLUCENT_ALPHA)


def _color_mix(rng: RandomSequence) -> Material:
    alpha = TRANSLUCENT_ALPHA if rng.next() < 0.5 else OPAQUE_ALPHA
    return random_color_material(rng, alpha)


# (diffuse_type, translucency_type) -> material factory
MATERIAL_POLICY: Dict[Tuple[str, str], Callable[[RandomSequence], Material]] = {
    ("white", "opaque"): lambda rng: white_opaque_material(),
    ("white", "translucent"): lambda rng: white_translucent_material(),
    ("white", "mix"): _white_mix,
    ("color", "opaque"): _color_opaque,
    ("color", "translucent"): _color_translucent,
    ("color", "mix"): _color_mix,
    # Textures ignore translucency
    ("textured", "opaque"): lambda rng: textured_material(),
    ("textured", "translucent"): lambda rng: textured_material(),
    ("textured", "mix"): lambda rng: textured_material(),
}


def select_material(
    diffuse_type: str,
    translucency_type: str,
    rng: RandomSequence,
    reference: bool = False,
) -> Material:
    """
    Select a material for one building.

    Args:
        diffuse_type: white, color or textured
        translucency_type: opaque, translucent or mix
        rng: Random sequence for colors and mix choices
        reference: True for the reference building at index 0

    Returns:
        Material for the building. The reference building of a color/opaque
        set is always pure red and consumes no random draws.

    Raises:
        ConfigurationError: If the style pair is not in MATERIAL_POLICY
    """
    key = (diffuse_type, translucency_type)
    if key not in MATERIAL_POLICY:
        raise ConfigurationError(
            f"Unknown material style: diffuseType={diffuse_type!r}, "
            f"translucencyType={translucency_type!r}"
        )

    if reference and key == ("color", "opaque"):
        return red_material()

    return MATERIAL_POLICY[key](rng)
