"""Template values describing how particles are born and change."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, NamedTuple, Union

PARTICLE_VALUE = 0
PARTICLE_VARIANCE_MIN = 1
PARTICLE_VARIANCE_MAX = 2
PARTICLE_TARGET_VALUE = 3


class ParticleNode(NamedTuple):
    """Starting value, random variance range and target of one property."""

    value: float = 0.0
    variance_min: float = 0.0
    variance_max: float = 0.0
    target: float = 0.0


_NODE_KEYS = {
    "velocity_x": "velocityX",
    "velocity_y": "velocityY",
    "colour_r": "colourR",
    "colour_g": "colourG",
    "colour_b": "colourB",
    "colour_a": "colourA",
    "size_x": "sizeX",
    "size_y": "sizeY",
}


def _float(values: Mapping[str, Union[str, float]], key: str) -> float:
    raw = values.get(key, 0.0)
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"value for {key!r} is not a number: {raw!r}") from None


def _node(values: Mapping[str, Union[str, float]], prefix: str, with_target: bool = True) -> ParticleNode:
    return ParticleNode(
        value=_float(values, prefix + "Value"),
        variance_min=_float(values, prefix + "Min"),
        variance_max=_float(values, prefix + "Max"),
        target=_float(values, prefix + "Target") if with_target else 0.0,
    )


@dataclass(frozen=True)
class ParticleData:
    """Describes a particle: velocities, colour channels, size and life span."""

    velocity_x: ParticleNode = ParticleNode()
    velocity_y: ParticleNode = ParticleNode()
    colour_r: ParticleNode = ParticleNode()
    colour_g: ParticleNode = ParticleNode()
    colour_b: ParticleNode = ParticleNode()
    colour_a: ParticleNode = ParticleNode()
    size_x: ParticleNode = ParticleNode()
    size_y: ParticleNode = ParticleNode()
    lifespan: ParticleNode = ParticleNode()
    texture: str = ""
    easing_function: str = ""

    @classmethod
    def from_mapping(cls, values: Mapping[str, Union[str, float]]) -> "ParticleData":
        """Build from flat keys such as ``velocityXValue`` or ``lifespanMax``.

        Missing numbers count as 0.0 and missing names as an empty string.
        """
        nodes = {field: _node(values, prefix) for field, prefix in _NODE_KEYS.items()}
        return cls(
            lifespan=_node(values, "lifespan", with_target=False),
            texture=str(values.get("texture", "")),
            easing_function=str(values.get("easingFunc", "")),
            **nodes,
        )

    @classmethod
    def from_text(cls, text: str) -> "ParticleData":
        """Build from ``name value`` lines; blank lines and ``--`` comments are skipped."""
        values = {}
        for line in text.splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("--"):
                continue
            key, _, value = stripped.partition(" ")
            values[key] = value.strip()
        return cls.from_mapping(values)


DEFAULT_PARTICLE = (
    "velocityXValue 0.0\n"
    "velocityXMin -0.5\n"
    "velocityXMax 0.5\n"
    "velocityXTarget 0.0\n"
    "\n"
    "velocityYValue 0.0\n"
    "velocityYMin -0.5\n"
    "velocityYMax 0.5\n"
    "velocityYTarget 0.0\n"
    "\n"
    "colourRValue 50.0\n"
    "colourRMin 0.0\n"
    "colourRMax 0.0\n"
    "colourRTarget 255.0\n"
    "\n"
    "colourGValue 255.0\n"
    "colourGMin 0.0\n"
    "colourGMax 0.0\n"
    "colourGTarget 50.0\n"
    "\n"
    "colourBValue 50.0\n"
    "colourBMin 0.0\n"
    "colourBMax 0.0\n"
    "colourBTarget 255.0\n"
    "\n"
    "colourAValue 255.0\n"
    "colourAMin 0.0\n"
    "colourAMax 0.0\n"
    "colourATarget 0.0\n"
    "\n"
    "lifespanValue 1500.0\n"
    "lifespanMin 0.0\n"
    "lifespanMax 0.0\n"
)

DEFAULT_PARTICLE_XML = (
    '<particle name = "particle">\n'
    '<attribute name = "velocityX">\n'
    '<data name = "velocityXValue">0.0</data>\n'
    '<data name = "velocityXMin">-0.5</data>\n'
    '<data name = "velocityXMax">0.5</data>\n'
    '<data name = "velocityXTarget">0.0</data>\n'
    "</attribute>\n"
    '<attribute name = "velocityY">\n'
    '<data name = "velocityYValue">0.0</data>\n'
    '<data name = "velocityYMin">-0.5</data>\n'
    '<data name = "velocityYMax">0.5</data>\n'
    '<data name = "velocityYTarget">0.0</data>\n'
    "</attribute>\n"
    '<attribute name = "colourR">\n'
    '<data name = "colourRValue">50.0</data>\n'
    '<data name = "colourRMin">0.0</data>\n'
    '<data name = "colourRMax">0.0</data>\n'
    '<data name = "colourRTarget">255.0</data>\n'
    "</attribute>\n"
    '<attribute name = "colourG">\n'
    '<data name = "colourGValue">255.0</data>\n'
    '<data name = "colourGMin">0.0</data>\n'
    '<data name = "colourGMax">0.0</data>\n'
    '<data name = "colourGTarget">50.0</data>\n'
    "</attribute>\n"
    '<attribute name = "colourB">\n'
    '<data name = "colourBValue">50.0</data>\n'
    '<data name = "colourBMin">0.0</data>\n'
    '<data name = "colourBMax">0.0</data>\n'
    '<data name = "colourBTarget">255.0</data>\n'
    "</attribute>\n"
    '<attribute name = "colourA">\n'
    '<data name = "colourAValue">255.0</data>\n'
    '<data name = "colourAMin">0.0</data>\n'
    '<data name = "colourAMax">0.0</data>\n'
    '<data name = "colourATarget">0.0</data>\n'
    "</attribute>\n"
    '<attribute name = "lifespan">\n'
    '<data name = "lifespanValue">1500.0</data>\n'
    '<data name = "lifespanMin">0.0</data>\n'
    '<data name = "lifespanMax">0.0</data>\n'
    "</attribute>\n"
    "</particle>\n"
)