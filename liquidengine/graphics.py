"""Rendering building blocks: lights, post processors, the renderer and batch groups."""

from __future__ import annotations

import dataclasses
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .entity import Vertex2

Point = Tuple[float, float]
Colour = Tuple[float, float, float, float]

DEFAULT_LIGHT_POINTS = 32
_TRANSPARENT: Colour = (0.0, 0.0, 0.0, 0.0)


class Renderable(ABC):
    """Something that knows how to draw itself with a renderer."""

    @abstractmethod
    def draw(self, renderer: "Renderer") -> None:
        """Draw using the given renderer."""


class Light:
    """A point light drawn as a fan of vertices around its centre.

    The geometry is relative to the light's position: the first vertex is
    the centre, carrying the light's colour with an alpha of intensity
    times 255, followed by transparent vertices on the circle of the
    light's radius, and a final vertex that closes the fan by repeating
    the first one on the circle.
    """

    def __init__(
        self,
        position: Sequence[float] = (0.0, 0.0),
        colour: Sequence[float] = (255.0, 255.0, 255.0, 255.0),
        intensity: float = 1.0,
        radius: float = 0.0,
    ) -> None:
        self._position: Point = (float(position[0]), float(position[1]))
        r, g, b, a = colour
        self.colour: Colour = (float(r), float(g), float(b), float(a))
        self.intensity = float(intensity)
        self.radius = float(radius)
        self._geometry: List[Vertex2] = []
        self.generate(DEFAULT_LIGHT_POINTS)

    @property
    def position(self) -> Point:
        return self._position

    @property
    def geometry(self) -> Tuple[Vertex2, ...]:
        return tuple(self._geometry)

    @property
    def point_count(self) -> int:
        """Number of vertices in the fan, including centre and closing vertex."""
        return len(self._geometry)

    def update(self) -> None:
        """Rebuild the fan from the current colour, intensity and radius."""
        self.generate(self.point_count - 2)

    def generate(self, point_count: int) -> None:
        """Rebuild the fan with ``point_count`` points on the circle."""
        if point_count < 1:
            raise ValueError("a light needs at least one point on its circle")
        r, g, b, _ = self.colour
        centre = Vertex2(position=(0.0, 0.0), colour=(r, g, b, self.intensity * 255.0))
        rim = [
            Vertex2(
                position=(
                    self.radius * math.cos(2.0 * math.pi * i / point_count),
                    self.radius * math.sin(2.0 * math.pi * i / point_count),
                ),
                colour=_TRANSPARENT,
            )
            for i in range(1, point_count + 1)
        ]
        self._geometry = [centre, *rim, dataclasses.replace(rim[0])]

    def set_position(self, position: Sequence[float]) -> None:
        """Move the light and rebuild its fan with the same number of points."""
        self._position = (float(position[0]), float(position[1]))
        self.generate(self.point_count - 2)


class LightingManager(ABC):
    """Holds the lights of a scene and the ambient colour they are drawn over."""

    def __init__(self, ambient_colour: Sequence[float]) -> None:
        r, g, b, a = ambient_colour
        self.ambient_colour: Colour = (float(r), float(g), float(b), float(a))
        self._lights: List[Light] = []

    @property
    def lights(self) -> Tuple[Light, ...]:
        return tuple(self._lights)

    @property
    def light_count(self) -> int:
        return len(self._lights)

    @abstractmethod
    def draw(self, renderer: "Renderer") -> None:
        """Draw the lighting with the given renderer."""

    def insert_light(self, light: Light) -> None:
        self._lights.append(light)

    def remove_light(self, light: Light) -> None:
        """Remove a light; raises ValueError if it is not held here."""
        for index, held in enumerate(self._lights):
            if held is light:
                del self._lights[index]
                return
        raise ValueError("light is not managed by this lighting manager")


class PostProcessor:
    """A screen effect applied after drawing, described by a pair of shaders.

    ``effect``, when given, is called with the processor each time it
    processes while enabled.
    """

    def __init__(
        self,
        renderer: Optional["Renderer"] = None,
        name: str = "",
        effect: Optional[Callable[["PostProcessor"], Any]] = None,
    ) -> None:
        self.enabled = True
        self.renderer = renderer
        self.name = name
        self.vert_shader = ""
        self.frag_shader = ""
        self.effect = effect
        self.frames = 0

    def update(self) -> None:
        """Count a frame while the processor is enabled."""
        if self.enabled:
            self.frames += 1

    def process(self) -> None:
        """Apply the effect, if there is one and the processor is enabled."""
        if self.enabled and self.effect is not None:
            self.effect(self)


class Renderer:
    """Draws scenes, then lighting and post processors, each frame."""

    def __init__(self, settings: Any = None) -> None:
        self.settings = settings
        self.lighting_manager: Optional[LightingManager] = None
        self._renderables: List[Renderable] = []
        self._post_processors: List[PostProcessor] = []

    @property
    def renderables(self) -> Tuple[Renderable, ...]:
        return tuple(self._renderables)

    @property
    def post_processors(self) -> Tuple[PostProcessor, ...]:
        return tuple(self._post_processors)

    def add_renderable(self, renderable: Renderable) -> None:
        self._renderables.append(renderable)

    def remove_renderable(self, renderable: Renderable) -> None:
        """Remove every occurrence of a renderable; absent ones are ignored."""
        self._renderables = [r for r in self._renderables if r is not renderable]

    def draw(self, scene: Any) -> None:
        """Draw the lighting, then update and run each post processor in order."""
        if self.lighting_manager is not None:
            self.lighting_manager.draw(self)
        for processor in self._post_processors:
            processor.update()
            processor.process()

    def add_post_processor(self, processor: PostProcessor) -> None:
        """Attach a post processor and make this renderer its owner."""
        processor.renderer = self
        self._post_processors.append(processor)

    def remove_post_processor(self, processor: PostProcessor) -> None:
        """Remove every occurrence of a post processor; absent ones are ignored."""
        self._post_processors = [p for p in self._post_processors if p is not processor]

    def remove_post_processor_named(self, name: str) -> None:
        """Remove the first post processor with the name; raises KeyError if none."""
        for index, processor in enumerate(self._post_processors):
            if processor.name == name:
                del self._post_processors[index]
                return
        raise KeyError(name)

    def remove_all_post_processors(self) -> None:
        self._post_processors.clear()

    def get_post_processor(self, name: str) -> Optional[PostProcessor]:
        """First post processor with the name, or None."""
        return next((p for p in self._post_processors if p.name == name), None)

    def mouse_position(self) -> Point:
        """Mouse position relative to the renderer; a bare renderer has no mouse."""
        return (0.0, 0.0)


@dataclass
class BatchGroup:
    """Vertices that share an atlas, shader, blend mode and primitive type."""

    atlas_id: int
    shader_id: int
    blend_mode: int
    primitive_type: int
    vertices: List[Vertex2] = field(default_factory=list)

    def insert_vertex(self, vertex: Vertex2) -> None:
        self.vertices.append(vertex)

    def matches(
        self, atlas_id: int, shader_id: int, blend_mode: int, primitive_type: int
    ) -> bool:
        """True if a vertex with these render states belongs in this group."""
        return (
            self.atlas_id == atlas_id
            and self.shader_id == shader_id
            and self.blend_mode == blend_mode
            and self.primitive_type == primitive_type
        )