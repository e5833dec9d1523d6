"""Scenes: a camera, named layers of entities and the animators that drive them."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

from .entity import Entity, EntityState

Point = Tuple[float, float]
Region = Tuple[float, float, float, float]

DEFAULT_FRAME_TIME = 1000.0 / 60.0
_SHAKE_JITTER = 60.0


class ShakeAxis(IntEnum):
    X = 0
    Y = 1
    XY = 2


@dataclass
class _Ease:
    """Linear ease from an initial value to a target over a duration."""

    initial: float
    target: float
    duration: float
    elapsed: float = 0.0

    @property
    def finished(self) -> bool:
        return self.elapsed >= self.duration

    @property
    def value(self) -> float:
        if self.duration <= 0:
            return self.target
        progress = min(self.elapsed / self.duration, 1.0)
        return self.initial + (self.target - self.initial) * progress

    def advance(self, delta: float) -> float:
        self.elapsed += delta
        return self.value


class Camera:
    """A 2D view with a centre, dimensions, rotation and zoom.

    Position, rotation and zoom can be eased linearly over a duration in
    milliseconds, and the view can be shaken.  Each ``update`` advances
    time by ``frame_time`` milliseconds.
    """

    def __init__(
        self,
        centre: Point = (0.0, 0.0),
        dimensions: Point = (0.0, 0.0),
        frame_time: float = DEFAULT_FRAME_TIME,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.frame_time = frame_time
        self._rng = rng if rng is not None else random.Random()
        self._centre: Point = (float(centre[0]), float(centre[1]))
        self._dimensions: Point = (float(dimensions[0]), float(dimensions[1]))
        self._rotation = 0.0
        self._zoom_factor = 1.0

        self._position_ease: Optional[Tuple[_Ease, _Ease]] = None
        self._rotation_ease: Optional[_Ease] = None
        self._zoom_ease: Optional[_Ease] = None

        self._shaking = False
        self._shake_duration = 0.0
        self._shake_accumulator = 0.0
        self._shake_radius = 0.0
        self._shake_radius_begin = 0.0
        self._shake_angle = 0.0
        self._shake_axis = ShakeAxis.XY
        self._shake_offset: Point = (0.0, 0.0)

    # -- state -----------------------------------------------------------

    @property
    def centre(self) -> Point:
        return self._centre

    @property
    def dimensions(self) -> Point:
        return self._dimensions

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def zoom_factor(self) -> float:
        return self._zoom_factor

    @property
    def shaking(self) -> bool:
        return self._shaking

    @property
    def view_centre(self) -> Point:
        """The centre actually shown, with the current shake offset applied."""
        cx, cy = self._centre
        ox, oy = self._shake_offset
        if not self._shaking:
            return self._centre
        if self._shake_axis is ShakeAxis.X:
            return (cx + ox, cy)
        if self._shake_axis is ShakeAxis.Y:
            return (cx, cy + oy)
        return (cx + ox, cy + oy)

    # -- setters ---------------------------------------------------------

    def set_centre(self, position: Sequence[float]) -> None:
        self._centre = (float(position[0]), float(position[1]))

    def set_dimensions(self, dimensions: Sequence[float]) -> None:
        self._dimensions = (float(dimensions[0]), float(dimensions[1]))

    def set_rotation(self, rotation: float) -> None:
        self._rotation = float(rotation)

    def set_zoom_factor(self, zoom_factor: float) -> None:
        self._zoom_factor = float(zoom_factor)

    # -- easing ----------------------------------------------------------

    def ease_position(self, target_position: Sequence[float], duration: float) -> None:
        """Ease the centre to a target over ``duration`` milliseconds."""
        self._position_ease = (
            _Ease(self._centre[0], float(target_position[0]), duration),
            _Ease(self._centre[1], float(target_position[1]), duration),
        )

    def ease_rotation(self, target_rotation: float, duration: float) -> None:
        """Ease the rotation to a target over ``duration`` milliseconds."""
        self._rotation_ease = _Ease(self._rotation, float(target_rotation), duration)

    def ease_zoom_factor(self, target_zoom_factor: float, duration: float) -> None:
        """Ease the zoom factor to a target over ``duration`` milliseconds."""
        self._zoom_ease = _Ease(self._zoom_factor, float(target_zoom_factor), duration)

    # -- shaking ---------------------------------------------------------

    def shake(self, duration: float, radius: float, axis: ShakeAxis) -> None:
        """Shake the view for ``duration`` milliseconds within a shrinking radius."""
        self._shaking = True
        self._shake_duration = duration
        self._shake_accumulator = 0.0
        self._shake_axis = ShakeAxis(axis)
        self._shake_radius = radius
        self._shake_radius_begin = radius
        self._shake_angle = self._rng.uniform(0.0, 360.0)
        self._update_shake_offset()

    def _update_shake_offset(self) -> None:
        self._shake_offset = (
            math.sin(self._shake_angle) * self._shake_radius,
            math.cos(self._shake_angle) * self._shake_radius,
        )

    # -- update ----------------------------------------------------------

    def update(self) -> None:
        """Advance the eases and the shake by one frame."""
        delta = self.frame_time

        if self._position_ease is not None:
            ease_x, ease_y = self._position_ease
            self._centre = (ease_x.advance(delta), ease_y.advance(delta))
            if ease_x.finished and ease_y.finished:
                self._position_ease = None

        if self._rotation_ease is not None:
            self._rotation = self._rotation_ease.advance(delta)
            if self._rotation_ease.finished:
                self._rotation_ease = None

        if self._zoom_ease is not None:
            self._zoom_factor = self._zoom_ease.advance(delta)
            if self._zoom_ease.finished:
                self._zoom_ease = None

        if self._shaking and self._shake_accumulator <= self._shake_duration:
            self._shake_accumulator += delta
            sign = -1 if self._rng.randint(0, 1) == 0 else 1
            jitter = self._rng.uniform(0.0, _SHAKE_JITTER)
            progress = (
                self._shake_accumulator / self._shake_duration
                if self._shake_duration > 0
                else 1.0
            )
            self._shake_radius = self._shake_radius_begin * (1 - progress)
            self._shake_angle += 180 + jitter * sign
            self._update_shake_offset()

            if self._shake_accumulator >= self._shake_duration:
                self._shaking = False
                self._shake_offset = (0.0, 0.0)


class SpatialIndex(Protocol):
    """Spatial partitioning that can list the entities within a rectangle."""

    def query(self, rect: Region) -> List[Entity]: ...


def _to_query(region: Sequence[float]) -> Region:
    x1, y1, x2, y2 = region
    return (x1, y1, x2 - x1, y2 - y1)


class Layer:
    """An ordered collection of entities within a scene.

    Inserted entities wait in a buffer and join the layer at the start of
    its next update, when they are given the layer's scene and initialised.
    """

    def __init__(self, parent_scene: Optional["GameScene"] = None) -> None:
        self.parent_scene = parent_scene
        self.spatial_hash: Optional[SpatialIndex] = None
        self._entities: List[Entity] = []
        self._buffer: List[Entity] = []

    @property
    def entities(self) -> Tuple[Entity, ...]:
        return tuple(self._entities)

    @property
    def pending(self) -> Tuple[Entity, ...]:
        """Entities inserted but not yet taken in by an update."""
        return tuple(self._buffer)

    def update(self) -> None:
        """Take in buffered entities, update the active ones and drop the dead."""
        for entity in self._buffer:
            self._entities.append(entity)
            entity.parent_scene = self.parent_scene
            entity.initialise()
        self._buffer.clear()

        for entity in self._entities:
            if entity.state is EntityState.ACTIVE:
                entity.update_pre()
                entity.update()
                entity.update_post()

        self._entities = [e for e in self._entities if e.state is not EntityState.DEAD]

    def insert_entity(self, entity: Entity) -> None:
        """Queue one entity to join on the next update."""
        self._buffer.append(entity)

    def insert_entities(self, entities: Iterable[Entity]) -> None:
        """Queue several entities, ahead of those already waiting."""
        self._buffer[0:0] = list(entities)

    def entities_in(self, region: Sequence[float]) -> Tuple[Entity, ...]:
        """Entities within (x1, y1, x2, y2); an all-zero region means all of them.

        Without a spatial index every entity is returned.
        """
        if all(value == 0 for value in region):
            return self.entities
        if self.spatial_hash is not None:
            return tuple(self.spatial_hash.query(_to_query(region)))
        return self.entities

    def entity_at_point(
        self, x: float, y: float, region: Optional[Sequence[float]] = None
    ) -> Optional[Entity]:
        """First entity containing the point.

        With a region, only the spatial index is searched; without an index
        nothing is found.
        """
        if region is None:
            candidates: Iterable[Entity] = self._entities
        elif self.spatial_hash is not None:
            candidates = self.spatial_hash.query(_to_query(region))
        else:
            return None
        return next((e for e in candidates if e.is_point_inside(x, y)), None)

    def entity_with_uid(
        self, uid: str, region: Optional[Sequence[float]] = None
    ) -> Optional[Entity]:
        """First entity with the unique id.

        With a region the search only runs when a spatial index is set.
        """
        if region is not None and self.spatial_hash is None:
            return None
        return next((e for e in self._entities if e.uid == uid), None)


class Updatable(Protocol):
    def update(self) -> None: ...


class GameScene:
    """Container for named layers, animators and a camera."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.camera: Optional[Any] = None
        self.allow_update = True
        self.allow_update_events = True
        self.allow_renderer = True
        self.allow_post_processes = True
        self.initialised = False
        self._layers: Dict[str, Layer] = {}
        self._animators: List[Updatable] = []

    @property
    def layers(self) -> Tuple[Layer, ...]:
        return tuple(self._layers.values())

    @property
    def animators(self) -> Tuple[Updatable, ...]:
        return tuple(self._animators)

    def initialise(self) -> None:
        """Called when the scene is added to the game; claims its layers and marks it ready."""
        for layer in self._layers.values():
            layer.parent_scene = self
        self.initialised = True

    def update(self) -> None:
        """Update layers, animators and the camera, unless updating is off."""
        if not self.allow_update:
            return
        for layer in self._layers.values():
            layer.update()
        for animator in self._animators:
            animator.update()
        if self.camera is not None:
            self.camera.update()

    def insert_layer(self, name: str, layer: Layer) -> None:
        """Add a layer under a name and make this scene its parent."""
        layer.parent_scene = self
        self._layers[name] = layer

    def remove_layer(self, name: str) -> None:
        """Remove the named layer; unknown names are ignored."""
        self._layers.pop(name, None)

    def get_layer(self, name: str) -> Optional[Layer]:
        return self._layers.get(name)

    def entity_at_point(self, x: float, y: float) -> Optional[Entity]:
        """First entity found at the point, searching layers in order."""
        for layer in self._layers.values():
            entity = layer.entity_at_point(x, y)
            if entity is not None:
                return entity
        return None

    def entity_with_uid(self, uid: str) -> Optional[Entity]:
        """First entity with the unique id, searching layers in order."""
        for layer in self._layers.values():
            entity = layer.entity_with_uid(uid)
            if entity is not None:
                return entity
        return None

    def add_animator(self, animator: Updatable) -> None:
        self._animators.append(animator)

    def entities(self) -> List[Entity]:
        """All entities; each later layer's entities come before earlier ones."""
        result: List[Entity] = []
        for layer in self._layers.values():
            result[0:0] = layer.entities
        return result