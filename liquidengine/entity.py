"""Entities: things in the world with a position, a quad of vertices and a tree of children."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, List, Optional, Tuple

ENTITY_TYPE_UNKNOWN = 0x0000
DEFAULT_UID = "Invalid"

Point = Tuple[float, float]
Colour = Tuple[float, float, float, float]


@dataclass
class Vertex2:
    """A 2D vertex with a position, a texture coordinate and an RGBA colour."""

    position: Point = (0.0, 0.0)
    tex_coord: Point = (0.0, 0.0)
    colour: Colour = (255.0, 255.0, 255.0, 255.0)


class EntityState(IntEnum):
    ACTIVE = 0
    SLEEP = 1
    DEAD = 2


class PrimitiveType(IntEnum):
    QUAD = 0
    LINES = 1


class Entity:
    """Something in the world, not necessarily visible.

    Behaviour can be attached through plain callables:

    * ``on_update(entity)`` runs on every update,
    * ``on_set_position(x, y)`` and ``on_add_position(x, y)`` run after the
      position changes, with the new position,
    * ``on_killed()`` runs when the entity is killed,
    * ``script_create()``, ``script_update()`` and ``script_kill()`` are
      script hooks run on initialise, update and kill respectively.
    """

    def __init__(self) -> None:
        self.texture_name = ""
        self.atlas_id = -1
        self.shader_id = -1
        self.blend_mode = 0
        self.primitive_type = PrimitiveType.QUAD

        self.on_update: Optional[Callable[["Entity"], Any]] = None
        self.on_set_position: Optional[Callable[[float, float], Any]] = None
        self.on_add_position: Optional[Callable[[float, float], Any]] = None
        self.on_killed: Optional[Callable[[], Any]] = None

        self.script_create: Optional[Callable[[], Any]] = None
        self.script_update: Optional[Callable[[], Any]] = None
        self.script_kill: Optional[Callable[[], Any]] = None

        self.entity_type = ENTITY_TYPE_UNKNOWN
        self.uid = DEFAULT_UID
        self.position_x = 0.0
        self.position_y = 0.0
        self.origin_x = 0.5
        self.origin_y = 0.5
        self.width = 0.0
        self.height = 0.0
        self.parent_scene: Any = None
        self.ai_agent: Any = None
        self.frame_events: List[int] = []

        self._state = EntityState.ACTIVE
        self._parent: Optional[Entity] = None
        self._children: List[Entity] = []
        self.vertices: List[Vertex2] = [Vertex2() for _ in range(4)]

    # -- lifecycle -----------------------------------------------------

    def initialise(self) -> None:
        """Called when the entity is actually placed in a scene."""
        if self.script_create is not None:
            self.script_create()

    def update_pre(self) -> None:
        """Step run before the update proper; clears the previous frame's events."""
        self.frame_events.clear()

    def update(self) -> None:
        """Run the update callback and the update script hook."""
        if self.on_update is not None:
            self.on_update(self)
        if self.script_update is not None:
            self.script_update()

    def update_post(self) -> None:
        """Step run after the update proper; updates the AI agent if any."""
        if self.ai_agent is not None:
            self.ai_agent.update()

    # -- geometry ------------------------------------------------------

    def set_position(self, x: float, y: float) -> None:
        """Move to (x, y), rebuild the quad around the origin and move the children."""
        self.position_x = x
        self.position_y = y

        v0, v1, v2, v3 = self.vertices[:4]
        w = v1.tex_coord[0] - v0.tex_coord[0]
        h = v2.tex_coord[1] - v1.tex_coord[1]
        left = x - self.origin_x * w
        top = y - self.origin_y * h

        v0.position = (left, top)
        v1.position = (left + w, top)
        v2.position = (left + w, top + h)
        v3.position = (left, top + h)

        for child in self._children:
            child.set_position(x, y)

        if self.on_set_position is not None:
            self.on_set_position(self.position_x, self.position_y)

    def add_position(self, x: float, y: float) -> None:
        """Shift by (x, y), moving the quad with it, and move the children."""
        self.position_x += x
        self.position_y += y

        for vertex in self.vertices[:4]:
            px, py = vertex.position
            vertex.position = (px + x, py + y)

        for child in self._children:
            child.set_position(x, y)

        if self.on_add_position is not None:
            self.on_add_position(self.position_x, self.position_y)

    def set_size(self, w: float, h: float) -> None:
        """Set the width and height, then re-place the entity where it is."""
        self.width = w
        self.height = h
        self.set_position(self.position_x, self.position_y)

    def set_tex_coords(self, x: float, y: float, w: float, h: float) -> None:
        """Map the quad onto the texture rectangle (x, y, w, h)."""
        v0, v1, v2, v3 = self.vertices[:4]
        v0.tex_coord = (x, y)
        v1.tex_coord = (x + w, y)
        v2.tex_coord = (x + w, y + h)
        v3.tex_coord = (x, y + h)

    def is_point_inside(self, x: float, y: float) -> bool:
        """Point against the axis-aligned box at the position with width and height."""
        return (
            self.position_x <= x <= self.position_x + self.width
            and self.position_y <= y <= self.position_y + self.height
        )

    # -- state ---------------------------------------------------------

    @property
    def state(self) -> EntityState:
        return self._state

    def sleep(self) -> None:
        """Put the entity to sleep unless it is dead."""
        if self._state is not EntityState.DEAD:
            self._state = EntityState.SLEEP

    def wake(self) -> None:
        """Make the entity active again unless it is dead."""
        if self._state is not EntityState.DEAD:
            self._state = EntityState.ACTIVE

    def kill(self) -> None:
        """Mark the entity dead and run the kill callback and script hook."""
        self._state = EntityState.DEAD
        if self.on_killed is not None:
            self.on_killed()
        if self.script_kill is not None:
            self.script_kill()

    # -- hierarchy -----------------------------------------------------

    @property
    def parent(self) -> Optional["Entity"]:
        return self._parent

    @property
    def children(self) -> Tuple["Entity", ...]:
        return tuple(self._children)

    def set_parent_entity(self, entity: Optional["Entity"]) -> None:
        """Attach to a parent, or detach from the current one when given None."""
        if entity is None:
            if self._parent is not None:
                self._parent._remove_child(self)
            self._parent = None
            return
        self._parent = entity
        entity._add_child(self)

    def _add_child(self, child: "Entity") -> None:
        self._children.append(child)
        child.set_position(
            child.position_x + self.position_x,
            child.position_y + self.position_y,
        )

    def _remove_child(self, child: "Entity") -> None:
        self._children = [c for c in self._children if c is not child]

    # -- vertices ------------------------------------------------------

    def add_vertex(self, vertex: Vertex2) -> None:
        """Append a vertex for rendering."""
        self.vertices.append(vertex)

    def remove_vertex(self, index: int) -> Vertex2:
        """Remove and return the vertex at an index; raises IndexError if there is none."""
        return self.vertices.pop(index)

    def clear_vertices(self) -> None:
        """Drop all vertices."""
        self.vertices.clear()

    @property
    def vertices_count(self) -> int:
        return len(self.vertices)