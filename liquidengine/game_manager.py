"""The game loop controller: a stack of scenes updated and drawn every frame."""

from __future__ import annotations

import time
from collections import deque
from typing import Any, Deque, Iterable, Optional

from .scene import GameScene


class GameManager:
    """Runs the game by updating and drawing the front scene every frame.

    One shared instance is available through ``GameManager.instance()``.
    Popping a scene only marks it; it leaves at the end of the next frame,
    and only while more than one scene remains.
    """

    _instance: Optional["GameManager"] = None

    def __init__(self) -> None:
        self.bindings: Any = None
        self.settings: Any = None
        self.event_manager: Any = None
        self.renderer: Any = None
        self.suspended = False
        self.running = True
        self.delta = 0.0
        self._scenes: Deque[GameScene] = deque()
        self._pop_front = False
        self._pop_back = False
        self._last_tick: Optional[float] = None

    @classmethod
    def instance(cls) -> "GameManager":
        """The shared manager, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def scenes(self) -> tuple:
        return tuple(self._scenes)

    def execute(self) -> None:
        """Start the frame clock; call once before simulating."""
        self._last_tick = time.perf_counter()
        self.delta = 0.0

    def _tick(self) -> None:
        now = time.perf_counter()
        if self._last_tick is not None:
            self.delta = (now - self._last_tick) * 1000.0
        self._last_tick = now

    def step(self) -> None:
        """Run one frame: events, front scene update, drawing and pending pops."""
        self._tick()
        if self.suspended:
            return
        if not self._scenes:
            raise RuntimeError("no scene to simulate")

        if self.event_manager is not None:
            self.event_manager.update_events()
        front = self._scenes[0]
        front.update()
        if self.renderer is not None:
            self.renderer.draw(front)

        if self._pop_front and len(self._scenes) > 1:
            self._scenes.popleft()
            self._pop_front = False
        elif self._pop_back and len(self._scenes) > 1:
            self._scenes.pop()
            self._pop_back = False

    def simulate(self) -> None:
        """Run frames until ``running`` is set to False."""
        while self.running:
            self.step()

    def terminate(self) -> None:
        """Drop every scene."""
        self._scenes.clear()

    def add_scene_front(self, scene: GameScene) -> None:
        """Initialise a scene and put it at the front."""
        scene.initialise()
        self._scenes.appendleft(scene)

    def add_scenes_front(self, scenes: Iterable[GameScene]) -> None:
        """Add scenes to the front one by one, so the last ends up in front."""
        for scene in scenes:
            self.add_scene_front(scene)

    def add_scene_back(self, scene: GameScene) -> None:
        """Initialise a scene and put it at the back."""
        scene.initialise()
        self._scenes.append(scene)

    def add_scenes_back(self, scenes: Iterable[GameScene]) -> None:
        for scene in scenes:
            self.add_scene_back(scene)

    def pop_scene_front(self) -> Optional[GameScene]:
        """Mark the front scene to leave after the next frame and return it."""
        if not self._scenes:
            return None
        self._pop_front = True
        return self._scenes[0]

    def pop_scene_back(self) -> Optional[GameScene]:
        """Mark the back scene to leave after the next frame and return it."""
        if not self._scenes:
            return None
        self._pop_back = True
        return self._scenes[-1]

    def peek_scene_front(self) -> Optional[GameScene]:
        return self._scenes[0] if self._scenes else None

    def peek_scene_back(self) -> Optional[GameScene]:
        return self._scenes[-1] if self._scenes else None

    def peek_scene_by_name(self, name: str) -> Optional[GameScene]:
        """First scene with the given name, or None."""
        return next((scene for scene in self._scenes if scene.name == name), None)