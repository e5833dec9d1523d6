"""A small 2D game core: events, resources, particles, entities, scenes, graphics, configuration and the game loop."""

__version__ = "0.1.0"

__all__ = [
    "config",
    "entity",
    "events",
    "game_manager",
    "graphics",
    "particle_data",
    "resources",
    "scene",
]