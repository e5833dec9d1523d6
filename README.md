# liquidengine

A small 2D game core that does not depend on any renderer. It provides the pieces that sit between your game logic and whatever draws the frames.

## Modules

- `liquidengine.events` has one `EventDispatcher` per event type, which you get from `dispatcher_for(event_type)`. Listeners get integer handles from 1 upwards and are called in handle order. The event records are `KeyboardEventData(key_code, key_pressed)`, `JoystickEventData(button_code, button_pressed)`, `MouseEventData(mouse_button, position_x, position_y, pressed, moved)`, `TextEventData(character)` and `WindowEventData(event_type)`, where `event_type` is a `WindowEventType`. An `EventManager` queues events given to `post()`. Its `update_events()` sends each queued event to the dispatcher for its type.
- `liquidengine.resources` has `ResourceManager`, which stores resources by name under integer ids. It provides `add`, `remove`, `get`, `get_by_name`, `resource_id` (which returns -1 for an unknown name) and `flush`. `manager_for(resource_type)` returns a shared store for each type.
- `liquidengine.particle_data` has `ParticleData`, a particle template made of `ParticleNode`s. Each node holds a value, a variance range and a target. Build a template with `ParticleData.from_text()` or `ParticleData.from_mapping()`. `DEFAULT_PARTICLE` is a ready-made template.
- `liquidengine.entity` has `Entity`, which holds:
  - a position, a size and an origin
  - a quad of `Vertex2` vertices
  - texture coordinates
  - a parent and children
  - callback hooks (`on_update`, `on_set_position`, `on_add_position`, `on_killed`)
  - script hooks (`script_create`, `script_update`, `script_kill`)
  - an `EntityState` (active, asleep or dead)
- `liquidengine.scene` has the following:
  - `GameScene` holds named `Layer`s, animators and an optional `Camera`.
  - A layer buffers inserted entities until its next `update()`. The update then initialises the buffered entities, updates the active ones and drops the dead ones.
  - The camera eases its position, rotation and zoom linearly. It can shake along a `ShakeAxis`. It advances by `frame_time` milliseconds on each update.
- `liquidengine.graphics` has the following:
  - `Renderer` draws the lighting and runs its `PostProcessor`s.
  - `Light` is a point light, stored as a fan of vertices.
  - `LightingManager` is an abstract holder of lights.
  - `Renderable` is an abstract drawable.
  - `BatchGroup` groups vertices by atlas, shader, blend mode and primitive type.
- `liquidengine.config` has the following:
  - `parse_config(text)` reads `name value` lines and skips blank lines and `--` comments.
  - `Settings` turns the parsed values into typed attributes.
  - `Bindings` maps names to key codes through a `convert` callable.
  - Both `Settings` and `Bindings` write their default text to the file if it is missing.
- `liquidengine.game_manager` has `GameManager`, available as a shared instance through `GameManager.instance()`. It keeps a deque of scenes. Each `step()` updates events, updates the front scene, draws it and applies any pending pop. `simulate()` loops until `running` is False.

## Install

```
pip install .
```

## Example

```python
from liquidengine.events import KeyboardEventData, dispatcher_for
from liquidengine.entity import Entity
from liquidengine.scene import GameScene, Layer
from liquidengine.config import Settings

keys = dispatcher_for(KeyboardEventData)
handle = keys.add_listener(lambda event: print("key", event.key_code, event.key_pressed))
keys.trigger(KeyboardEventData(key_code=22, key_pressed=True))
keys.remove_listener(handle)

scene = GameScene("level")
layer = Layer()
scene.insert_layer("world", layer)

player = Entity()
player.set_size(32, 32)
player.set_position(10, 20)
layer.insert_entity(player)

scene.update()  # buffered entities join the layer and are updated
print(scene.entity_at_point(15, 25) is player)  # True

settings = Settings()
settings.parse_string("frame_limit 30\nscreen_width 800\nscreen_height 600\n")
print(settings.frame_limit, settings.screen_width)  # 30 800
```

## What it does not do

The package does not open a window, draw pixels or read input devices. `Renderer.draw` only runs the lighting manager and the post processors, and `Renderer.mouse_position()` always returns `(0.0, 0.0)`. To produce frames and feed events into `EventManager.post()`, you have to supply a back end yourself.

The package also does not include these:

- a script interpreter: script hooks on entities are plain Python callables
- AI agents: `Entity.ai_agent` is only updated if you set it
- texture or atlas loading

## Tests

```
pip install .[test]
pytest
```