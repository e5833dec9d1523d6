import pytest

from liquidengine.entity import (
    DEFAULT_UID,
    ENTITY_TYPE_UNKNOWN,
    Entity,
    EntityState,
    PrimitiveType,
    Vertex2,
)


def test_defaults():
    entity = Entity()
    assert entity.state is EntityState.ACTIVE
    assert entity.entity_type == ENTITY_TYPE_UNKNOWN
    assert entity.uid == DEFAULT_UID == "Invalid"
    assert (entity.position_x, entity.position_y) == (0.0, 0.0)
    assert (entity.origin_x, entity.origin_y) == (0.5, 0.5)
    assert entity.vertices_count == 4
    assert entity.atlas_id == -1
    assert entity.shader_id == -1
    assert entity.blend_mode == 0
    assert entity.primitive_type is PrimitiveType.QUAD
    assert entity.parent is None
    assert entity.children == ()


def test_vertices_are_distinct_objects():
    entity = Entity()
    ids = {id(v) for v in entity.vertices}
    assert len(ids) == 4


def test_set_tex_coords_builds_rectangle():
    entity = Entity()
    entity.set_tex_coords(2.0, 3.0, 10.0, 20.0)
    coords = [v.tex_coord for v in entity.vertices]
    assert coords == [(2.0, 3.0), (12.0, 3.0), (12.0, 23.0), (2.0, 23.0)]


def test_set_position_centres_quad_on_origin():
    entity = Entity()
    entity.set_tex_coords(0.0, 0.0, 10.0, 20.0)
    entity.set_position(100.0, 50.0)
    xs = [v.position[0] for v in entity.vertices]
    ys = [v.position[1] for v in entity.vertices]
    assert max(xs) - min(xs) == 10.0
    assert max(ys) - min(ys) == 20.0
    assert (min(xs) + max(xs)) / 2 == 100.0
    assert (min(ys) + max(ys)) / 2 == 50.0
    assert (entity.position_x, entity.position_y) == (100.0, 50.0)


def test_add_position_shifts_vertices():
    entity = Entity()
    entity.set_tex_coords(0.0, 0.0, 4.0, 4.0)
    entity.set_position(10.0, 10.0)
    before = [v.position for v in entity.vertices]
    entity.add_position(3.0, -2.0)
    after = [v.position for v in entity.vertices]
    assert [(bx + 3.0, by - 2.0) for bx, by in before] == after
    assert (entity.position_x, entity.position_y) == (13.0, 8.0)


def test_position_callbacks_receive_new_position():
    entity = Entity()
    seen = []
    entity.on_set_position = lambda x, y: seen.append(("set", x, y))
    entity.on_add_position = lambda x, y: seen.append(("add", x, y))
    entity.set_position(1.0, 2.0)
    entity.add_position(1.0, 1.0)
    assert seen == [("set", 1.0, 2.0), ("add", 2.0, 3.0)]


def test_set_size_keeps_position():
    entity = Entity()
    entity.set_position(5.0, 6.0)
    entity.set_size(7.0, 8.0)
    assert (entity.width, entity.height) == (7.0, 8.0)
    assert (entity.position_x, entity.position_y) == (5.0, 6.0)


@pytest.mark.parametrize(
    "point, inside",
    [((0.0, 0.0), True), ((10.0, 5.0), True), ((5.0, 2.5), True),
     ((10.1, 5.0), False), ((-0.1, 0.0), False), ((5.0, 5.1), False)],
)
def test_is_point_inside(point, inside):
    entity = Entity()
    entity.set_size(10.0, 5.0)
    assert entity.is_point_inside(*point) is inside


def test_sleep_wake_kill():
    entity = Entity()
    entity.sleep()
    assert entity.state is EntityState.SLEEP
    entity.wake()
    assert entity.state is EntityState.ACTIVE
    entity.kill()
    assert entity.state is EntityState.DEAD
    entity.wake()
    assert entity.state is EntityState.DEAD
    entity.sleep()
    assert entity.state is EntityState.DEAD


def test_kill_runs_callback_and_script():
    entity = Entity()
    calls = []
    entity.on_killed = lambda: calls.append("callback")
    entity.script_kill = lambda: calls.append("script")
    entity.kill()
    assert calls == ["callback", "script"]


def test_update_runs_callback_then_script():
    entity = Entity()
    calls = []
    entity.on_update = lambda e: calls.append(e)
    entity.script_update = lambda: calls.append("script")
    entity.update()
    assert calls == [entity, "script"]


def test_initialise_runs_create_script():
    entity = Entity()
    calls = []
    entity.script_create = lambda: calls.append("create")
    entity.initialise()
    assert calls == ["create"]


def test_update_post_updates_agent():
    class Agent:
        def __init__(self):
            self.updates = 0

        def update(self):
            self.updates += 1

    entity = Entity()
    entity.ai_agent = Agent()
    entity.update_post()
    entity.update_post()
    assert entity.ai_agent.updates == 2


def test_set_parent_adds_child_and_offsets_position():
    parent = Entity()
    parent.set_position(10.0, 20.0)
    child = Entity()
    child.set_position(1.0, 2.0)
    child.set_parent_entity(parent)
    assert child.parent is parent
    assert parent.children == (child,)
    assert (child.position_x, child.position_y) == (11.0, 22.0)


def test_parent_set_position_moves_children():
    parent = Entity()
    child = Entity()
    child.set_parent_entity(parent)
    parent.set_position(4.0, 5.0)
    assert (child.position_x, child.position_y) == (4.0, 5.0)


def test_detach_from_parent():
    parent = Entity()
    child = Entity()
    child.set_parent_entity(parent)
    child.set_parent_entity(None)
    assert child.parent is None
    assert parent.children == ()


def test_detach_without_parent_is_harmless():
    entity = Entity()
    entity.set_parent_entity(None)
    assert entity.parent is None


def test_add_and_remove_vertex():
    entity = Entity()
    extra = Vertex2(position=(1.0, 1.0))
    entity.add_vertex(extra)
    assert entity.vertices_count == 5
    assert entity.vertices[-1] is extra
    entity.remove_vertex(4)
    assert entity.vertices_count == 4
    assert extra not in entity.vertices


def test_remove_vertex_out_of_range():
    entity = Entity()
    with pytest.raises(IndexError):
        entity.remove_vertex(10)


def test_clear_vertices():
    entity = Entity()
    entity.clear_vertices()
    assert entity.vertices_count == 0
    assert entity.vertices == []