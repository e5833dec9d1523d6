from liquidengine.resources import ResourceManager, manager_for


def test_add_returns_increasing_ids_from_one():
    manager = ResourceManager()
    first = manager.add("a", object())
    second = manager.add("b", object())
    assert first == 1
    assert second == first + 1


def test_add_existing_name_returns_same_id_and_keeps_original():
    manager = ResourceManager()
    original = object()
    rid = manager.add("tex", original)
    assert manager.add("tex", object()) == rid
    assert manager.get(rid) is original
    assert len(manager) == 1


def test_get_by_name_and_id_round_trip():
    manager = ResourceManager()
    resource = {"path": "atlas.png"}
    rid = manager.add("atlas", resource)
    assert manager.resource_id("atlas") == rid
    assert manager.get_by_name("atlas") is resource


def test_unknown_name_gives_minus_one_and_none():
    manager = ResourceManager()
    assert manager.resource_id("missing") == -1
    assert manager.get_by_name("missing") is None
    assert manager.get(42) is None


def test_remove_drops_resource_and_name():
    manager = ResourceManager()
    rid = manager.add("x", "value")
    manager.remove(rid)
    assert manager.get(rid) is None
    assert manager.resource_id("x") == -1


def test_remove_keeps_others():
    manager = ResourceManager()
    keep = manager.add("keep", "k")
    drop = manager.add("drop", "d")
    manager.remove(drop)
    assert manager.get(keep) == "k"
    assert manager.resource_id("keep") == keep


def test_flush_drops_resources_but_keeps_counter():
    manager = ResourceManager()
    first = manager.add("a", 1)
    manager.flush()
    assert len(manager) == 0
    assert manager.get(first) is None
    assert manager.add("b", 2) > first


def test_manager_for_shared_per_type():
    class Texture:
        pass

    class Sound:
        pass

    assert manager_for(Texture) is manager_for(Texture)
    assert manager_for(Texture) is not manager_for(Sound)