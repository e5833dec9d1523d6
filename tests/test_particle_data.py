import pytest

from liquidengine.particle_data import (
    DEFAULT_PARTICLE,
    PARTICLE_TARGET_VALUE,
    PARTICLE_VALUE,
    PARTICLE_VARIANCE_MAX,
    PARTICLE_VARIANCE_MIN,
    ParticleData,
    ParticleNode,
)


def test_default_particle_values():
    data = ParticleData.from_text(DEFAULT_PARTICLE)
    assert data.velocity_x == ParticleNode(0.0, -0.5, 0.5, 0.0)
    assert data.colour_g == ParticleNode(255.0, 0.0, 0.0, 50.0)
    assert data.lifespan.value == 1500.0


def test_node_indices_match_fields():
    node = ParticleNode(1.0, 2.0, 3.0, 4.0)
    assert node[PARTICLE_VALUE] == node.value
    assert node[PARTICLE_VARIANCE_MIN] == node.variance_min
    assert node[PARTICLE_VARIANCE_MAX] == node.variance_max
    assert node[PARTICLE_TARGET_VALUE] == node.target


def test_from_mapping_reads_every_field():
    values = {
        "sizeXValue": 3.0,
        "sizeXMin": -1.0,
        "sizeXMax": 1.0,
        "sizeXTarget": 8.0,
        "texture": "spark",
        "easingFunc": "quadratic",
    }
    data = ParticleData.from_mapping(values)
    assert data.size_x == ParticleNode(3.0, -1.0, 1.0, 8.0)
    assert data.texture == "spark"
    assert data.easing_function == "quadratic"


def test_missing_values_default_to_zero_and_empty():
    data = ParticleData.from_mapping({})
    assert data.colour_a == ParticleNode(0.0, 0.0, 0.0, 0.0)
    assert data.texture == ""


def test_lifespan_target_ignored():
    data = ParticleData.from_mapping({"lifespanTarget": "99"})
    assert data.lifespan.target == 0.0


def test_comments_and_blank_lines_skipped():
    text = "-- a comment\n\ncolourRValue 50.0\n"
    assert ParticleData.from_text(text).colour_r.value == 50.0


def test_text_and_mapping_agree():
    from_text = ParticleData.from_text("velocityYMin -0.5\nvelocityYMax 0.5\n")
    from_map = ParticleData.from_mapping({"velocityYMin": "-0.5", "velocityYMax": "0.5"})
    assert from_text == from_map


def test_bad_number_raises():
    with pytest.raises(ValueError):
        ParticleData.from_text("colourBValue blue\n")