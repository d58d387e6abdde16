"""Tests for builder configuration and YAML loading."""

import pytest

from wgraph.config import BUILDER_CONFIG, BuilderConfig, load_builder_config
from wgraph.types.base import DirectMode


def test_defaults():
    config = BuilderConfig()
    assert config.num_nodes == 10
    assert config.num_edges == 15
    assert config.dimension == 2
    assert config.connected is True
    assert config.direct_mode is DirectMode.ALL_BIDIRECTIONAL
    assert config.edge_cost_limits == (0, 100)
    assert config.node_cost_limits == (0, 100)
    assert config.seed is None
    assert BUILDER_CONFIG == config


def test_direct_mode_from_string():
    assert BuilderConfig(direct_mode="mixed").direct_mode is DirectMode.MIXED
    with pytest.raises(ValueError, match="Invalid direct_mode 'sideways'"):
        BuilderConfig(direct_mode="sideways")


@pytest.mark.parametrize(
    "kwargs,match",
    [
        ({"num_nodes": -1}, "non-negative"),
        ({"dimension": -2}, "dimension"),
        ({"min_node_cost": 5, "max_node_cost": 1}, "node cost limits"),
        ({"coord_min": 1.0, "coord_max": 0.0}, "coordinate limits"),
    ],
)
def test_invalid_values(kwargs, match):
    with pytest.raises(ValueError, match=match):
        BuilderConfig(**kwargs)


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError, match="Unknown builder config keys: colour"):
        BuilderConfig.from_dict({"num_nodes": 3, "colour": "red"})


def test_from_dict():
    config = BuilderConfig.from_dict({"num_nodes": 3, "max_edge_cost": 2.5})
    assert config.num_nodes == 3
    assert config.edge_cost_limits == (0, 2.5)


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_builder_config(path) == BuilderConfig()


def test_load_builder_section(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "builder:\n"
        "  num_nodes: 4\n"
        "  num_edges: 6\n"
        "  direct_mode: all_direct\n"
        "  seed: 7\n"
    )
    config = load_builder_config(path)
    assert config.num_nodes == 4
    assert config.num_edges == 6
    assert config.direct_mode is DirectMode.ALL_DIRECT
    assert config.seed == 7


def test_load_flat_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("connected: false\nweighted_nodes: true\n")
    config = load_builder_config(path)
    assert config.connected is False
    assert config.weighted_nodes is True


def test_load_non_mapping_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError, match="must be a mapping"):
        load_builder_config(path)


def test_load_unknown_key_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("builder:\n  nodes: 4\n")
    with pytest.raises(ValueError, match="Unknown builder config keys: nodes"):
        load_builder_config(path)
