"""Tests for building runtime clips from configuration."""

import logging
import math

import numpy as np
import pytest

from kfanim.animation import UnsupportedInterpolationError
from kfanim.config import (
    AnimationConfig,
    AnimationConfigManager,
    ChannelDefinition,
    ClipDefinition,
    NodeDefinition,
    TrackDefinition,
)
from kfanim.io.clip_loader import build_clip, build_node_table, load_clips


@pytest.fixture
def sample_config(project_root):
    return AnimationConfigManager(project_root).load_config("bouncing_cube/bouncing_cube_config.yaml")


class TestBuildNodeTable:
    def test_nodes_from_config(self, sample_config):
        nodes, handles = build_node_table(sample_config)
        assert len(nodes) == 2
        pendulum = nodes.resolve(handles["pendulum"]).get_transform()
        np.testing.assert_array_equal(pendulum.translation, [3, 2, 0])
        np.testing.assert_array_equal(pendulum.scale, [1, 1, 1])

    def test_non_unit_rotation_normalized(self, caplog):
        config = AnimationConfig(nodes={"cube": NodeDefinition(rotation=[0.0, 0.0, 0.0, 2.0])})
        with caplog.at_level(logging.WARNING):
            nodes, handles = build_node_table(config)
        assert nodes.resolve(handles["cube"]).get_transform().rotation.abs() == pytest.approx(1.0)
        assert "not unit length" in caplog.text


class TestBuildClip:
    def test_sample_clip_plays(self, sample_config):
        nodes, handles, clips = load_clips(sample_config)
        clip = clips["bounce"]
        assert clip.bounds() == (0.0, 1.0)
        assert len(clip.channels) == 4

        assert clip.advance(0.25) == 4
        cube = nodes.resolve(handles["cube"]).get_transform()
        np.testing.assert_allclose(cube.translation, [0.0, 1.0, 0.0])
        assert cube.rotation.y == pytest.approx(math.sin(math.pi / 8))
        np.testing.assert_allclose(cube.scale, [1.0, 1.0, 1.0])

        clip.advance(0.7)
        np.testing.assert_allclose(cube.scale, [1.2, 0.8, 1.2])

    def test_unknown_interpolation(self, nodes):
        definition = ClipDefinition(tracks=[TrackDefinition([0.0, 1.0], [[0, 0, 0], [1, 1, 1]], "SMOOTH")])
        with pytest.raises(UnsupportedInterpolationError):
            build_clip("bad", definition, nodes, {})

    def test_missing_node_handle(self, nodes):
        definition = ClipDefinition(
            tracks=[TrackDefinition([0.0, 1.0], [[0, 0, 0], [1, 1, 1]])],
            channels=[ChannelDefinition(node="ghost", path="translation", track=0)],
        )
        with pytest.raises(KeyError):
            build_clip("bad", definition, nodes, {})
