"""Tests for clip baking and CSV export."""

import numpy as np
import pytest

from kfanim.animation import KeyframeTrack
from kfanim.io.data_writer import bake_clip, save_baked_clip


class TestBakeClip:
    def test_columns(self, linear_clip):
        clip, _ = linear_clip
        columns, data = bake_clip(clip, [0.0, 1.0])
        assert columns == ['Time', 'cube.translation.x', 'cube.translation.y', 'cube.translation.z']
        assert data.shape == (2, 4)

    def test_values_and_inactive_times(self, linear_clip):
        clip, _ = linear_clip
        _, data = bake_clip(clip, np.array([-0.5, 0.0, 0.5, 1.5]))
        np.testing.assert_array_equal(data[:, 0], [-0.5, 0.0, 0.5, 1.5])
        np.testing.assert_allclose(data[1:3, 1:], [[0.0, 0.0, 0.0], [5.0, 0.0, 0.0]])
        assert np.isnan(data[0, 1:]).all()
        assert np.isnan(data[3, 1:]).all()

    def test_rotation_written_xyzw(self, linear_clip):
        clip, handle = linear_clip
        track = clip.add_track(KeyframeTrack([0.0, 1.0], [[0, 0, 0, 1], [0, 0, 0, 1]], "STEP"))
        clip.add_channel("rotation", track, handle)
        columns, data = bake_clip(clip, [0.5])
        assert columns[-4:] == ['cube.rotation.x', 'cube.rotation.y', 'cube.rotation.z', 'cube.rotation.w']
        np.testing.assert_allclose(data[0, -4:], [0.0, 0.0, 0.0, 1.0])

    def test_does_not_touch_nodes(self, linear_clip, nodes):
        clip, handle = linear_clip
        bake_clip(clip, [0.5])
        np.testing.assert_array_equal(nodes.resolve(handle).get_transform().translation, [0, 0, 0])


class TestSaveBakedClip:
    def test_csv_written(self, linear_clip, tmp_path):
        clip, _ = linear_clip
        path = save_baked_clip(tmp_path, clip, np.linspace(0.0, 1.0, 5), timestamp="1200")
        assert path == tmp_path / "1200_slide_5pts.csv"

        lines = path.read_text().splitlines()
        assert lines[0] == 'Time,cube.translation.x,cube.translation.y,cube.translation.z'
        assert len(lines) == 6
        data = np.loadtxt(path, delimiter=',', skiprows=1)
        np.testing.assert_allclose(data[:, 1], [0.0, 2.5, 5.0, 7.5, 10.0])

    def test_empty_times(self, linear_clip, tmp_path):
        clip, _ = linear_clip
        with pytest.raises(ValueError, match="Empty"):
            save_baked_clip(tmp_path, clip, [])

    def test_non_finite_times(self, linear_clip, tmp_path):
        clip, _ = linear_clip
        with pytest.raises(ValueError, match="finite"):
            save_baked_clip(tmp_path, clip, [0.0, np.inf])

    def test_missing_directory(self, linear_clip, tmp_path):
        clip, _ = linear_clip
        with pytest.raises(RuntimeError, match="CSV export failed"):
            save_baked_clip(tmp_path / "missing", clip, [0.0])


class TestStaleNodes:
    def test_bake_names_stale_channel_by_handle(self, linear_clip, nodes):
        clip, handle = linear_clip
        nodes.remove(handle)
        columns, data = bake_clip(clip, [0.5])
        assert columns[1] == f"{handle!r}.translation.x"
        np.testing.assert_allclose(data[0, 1:], [5.0, 0.0, 0.0])
