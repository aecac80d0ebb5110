"""Shared fixtures for the kfanim test suite."""

import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use('Agg')

# Allow running the tests from a source checkout without installing.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from kfanim.animation import Clip, KeyframeTrack  # noqa: E402
from kfanim.scene import NodeTable  # noqa: E402


@pytest.fixture
def project_root():
    return PROJECT_ROOT


@pytest.fixture
def nodes():
    return NodeTable()


@pytest.fixture
def linear_clip(nodes):
    """The 0 -> (10, 0, 0) over one second translation clip."""
    clip = Clip("slide", nodes)
    handle = nodes.add("cube")
    track = clip.add_track(KeyframeTrack([0.0, 1.0], [[0.0, 0.0, 0.0], [10.0, 0.0, 0.0]], "LINEAR"))
    clip.add_channel("translation", track, handle)
    return clip, handle
