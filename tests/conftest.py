"""
Shared fixtures for camview tests.

Provides fresh cameras and scenes, plus a scene-template directory on disk.
"""
import json
import os
import sys

import pytest

# Ensure the repository root is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


SAMPLE_SCENE = {
    "name": "Two grids",
    "objects": [
        {"kind": "grid", "lines": 4, "spacing": 25, "highlight": 2},
        {"kind": "grid", "position": [100, 50], "scale": [2, 0.5]},
    ],
}


@pytest.fixture
def camera():
    """Camera at identity"""
    from camview.camera import Camera
    return Camera()


@pytest.fixture
def scene():
    """Empty scene with a default camera"""
    from camview.scene import Scene
    return Scene()


@pytest.fixture
def scenes_dir(tmp_path):
    """Directory holding one valid and one broken scene template"""
    (tmp_path / "two_grids.json").write_text(json.dumps(SAMPLE_SCENE), encoding="utf-8")
    (tmp_path / "broken.json").write_text("{ not json", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    return tmp_path
