"""
Tests for the pygame front end glue that does not need a window.

Covers:
- pygame key/button translation
- Building a Scene from a template
- Template fallback for empty scenes
- Drawing a line mesh under a screen placement
"""
import pygame
import pytest

from camera_viewer import build_scene, draw_mesh, parse_cli_args, resolve_template, translate_button, translate_key
from camview.data_models import Transform
from camview.grid import GridSpec, LineMesh
from camview.input_state import Key, MouseButton
from camview.scene_loader import SceneTemplate, default_scene


@pytest.mark.parametrize("code, key", [
    (pygame.K_ESCAPE, Key.ESCAPE),
    (pygame.K_LCTRL, Key.LCONTROL),
    (pygame.K_LSHIFT, Key.LSHIFT),
    (pygame.K_r, Key.R),
    (pygame.K_RCTRL, Key.OTHER),
    (pygame.K_a, Key.OTHER),
])
def test_translate_key(code, key):
    assert translate_key(code) is key


@pytest.mark.parametrize("code, button", [
    (1, MouseButton.LEFT),
    (2, MouseButton.MIDDLE),
    (3, MouseButton.RIGHT),
    (7, MouseButton.OTHER),
])
def test_translate_button(code, button):
    assert translate_button(code) is button


def test_build_scene_creates_one_mesh_per_object():
    template = SceneTemplate(name="t", objects=[
        (GridSpec(lines=2), Transform()),
        (GridSpec(lines=3), Transform(pos=(5.0, 5.0))),
    ])
    scene = build_scene(template)
    assert len(scene.objects) == 2
    assert len(scene.objects[1][0].segments) == 6
    assert scene.objects[1][1] == Transform(pos=(5.0, 5.0))


def test_resolve_template_defaults():
    assert resolve_template(None) == default_scene()
    # A missing file has no objects and falls back to the default grid
    assert resolve_template("does_not_exist.json") == default_scene()


def test_parse_cli_args():
    args = parse_cli_args(["--debug", "--scene", "nested_grids.json"])
    assert args.debug
    assert args.scene == "nested_grids.json"
    assert not args.list_scenes


def test_draw_mesh_applies_placement():
    surface = pygame.Surface((40, 40))
    surface.fill((255, 255, 255))
    mesh = LineMesh(segments=(((0.0, 0.0), (10.0, 0.0), (255, 0, 0)),))
    draw_mesh(surface, mesh, Transform(pos=(5.0, 20.0), scale=(2.0, 1.0)))
    # Segment maps to (5, 20) -> (25, 20)
    assert surface.get_at((15, 20))[:3] == (255, 0, 0)
    assert surface.get_at((30, 20))[:3] == (255, 255, 255)
    assert surface.get_at((15, 5))[:3] == (255, 255, 255)
