#!/usr/bin/env python3
"""
Camera viewer application entry point and pygame front end.

What this module does
- Opens a single pygame window and runs one loop that pumps pygame events into a
  camview Scene, steps the scene once per frame, and draws every drawable at the
  screen placement the scene's camera produces.
- Builds the drawables (debug grid line meshes) from a scene template.

Controls
- Left-drag: pan | Wheel: zoom about the pointer
- Ctrl+Wheel: pan horizontally | Shift+Wheel: pan vertically
- R: reset the camera | Esc: quit

Running
1) Install dependencies: `pip install -e .`
2) Run this module: `python camera_viewer.py` (add `--debug` for verbose logs,
   `--scene nested_grids.json` for another template)
"""

import argparse
import logging
import sys
from typing import Dict, Optional

import pygame

from camview.constants import BACKGROUND_COLOR, FPS, VIEW_HEIGHT, VIEW_WIDTH, WINDOW_TITLE
from camview.data_models import Transform
from camview.grid import LineMesh, build_grid
from camview.input_state import Key, MouseButton
from camview.scene import Scene
from camview.scene_loader import SceneTemplate, default_scene, list_scenes, load_scene

logger = logging.getLogger("camera_viewer")

LOG_FORMAT = "%(asctime)s | %(levelname)7s | %(name)s | %(message)s"

KEY_MAP: Dict[int, Key] = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_LCTRL: Key.LCONTROL,
    pygame.K_LSHIFT: Key.LSHIFT,
    pygame.K_r: Key.R,
}

BUTTON_MAP: Dict[int, MouseButton] = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
}


def translate_key(code: int) -> Key:
    return KEY_MAP.get(code, Key.OTHER)


def translate_button(code: int) -> MouseButton:
    return BUTTON_MAP.get(code, MouseButton.OTHER)


def build_scene(template: SceneTemplate) -> Scene:
    scene = Scene()
    for spec, transform in template.objects:
        scene.add_object(build_grid(spec), transform)
    return scene


def draw_mesh(surface, mesh: LineMesh, placement: Transform) -> None:
    """Draw a line mesh with screen = placement.pos + placement.scale * local."""
    (px, py), (sx, sy) = placement.pos, placement.scale
    for start, end, color in mesh.segments:
        a = (px + start[0] * sx, py + start[1] * sy)
        b = (px + end[0] * sx, py + end[1] * sy)
        pygame.draw.line(surface, color, a, b, mesh.width)


class PygameViewport:
    """
    Pygame loop: forwards input to the Scene and draws its placements.
    """
    def __init__(self, scene: Scene):
        self.scene = scene
        self.surface = None
        self.clock = None
        self.running = True
        # pygame has no repeat flag on KEYDOWN, so a key already held is a repeat.
        self._held_keys = set()

    def run(self):
        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)
        self.surface = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT))
        self.clock = pygame.time.Clock()
        logger.info("Viewport started (%dx%d, %d objects)", VIEW_WIDTH, VIEW_HEIGHT, len(self.scene.objects))

        try:
            while self.running:
                self.handle_events()
                if self.scene.exit_requested:
                    break
                self.scene.per_frame_update()
                self.draw()
                self.clock.tick(FPS)
        finally:
            pygame.quit()
            logger.info("Viewport closed")

    def handle_events(self):
        scene = self.scene
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.MOUSEMOTION:
                scene.on_pointer_move(*event.pos)

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button in BUTTON_MAP:  # 4/5 are legacy wheel buttons
                    scene.on_pointer_down(translate_button(event.button), *event.pos)

            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button in BUTTON_MAP:
                    scene.on_pointer_up(translate_button(event.button), *event.pos)

            elif event.type == pygame.MOUSEWHEEL:
                scene.on_wheel(event.y)

            elif event.type == pygame.KEYDOWN:
                is_repeat = event.key in self._held_keys
                self._held_keys.add(event.key)
                scene.on_key_down(translate_key(event.key), is_repeat)

            elif event.type == pygame.KEYUP:
                self._held_keys.discard(event.key)
                scene.on_key_up(translate_key(event.key))

    def draw(self):
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)
        for mesh, placement in self.scene.per_frame_render():
            draw_mesh(surf, mesh, placement)
        pygame.display.flip()


def parse_cli_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="camera_viewer", description="2D pan/zoom camera test viewport")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--scene", metavar="FILE", help="scene template file name under camview/scenes/")
    parser.add_argument("--list-scenes", action="store_true", help="print available scene templates and exit")
    return parser.parse_args(argv)


def resolve_template(file_name: Optional[str]) -> SceneTemplate:
    if not file_name:
        return default_scene()
    template = load_scene(file_name)
    if not template.objects:
        logger.warning("Scene %s has no drawable objects, using the default grid", file_name)
        return default_scene()
    return template


def main(argv=None) -> int:
    args = parse_cli_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO, format=LOG_FORMAT)

    if args.list_scenes:
        for file_name, display in list_scenes():
            print(f"{file_name}\t{display}")
        return 0

    template = resolve_template(args.scene)
    logger.info("Loading scene %r", template.name)
    PygameViewport(build_scene(template)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
