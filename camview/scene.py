#!/usr/bin/env python3
"""
Scene context: the single owner of the camera, the input trackers and the
drawable objects.

What this module does
- Receives engine-independent input callbacks (pointer, wheel, keys) from the
  front end and turns them into camera pans and zooms.
- Once per frame, steps the drag tracker and produces a screen placement for
  every drawable.

Drawables are opaque handles. The scene never looks inside them; it only pairs
each one with a world Transform and hands back the camera-projected Transform
at render time.

Threading
- Everything here runs on the front end's loop thread. There is no locking.
"""
import logging
from typing import Any, List, Optional, Tuple

from .camera import Camera
from .constants import WHEEL_PAN_STEP, WHEEL_ZOOM_IN, WHEEL_ZOOM_OUT
from .data_models import Transform, ZoomFactor
from .input_state import DragTracker, Key, ModifierState, MouseButton

logger = logging.getLogger(__name__)

ZOOM_OUT = ZoomFactor.uniform(WHEEL_ZOOM_OUT)
ZOOM_IN = ZoomFactor.uniform(WHEEL_ZOOM_IN)


class Scene:
    """
    Owns the camera, a DragTracker, a ModifierState and the list of
    (handle, Transform) pairs to draw.

    The front end must check `exit_requested` after delivering key events;
    the scene only records the request.
    """

    def __init__(self, camera: Optional[Camera] = None):
        self.camera = camera if camera is not None else Camera()
        self.drag = DragTracker()
        self.modifiers = ModifierState()
        self.objects: List[Tuple[Any, Transform]] = []
        self.exit_requested = False

    def add_object(self, handle: Any, transform: Optional[Transform] = None) -> None:
        self.objects.append((handle, transform if transform is not None else Transform()))

    # ------------------------------------------------------------------
    # Input callbacks
    # ------------------------------------------------------------------

    def on_pointer_move(self, x: float, y: float) -> None:
        self.drag.move(x, y)

    def on_pointer_down(self, button: MouseButton, x: float, y: float) -> None:
        self.drag.press(button, x, y)

    def on_pointer_up(self, button: MouseButton, x: float, y: float) -> None:
        self.drag.release(button)

    def on_wheel(self, delta_y: float) -> None:
        """
        Control pans horizontally, shift pans vertically (both apply if both
        are held). With no modifier the wheel zooms about the pointer.
        """
        step = WHEEL_PAN_STEP if delta_y < 0 else -WHEEL_PAN_STEP
        if self.modifiers.any_down:
            if self.modifiers.control_down:
                self.camera.pan(step, 0.0)
            if self.modifiers.shift_down:
                self.camera.pan(0.0, step)
            return

        factor = ZOOM_OUT if delta_y < 0 else ZOOM_IN
        self.camera.zoom(factor, self.drag.pointer_pos)

    def on_key_down(self, key: Key, is_repeat: bool = False) -> None:
        # Escape is honoured even for repeats.
        if key is Key.ESCAPE:
            logger.debug("Exit requested")
            self.exit_requested = True
        if is_repeat:
            return
        self.modifiers.key_down(key)
        if key is Key.R:
            logger.debug("Camera reset from %r", self.camera)
            self.camera.reset()

    def on_key_up(self, key: Key) -> None:
        self.modifiers.key_up(key)

    # ------------------------------------------------------------------
    # Per-frame
    # ------------------------------------------------------------------

    def per_frame_update(self) -> None:
        self.drag.update(self.camera)

    def per_frame_render(self) -> List[Tuple[Any, Transform]]:
        return [(handle, self.camera.transform(t)) for handle, t in self.objects]
