#!/usr/bin/env python3
"""
Input state trackers that turn raw pointer and key events into camera commands.

Keys and buttons are engine-independent enums; the front end maps its own
codes onto them.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple, Union

from .camera import Camera
from .vector_utils import vec_sub


class MouseButton(Enum):
    LEFT = auto()
    MIDDLE = auto()
    RIGHT = auto()
    OTHER = auto()


class Key(Enum):
    ESCAPE = auto()
    LCONTROL = auto()
    LSHIFT = auto()
    R = auto()
    OTHER = auto()


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Dragging:
    last_pos: Tuple[float, float]


DragState = Union[Idle, Dragging]


class DragTracker:
    """
    Left-button drag-to-pan.

    The pan step runs once per frame from update() and samples the latest
    pointer position, so any number of motion events between frames collapse
    into one pan.
    """

    def __init__(self):
        self.pointer_pos: Tuple[float, float] = (0.0, 0.0)
        self.state: DragState = Idle()

    @property
    def dragging(self) -> bool:
        return isinstance(self.state, Dragging)

    def move(self, x: float, y: float) -> None:
        self.pointer_pos = (x, y)

    def press(self, button: MouseButton, x: float, y: float) -> None:
        if button is not MouseButton.LEFT:
            return
        self.pointer_pos = (x, y)
        self.state = Dragging(last_pos=(x, y))

    def release(self, button: MouseButton) -> None:
        if button is MouseButton.LEFT:
            self.state = Idle()

    def update(self, camera: Camera) -> Optional[Tuple[float, float]]:
        """Pan camera by last - current pointer. Returns the delta applied, if any."""
        if not isinstance(self.state, Dragging):
            return None
        # Reversed sign: the world follows the pointer.
        dx, dy = vec_sub(self.state.last_pos, self.pointer_pos)
        self.state = Dragging(last_pos=self.pointer_pos)
        camera.pan(dx, dy)
        return (dx, dy)


@dataclass
class ModifierState:
    control_down: bool = False
    shift_down: bool = False

    def key_down(self, key: Key, is_repeat: bool = False) -> None:
        if is_repeat:
            return
        if key is Key.LCONTROL:
            self.control_down = True
        elif key is Key.LSHIFT:
            self.shift_down = True

    def key_up(self, key: Key) -> None:
        if key is Key.LCONTROL:
            self.control_down = False
        elif key is Key.LSHIFT:
            self.shift_down = False

    @property
    def any_down(self) -> bool:
        return self.control_down or self.shift_down
