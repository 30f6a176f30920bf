#!/usr/bin/env python3
"""
Scene template loading utilities.

Scene templates are JSON files in the package scenes/ directory that describe the
drawables to place in the world at start-up.

Schema
======
Scene JSON (camview/scenes/*.json):
{
  "name": "Human-friendly scene name",
  "objects": [
    {
      "kind": "grid",
      "lines": 10,              # optional whole number <= MAX_GRID_LINES
      "spacing": 50.0,          # optional, default GRID_SPACING
      "highlight": 5,           # optional, default GRID_HIGHLIGHT_INDEX
      "position": [0.0, 0.0],   # optional
      "scale": [1.0, 1.0]       # optional, components must be > 0
    }
  ]
}

"grid" is the only object kind. Entries of any other kind, or with malformed
fields, are skipped with a warning so one bad entry does not lose the scene.
"""
import json
import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import MAX_GRID_LINES
from .data_models import Transform
from .grid import GridSpec
from .utils import name_or, try_float, try_vec2, try_whole

logger = logging.getLogger(__name__)

SCENES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "scenes")


@dataclass
class SceneTemplate:
    name: str
    objects: List[Tuple[GridSpec, Transform]] = field(default_factory=list)


def default_scene() -> SceneTemplate:
    """One default grid at the origin."""
    return SceneTemplate(name="Debug grid", objects=[(GridSpec(), Transform())])


def _read_json(path: str) -> Optional[dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Could not read scene file %s: %s", path, exc)
        return None
    if not isinstance(data, dict):
        logger.warning("Scene file %s does not contain a JSON object", path)
        return None
    return data


def _parse_grid(entry: dict) -> Optional[Tuple[GridSpec, Transform]]:
    defaults = GridSpec()
    lines = try_whole(entry.get("lines", defaults.lines))
    spacing = try_float(entry.get("spacing", defaults.spacing))
    highlight = try_whole(entry.get("highlight", defaults.highlight))
    pos = try_vec2(entry.get("position"), (0.0, 0.0))
    scale = try_vec2(entry.get("scale"), (1.0, 1.0))
    if None in (lines, spacing, highlight, pos, scale):
        return None
    if not 0 <= lines <= MAX_GRID_LINES:
        return None
    if spacing <= 0 or scale[0] <= 0 or scale[1] <= 0:
        return None
    spec = GridSpec(lines=lines, spacing=spacing, highlight=highlight)
    return spec, Transform(pos=pos, scale=scale)


def parse_scene(data: dict, fallback_name: str) -> SceneTemplate:
    template = SceneTemplate(name=name_or(data.get("name"), fallback_name))
    objects = data.get("objects") or []
    if not isinstance(objects, list):
        logger.warning("Ignoring objects in %s: expected a list", template.name)
        objects = []
    for index, entry in enumerate(objects):
        if not isinstance(entry, dict) or entry.get("kind") != "grid":
            logger.warning("Skipping object %d in %s: unsupported entry", index, template.name)
            continue
        parsed = _parse_grid(entry)
        if parsed is None:
            logger.warning("Skipping object %d in %s: malformed grid", index, template.name)
            continue
        template.objects.append(parsed)
    return template


def list_scenes(directory: str = SCENES_DIR) -> List[Tuple[str, str]]:
    """Return list of (file_name, display_name) for available scene templates."""
    items: List[Tuple[str, str]] = []
    if not os.path.isdir(directory):
        return items
    for fn in sorted(os.listdir(directory)):
        if not fn.lower().endswith(".json"):
            continue
        data = _read_json(os.path.join(directory, fn)) or {}
        display = name_or(data.get("name"), os.path.splitext(fn)[0])
        items.append((fn, display))
    return items


def load_scene(file_name: str, directory: str = SCENES_DIR) -> SceneTemplate:
    """
    Load a scene template by file name.
    An unreadable file yields an empty template named after the file.
    """
    fallback_name = os.path.splitext(file_name)[0]
    data = _read_json(os.path.join(directory, file_name))
    if data is None:
        return SceneTemplate(name=fallback_name)
    return parse_scene(data, fallback_name)
