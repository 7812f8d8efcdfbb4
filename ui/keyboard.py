from __future__ import annotations
import logging
from dataclasses import replace
from typing import Callable, List, Optional
from PyQt6.QtCore import QRectF

from config import KEY_WIDTH, KEY_HEIGHT, SYMMETRIC_OCTAVE_WIDTH, SYMMETRIC_HEIGHT
from model.key_state import KeyVisualState, FormFactor
from model.symmetric_layout import CellGeometry, tile_octaves
from .key_item import KeyItem

log = logging.getLogger(__name__)

def build_symmetric_keyboard(scene, template: KeyVisualState, start_pitch: int, octaves: int = 1,
                             octave_width: float = SYMMETRIC_OCTAVE_WIDTH, height: float = SYMMETRIC_HEIGHT,
                             on_toggle: Optional[Callable[[int, bool], None]] = None) -> List[KeyItem]:
    """Tile `octaves` symmetric octaves starting at start_pitch. `template` supplies everything but the pitch."""
    base = replace(template, form_factor=FormFactor.SYMMETRIC)

    def make(pitch: int, cell: CellGeometry) -> KeyItem:
        item = KeyItem(replace(base, pitch=pitch), cell.rect(), z=cell.z,
                       frame_radius=cell.frame_radius, on_toggle=on_toggle)
        scene.addItem(item)
        return item

    items = [item for _, item in tile_octaves(start_pitch, octaves, octave_width, height, cell_factory=make)]
    log.debug("symmetric keyboard: %d keys from %d over %d octave(s)", len(items), start_pitch, octaves)
    return items

def build_row_keyboard(scene, template: KeyVisualState, start_pitch: int, num_keys: int,
                       form_factor: FormFactor = FormFactor.PIANO,
                       key_width: float = KEY_WIDTH, key_height: float = KEY_HEIGHT,
                       y: float = 0.0,
                       on_toggle: Optional[Callable[[int, bool], None]] = None) -> List[KeyItem]:
    """One equal-width cell per pitch (piano, isomorphic or guitar row). On a piano row accidentals resolve as small keys."""
    base = replace(template, form_factor=form_factor)
    items = []
    for i in range(num_keys):
        item = KeyItem(replace(base, pitch=start_pitch + i),
                       QRectF(i * key_width, y, key_width, key_height), on_toggle=on_toggle)
        scene.addItem(item)
        items.append(item)
    return items
