from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple, Any
from PyQt6.QtCore import QRectF

import config
from .errors import InvalidRangeError

@dataclass(frozen=True)
class CellGeometry:
    x: float
    y: float
    width: float
    height: float
    interval: str
    z: int = 0
    is_overlay: bool = False
    frame_radius: float = 0.0

    def rect(self) -> QRectF:
        return QRectF(self.x, self.y, self.width, self.height)

    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

# Left-to-right columns by semitone step from P1: a single step fills the column,
# a pair is (upper, lower). The tritone (6) is overlaid on the P5 column.
COLUMNS: List[Tuple[int, ...]] = [
    (0,), (2, 1), (4, 3), (5,), (7,), (9, 8), (11, 10), (12,),
]
TRITONE_STEP = 6

def tritone_length(column_width: float, height: float) -> float:
    """Side of the tritone square, capped by both dimensions."""
    return min(height * config.TRITONE_HEIGHT_RATIO, column_width * config.TRITONE_WIDTH_RATIO)

def _check_range(pitch_range: Sequence[int]) -> List[int]:
    try:
        pitches = [int(p) for p in pitch_range]
    except TypeError:
        raise InvalidRangeError("pitch range must be an iterable of pitches") from None
    if len(pitches) != 13:
        raise InvalidRangeError(f"symmetric layout needs 13 pitches (P1..P8), got {len(pitches)}")
    for a, b in zip(pitches, pitches[1:]):
        if b - a != 1:
            raise InvalidRangeError(f"pitches must ascend by semitone, got {a} then {b}")
    return pitches

def layout_symmetric_octave(pitch_range: Sequence[int],
                            cell_factory: Optional[Callable[[int, CellGeometry], Any]] = None,
                            width: float = 1.0, height: float = 1.0,
                            x0: float = 0.0, y0: float = 0.0) -> List[Tuple[int, Any]]:
    """
    Place one octave (13 pitches, P1..P8 inclusive) on the symmetric keyboard.

    Returns (pitch, geometry) pairs in paint order, or (pitch, cell_factory(pitch, geometry))
    when a factory is given. The tritone diamond is always last so it paints over
    its P4/P5 neighbours.
    """
    pitches = _check_range(pitch_range)
    col_w = width / len(COLUMNS)
    names = config.INTERVAL_NAMES

    cells: List[Tuple[int, CellGeometry]] = []
    p5_x = x0
    for i, column in enumerate(COLUMNS):
        x = x0 + i * col_w
        if len(column) == 1:
            step = column[0]
            if step == 7:
                p5_x = x
            cells.append((pitches[step], CellGeometry(x, y0, col_w, height, names[step])))
        else:
            upper, lower = column
            half = height / 2.0
            cells.append((pitches[upper], CellGeometry(x, y0, col_w, half, names[upper])))
            cells.append((pitches[lower], CellGeometry(x, y0 + half, col_w, half, names[lower])))

    tt = tritone_length(col_w, height)
    cells.append((pitches[TRITONE_STEP], CellGeometry(
        p5_x - tt / 2.0, y0 + height / 2.0 - tt / 2.0, tt, tt, names[TRITONE_STEP],
        z=1, is_overlay=True, frame_radius=tt * config.CORNER_RADIUS_RATIO,
    )))

    if cell_factory is None:
        return cells
    return [(p, cell_factory(p, g)) for p, g in cells]

def tile_octaves(start: int, octaves: int, width: float = 1.0, height: float = 1.0,
                 cell_factory: Optional[Callable[[int, CellGeometry], Any]] = None) -> List[Tuple[int, Any]]:
    """Lay out consecutive octaves left to right; each octave is `width` wide and repeats the shared P8/P1 pitch."""
    cells: List[Tuple[int, CellGeometry]] = []
    for k in range(octaves):
        lo = start + 12 * k
        cells.extend(layout_symmetric_octave(range(lo, lo + 13),
                                             width=width, height=height, x0=k * width))
    # overlays of every octave paint after all regular cells (sort is stable)
    cells.sort(key=lambda pair: pair[1].z)
    if cell_factory is None:
        return cells
    return [(p, cell_factory(p, g)) for p, g in cells]
