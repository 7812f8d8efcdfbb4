from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
from PyQt6.QtGui import QColor

import config
from .colors import adjust, to_qcolor
from .key_state import KeyVisualState, Viewpoint, FormFactor
from .pitch_relation import interval_class, is_natural_note, note_label
from .theme import Symbol

# interval classes that get two stacked symbols on the symmetric keyboard
SPLIT_INTERVALS = (0, 5, 7)
TRITONE = 6

@dataclass(frozen=True)
class KeyGeometry:
    corner_radius: float
    border_width: float
    inset_top: float
    inset_side: float
    extend_top: float   # key shape starts this far above the cell; top corners get clipped
    font_size: float
    is_small: bool

@dataclass(frozen=True)
class ResolvedKeyAttributes:
    key_color: QColor
    symbol_color: QColor
    symbol: Symbol
    symbol_scale: float
    symbol_length: float
    text: str
    text_color: QColor
    border_color: Optional[QColor]
    is_outlined: bool
    rotation_degrees: float
    symbol_offsets: Tuple[float, ...]
    door_offsets: Tuple[float, ...]
    door_width: float
    door_height: float
    door_color: QColor
    geometry: KeyGeometry

    @property
    def has_door(self) -> bool:
        return bool(self.door_offsets)

    @property
    def is_split(self) -> bool:
        return len(self.symbol_offsets) == 2


def _is_small(state: KeyVisualState, natural: bool) -> bool:
    return state.form_factor == FormFactor.PIANO and not natural

def _key_color(state: KeyVisualState, ic: int, natural: bool, small: bool) -> QColor:
    if state.viewpoint == Viewpoint.DIATONIC:
        base = state.white_key_color if natural else state.black_key_color
        if not state.activated:
            return to_qcolor(base)
        if state.pressed_color is not None:
            return to_qcolor(state.pressed_color)
        # naturals darken, accidentals lighten: the press shows on either luminance
        delta = config.PRESSED_DELTA_NATURAL if natural else config.PRESSED_DELTA_ACCIDENTAL
        return adjust(base, brightness=delta)

    theme = state.theme
    if state.subtle:
        if state.activated:
            return theme.symbol_color(ic)
        if state.form_factor == FormFactor.PIANO:
            bias = -config.SUBTLE_BIAS if small else config.SUBTLE_BIAS
            return adjust(theme.key_color(ic), brightness=bias)
        return theme.key_color(ic)

    if state.activated:
        return adjust(theme.key_color(ic), brightness=config.INTERVALLIC_PRESSED_DELTA)
    return theme.key_color(ic)

def _symbol_color(state: KeyVisualState, ic: int) -> QColor:
    theme = state.theme
    if state.subtle:
        # always the opposite slot of the key fill
        swap = state.activated != (state.viewpoint == Viewpoint.DIATONIC)
        return theme.key_color(ic) if swap else theme.symbol_color(ic)
    delta = config.SYMBOL_ACTIVE_DELTA if state.activated else config.SYMBOL_IDLE_DELTA
    return adjust(theme.symbol_color(ic), brightness=delta)

def _border_color(state: KeyVisualState, ic: int) -> Optional[QColor]:
    if state.viewpoint != Viewpoint.INTERVALLIC or ic != 0:
        return None
    color = state.theme.outline_color()
    if state.activated:
        return adjust(color, brightness=config.OUTLINE_ACTIVE_DELTA)
    return color

def key_geometry(state: KeyVisualState, small: bool) -> KeyGeometry:
    w, h = state.cell_width, state.cell_height
    min_dim = min(w, h)
    radius = 0.0 if state.form_factor == FormFactor.GUITAR else min_dim * config.CORNER_RADIUS_RATIO
    flat = state.flat_top or small
    return KeyGeometry(
        corner_radius=radius,
        border_width=0.5 if small else 1.0,
        inset_top=0.0,
        inset_side=w * config.SMALL_KEY_SIDE_INSET if small else 0.0,
        extend_top=radius if flat else 0.0,
        font_size=min_dim * config.FONT_SIZE_RATIO,
        is_small=small,
    )

def _symbol_offsets(state: KeyVisualState, ic: int, small: bool, length: float) -> Tuple[float, ...]:
    if state.form_factor == FormFactor.SYMMETRIC and ic in SPLIT_INTERVALS:
        d = state.cell_height * config.SPLIT_SYMBOL_SPREAD + 0.5 * length
        return (d, -d)
    if state.form_factor == FormFactor.PIANO:
        drop = config.SMALL_KEY_SYMBOL_DROP if small else config.NATURAL_KEY_SYMBOL_DROP
        # negative y = toward the top of the cell
        return (-state.cell_height * drop,)
    return (0.0,)

def resolve_key_attributes(state: KeyVisualState) -> ResolvedKeyAttributes:
    """
    Resolve every visual attribute of one key. Pure: no caching, no globals,
    the same state always gives equal attributes.
    """
    ic = interval_class(state.pitch, state.tonic)
    natural = is_natural_note(state.pitch)
    small = _is_small(state, natural)
    theme = state.theme

    scale = theme.symbol_size(ic) * (config.SMALL_KEY_SYMBOL_SCALE if small else 1.0)
    length = state.cell_width / config.GOLDEN_RATIO ** 3 * scale
    offsets = _symbol_offsets(state, ic, small, length)

    key_color = _key_color(state, ic, natural, small)
    border = _border_color(state, ic)

    door_h = length * config.DOOR_HEIGHT_RATIO
    door_w = length * config.DOOR_WIDTH_RATIO
    if state.pitch == state.tonic:
        doors = tuple(o + (length - door_h) * 0.5 for o in offsets)
    else:
        doors = ()

    rotation = 45.0 if state.form_factor == FormFactor.SYMMETRIC and ic == TRITONE else 0.0
    text = state.text if state.text is not None else note_label(state.pitch)
    text_color = to_qcolor(state.black_key_color if natural else state.white_key_color)

    return ResolvedKeyAttributes(
        key_color=key_color,
        symbol_color=_symbol_color(state, ic),
        symbol=theme.symbol(ic),
        symbol_scale=scale,
        symbol_length=length,
        text=text,
        text_color=text_color,
        border_color=border,
        is_outlined=border is not None,
        rotation_degrees=rotation,
        symbol_offsets=offsets,
        door_offsets=doors,
        door_width=door_w,
        door_height=door_h,
        door_color=QColor(key_color),
        geometry=key_geometry(state, small),
    )

resolve = resolve_key_attributes
