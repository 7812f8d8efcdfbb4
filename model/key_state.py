from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from PyQt6.QtGui import QColor

import config
from .theme import Theme, HOMEY

class Viewpoint(Enum):
    DIATONIC = "diatonic"        # white/black by note spelling
    INTERVALLIC = "intervallic"  # colored by interval class from the tonic

class FormFactor(Enum):
    ISOMORPHIC = "isomorphic"
    SYMMETRIC = "symmetric"
    PIANO = "piano"
    GUITAR = "guitar"

@dataclass(frozen=True)
class KeyVisualState:
    """
    Everything one key needs for a render pass. All defaults live here:

    tonic                   config.DEFAULT_TONIC (middle C)
    is_activated            False (local press)
    is_activated_externally False (remote / MIDI driven)
    viewpoint               DIATONIC
    form_factor             PIANO
    theme                   HOMEY
    subtle                  False
    pressed_color           None -> brightness feedback instead of an override
    white_key_color         config.WHITE_KEY_COLOR
    black_key_color         config.BLACK_KEY_COLOR
    text                    None -> 'C4'-style label on C pitches
    cell_width/cell_height  1.0 -> offsets come back as fractions of the cell
    flat_top                False
    """
    pitch: int
    tonic: int = config.DEFAULT_TONIC
    is_activated: bool = False
    is_activated_externally: bool = False
    viewpoint: Viewpoint = Viewpoint.DIATONIC
    form_factor: FormFactor = FormFactor.PIANO
    theme: Theme = HOMEY
    subtle: bool = False
    pressed_color: Optional[QColor] = None
    white_key_color: QColor = field(default_factory=lambda: QColor(config.WHITE_KEY_COLOR))
    black_key_color: QColor = field(default_factory=lambda: QColor(config.BLACK_KEY_COLOR))
    text: Optional[str] = None
    cell_width: float = 1.0
    cell_height: float = 1.0
    flat_top: bool = False

    @property
    def activated(self) -> bool:
        # either source lights the key; they do not stack
        return self.is_activated or self.is_activated_externally
