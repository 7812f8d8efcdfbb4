from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence
from PyQt6.QtGui import QColor

import config
from .colors import to_qcolor
from .errors import InvalidThemeError, InvalidIndexError

class Symbol(Enum):
    """Shape tokens. The model only picks one; ui.symbols turns it into a path."""
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    SQUARE = "square"
    DIAMOND = "diamond"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    STAR = "star"
    CROSS = "cross"
    RING = "ring"
    CAPSULE = "capsule"

@dataclass(frozen=True)
class Theme:
    """
    Four parallel 12-entry sequences indexed by interval class (0 = tonic).
    Sequences are converted to tuples and validated here, never at resolve time.
    """
    key_colors: Sequence[QColor]
    symbol_colors: Sequence[QColor]
    symbols: Sequence[Symbol]
    symbol_sizes: Sequence[float]
    tonic_outline_color: Optional[QColor] = None
    name: str = field(default="custom", compare=False)

    def __post_init__(self):
        for attr in ("key_colors", "symbol_colors", "symbols", "symbol_sizes"):
            seq = getattr(self, attr)
            try:
                n = len(seq)
            except TypeError:
                raise InvalidThemeError(f"{attr} must be a sequence, got {type(seq).__name__}") from None
            if n != 12:
                raise InvalidThemeError(f"{attr} needs 12 entries (one per interval class), got {n}")

        try:
            key_colors = tuple(to_qcolor(c) for c in self.key_colors)
            symbol_colors = tuple(to_qcolor(c) for c in self.symbol_colors)
            outline = to_qcolor(self.tonic_outline_color) if self.tonic_outline_color is not None else None
        except (TypeError, ValueError) as e:
            raise InvalidThemeError(str(e)) from e

        symbols = tuple(self.symbols)
        for s in symbols:
            if not isinstance(s, Symbol):
                raise InvalidThemeError(f"symbols must be Symbol members, got {s!r}")

        sizes = tuple(float(x) for x in self.symbol_sizes)
        for x in sizes:
            if not 0.0 < x <= 1.0:
                raise InvalidThemeError(f"symbol sizes must be in (0, 1], got {x}")

        object.__setattr__(self, "key_colors", key_colors)
        object.__setattr__(self, "symbol_colors", symbol_colors)
        object.__setattr__(self, "symbols", symbols)
        object.__setattr__(self, "symbol_sizes", sizes)
        object.__setattr__(self, "tonic_outline_color", outline)

    @staticmethod
    def _check(ic: int) -> int:
        if not 0 <= ic < 12:
            raise InvalidIndexError(f"interval class {ic} outside 0..11")
        return ic

    def key_color(self, ic: int) -> QColor:
        return QColor(self.key_colors[self._check(ic)])

    def symbol_color(self, ic: int) -> QColor:
        return QColor(self.symbol_colors[self._check(ic)])

    def symbol(self, ic: int) -> Symbol:
        return self.symbols[self._check(ic)]

    def symbol_size(self, ic: int) -> float:
        return self.symbol_sizes[self._check(ic)]

    def outline_color(self) -> QColor:
        # falls back to the perfect-fourth symbol slot
        if self.tonic_outline_color is not None:
            return QColor(self.tonic_outline_color)
        return self.symbol_color(5)


_HOMEY_SYMBOLS = [
    Symbol.CIRCLE, Symbol.TRIANGLE, Symbol.TRIANGLE, Symbol.DIAMOND, Symbol.DIAMOND, Symbol.SQUARE,
    Symbol.STAR, Symbol.SQUARE, Symbol.HEXAGON, Symbol.HEXAGON, Symbol.PENTAGON, Symbol.PENTAGON,
]
_HOMEY_SIZES = [1.0, 0.6, 0.7, 0.7, 0.8, 0.9, 0.6, 0.9, 0.6, 0.7, 0.6, 0.7]

HOMEY = Theme(config.HOMEY_KEY_COLORS, config.HOMEY_SYMBOL_COLORS,
              _HOMEY_SYMBOLS, _HOMEY_SIZES, name="homey")

PASTEL = Theme(config.PASTEL_KEY_COLORS, config.PASTEL_SYMBOL_COLORS,
               [Symbol.RING] + [Symbol.CIRCLE] * 4 + [Symbol.CAPSULE, Symbol.CROSS, Symbol.CAPSULE] + [Symbol.CIRCLE] * 4,
               [1.0] + [0.75] * 11, name="pastel")

MONO = Theme(config.MONO_KEY_COLORS, config.MONO_SYMBOL_COLORS,
             [Symbol.CIRCLE] * 12, [1.0, 0.5, 0.6, 0.6, 0.7, 0.8, 0.5, 0.8, 0.6, 0.7, 0.6, 0.7],
             tonic_outline_color="#000000", name="mono")

THEMES = {t.name: t for t in (HOMEY, PASTEL, MONO)}

def get_theme(name: str) -> Theme:
    try:
        return THEMES[name.lower()]
    except KeyError:
        raise KeyError(f"Unknown theme {name!r}; choose from {', '.join(sorted(THEMES))}") from None
