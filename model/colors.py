from __future__ import annotations
from PyQt6.QtGui import QColor
from PyQt6.QtCore import Qt

def to_qcolor(value) -> QColor:
    """Accept a QColor, '#rrggbb' string, (r, g, b[, a]) tuple or Qt.GlobalColor; always return a copy."""
    if isinstance(value, QColor):
        return QColor(value)
    if isinstance(value, (tuple, list)):
        return QColor(*value)
    if isinstance(value, (str, Qt.GlobalColor)):
        c = QColor(value)
        if not c.isValid():
            raise ValueError(f"Not a color: {value!r}")
        return c
    raise TypeError(f"Cannot convert {type(value).__name__} to QColor")

def _clamp(v: float) -> float:
    return min(1.0, max(0.0, v))

def adjust(color, hue: float = 0.0, saturation: float = 0.0,
           brightness: float = 0.0, opacity: float = 0.0) -> QColor:
    """
    Shift a color in HSB space and return a new QColor.
    - hue wraps around the color wheel
    - saturation, brightness and opacity clamp to 0..1
    - achromatic colors (Qt hue -1) stay achromatic
    """
    h, s, v, a = to_qcolor(color).getHsvF()
    if h < 0:
        new_h = -1.0
    else:
        new_h = (h + hue) % 1.0
    return QColor.fromHsvF(new_h, _clamp(s + saturation), _clamp(v + brightness), _clamp(a + opacity))

def brightness_of(color) -> float:
    return to_qcolor(color).valueF()
