from __future__ import annotations
import math
from PyQt6.QtGui import QPainterPath, QPolygonF
from PyQt6.QtCore import Qt, QPointF, QRectF

from model.theme import Symbol

def _polygon(n: int, r: float, start_deg: float = -90.0) -> QPolygonF:
    pts = []
    for i in range(n):
        a = math.radians(start_deg + i * 360.0 / n)
        pts.append(QPointF(r * math.cos(a), r * math.sin(a)))
    return QPolygonF(pts)

def _star(r: float, points: int = 5, inner: float = 0.45) -> QPolygonF:
    pts = []
    for i in range(points * 2):
        rr = r if i % 2 == 0 else r * inner
        a = math.radians(-90.0 + i * 180.0 / points)
        pts.append(QPointF(rr * math.cos(a), rr * math.sin(a)))
    return QPolygonF(pts)

def symbol_path(symbol: Symbol, length: float) -> QPainterPath:
    """Closed path for a symbol token, fitted in a length x length box centred on (0, 0)."""
    r = length / 2.0
    box = QRectF(-r, -r, length, length)
    path = QPainterPath()
    if symbol is Symbol.CIRCLE:
        path.addEllipse(box)
    elif symbol is Symbol.SQUARE:
        path.addRect(box)
    elif symbol is Symbol.DIAMOND:
        path.addPolygon(_polygon(4, r))
    elif symbol is Symbol.TRIANGLE:
        path.addPolygon(_polygon(3, r))
    elif symbol is Symbol.PENTAGON:
        path.addPolygon(_polygon(5, r))
    elif symbol is Symbol.HEXAGON:
        path.addPolygon(_polygon(6, r, start_deg=0.0))
    elif symbol is Symbol.STAR:
        path.addPolygon(_star(r))
    elif symbol is Symbol.CROSS:
        t = length / 3.0
        path.addRect(QRectF(-r, -t / 2, length, t))
        path.addRect(QRectF(-t / 2, -r, t, length))
        path.setFillRule(Qt.FillRule.WindingFill)
    elif symbol is Symbol.RING:
        path.addEllipse(box)
        path.addEllipse(box.adjusted(r * 0.4, r * 0.4, -r * 0.4, -r * 0.4))
    elif symbol is Symbol.CAPSULE:
        path.addRoundedRect(QRectF(-r, -r / 2, length, r), r / 2, r / 2)
    else:
        raise ValueError(f"No path for symbol {symbol!r}")
    path.closeSubpath()
    return path
