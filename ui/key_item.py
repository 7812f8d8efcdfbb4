from __future__ import annotations
import logging
from dataclasses import replace
from typing import Callable, Optional
from PyQt6.QtWidgets import QGraphicsRectItem
from PyQt6.QtGui import QBrush, QColor, QFont, QPainter, QPen, QTextOption
from PyQt6.QtCore import Qt, QRectF

from config import BORDER_COLOR, TRITONE_FRAME_COLOR, TRITONE_FRAME_WIDTH
from model.key_state import KeyVisualState
from model.resolver import ResolvedKeyAttributes, resolve_key_attributes
from .symbols import symbol_path

log = logging.getLogger(__name__)

class KeyItem(QGraphicsRectItem):
    """
    One keyboard key. Holds a KeyVisualState, re-resolves it whenever the state
    changes and paints the resolved attributes; no color or placement rule lives here.
    """
    def __init__(self, state: KeyVisualState, rect: QRectF, z: int = 0, frame_radius: float = 0.0,
                 on_toggle: Optional[Callable[[int, bool], None]] = None):
        super().__init__(QRectF(0, 0, rect.width(), rect.height()))
        self.setPos(rect.x(), rect.y())
        self.setZValue(z)
        self.frame_radius = frame_radius
        self.on_toggle = on_toggle
        self.setFlag(QGraphicsRectItem.GraphicsItemFlag.ItemIsSelectable, False)
        self.setFlag(QGraphicsRectItem.GraphicsItemFlag.ItemIsMovable, False)
        self.setPen(QPen(Qt.PenStyle.NoPen))
        self.setTransformOriginPoint(rect.width() / 2.0, rect.height() / 2.0)
        self.state: KeyVisualState = replace(state, cell_width=rect.width(), cell_height=rect.height())
        self.attrs: ResolvedKeyAttributes = resolve_key_attributes(self.state)
        self.setRotation(self.attrs.rotation_degrees)

    @property
    def pitch(self) -> int:
        return self.state.pitch

    def set_state(self, state: KeyVisualState):
        r = self.rect()
        self.state = replace(state, cell_width=r.width(), cell_height=r.height())
        self.attrs = resolve_key_attributes(self.state)
        self.setRotation(self.attrs.rotation_degrees)
        log.debug("key %d resolved: activated=%s outlined=%s door=%s",
                  self.state.pitch, self.state.activated, self.attrs.is_outlined, self.attrs.has_door)
        self.update()

    def set_activated(self, activated: bool, externally: bool = False):
        if externally:
            self.set_state(replace(self.state, is_activated_externally=activated))
        else:
            self.set_state(replace(self.state, is_activated=activated))

    # -------- input --------
    def mousePressEvent(self, event):
        self.set_activated(True)
        if self.on_toggle:
            self.on_toggle(self.pitch, True)
        event.accept()

    def mouseReleaseEvent(self, event):
        self.set_activated(False)
        if self.on_toggle:
            self.on_toggle(self.pitch, False)
        event.accept()

    # -------- painting --------
    def _key_shape(self) -> QRectF:
        g = self.attrs.geometry
        r = self.rect()
        return QRectF(g.inset_side, g.inset_top - g.extend_top,
                      r.width() - 2 * g.inset_side, r.height() - g.inset_top + g.extend_top)

    def paint(self, painter: QPainter, option, widget=None):
        a = self.attrs
        g = a.geometry
        cell = self.rect()
        cx, cy = cell.width() / 2.0, cell.height() / 2.0
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setPen(Qt.PenStyle.NoPen)

        if self.frame_radius > 0:
            pen = QPen(TRITONE_FRAME_COLOR)
            pen.setWidth(TRITONE_FRAME_WIDTH)
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawRoundedRect(cell, self.frame_radius, self.frame_radius)
            painter.setPen(Qt.PenStyle.NoPen)

        # extended tops are clipped away so only the bottom corners stay round
        painter.setClipRect(cell)
        shape = self._key_shape()
        radius = g.corner_radius

        painter.setBrush(QBrush(BORDER_COLOR))
        painter.drawRoundedRect(shape, radius, radius)
        inner = shape.adjusted(g.border_width, g.border_width, -g.border_width, -g.border_width)

        if a.is_outlined:
            painter.setBrush(QBrush(a.border_color))
            painter.drawRoundedRect(inner, radius, radius)
            ring = max(2.0, 0.05 * min(cell.width(), cell.height()))
            inner = inner.adjusted(ring, ring, -ring, -ring)

        painter.setBrush(QBrush(a.key_color))
        painter.drawRoundedRect(inner, radius, radius)

        path = symbol_path(a.symbol, a.symbol_length)
        painter.setBrush(QBrush(a.symbol_color))
        for off in a.symbol_offsets:
            painter.save()
            painter.translate(cx, cy + off)
            painter.drawPath(path)
            painter.restore()

        painter.setBrush(QBrush(a.door_color))
        for off in a.door_offsets:
            painter.drawRect(QRectF(cx - a.door_width / 2.0, cy + off - a.door_height / 2.0,
                                    a.door_width, a.door_height))

        if a.text:
            font = QFont()
            font.setPixelSize(max(1, int(g.font_size)))
            painter.setFont(font)
            painter.setPen(QPen(QColor(a.text_color)))
            pad = g.font_size / 3.0
            painter.drawText(inner.adjusted(pad, pad, -pad, -pad), a.text,
                             QTextOption(Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignBottom))
        painter.restore()
