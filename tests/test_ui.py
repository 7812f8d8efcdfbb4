import os
import unittest
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication, QGraphicsScene
from PyQt6.QtGui import QImage, QPainter
from PyQt6.QtCore import QRectF
from model.key_state import KeyVisualState, Viewpoint, FormFactor
from model.theme import Symbol
from ui.symbols import symbol_path
from ui.key_item import KeyItem
from ui.keyboard import build_symmetric_keyboard, build_row_keyboard

_app = QApplication.instance() or QApplication([])

class TestSymbolPaths(unittest.TestCase):
    def test_every_symbol_fits_its_box(self):
        for s in Symbol:
            r = symbol_path(s, 20.0).boundingRect()
            self.assertFalse(r.isEmpty(), s)
            self.assertLessEqual(r.width(), 20.0 + 1e-6)
            self.assertLessEqual(r.height(), 20.0 + 1e-6)
            self.assertAlmostEqual(r.center().x(), 0.0, delta=2.0)

class TestKeyItem(unittest.TestCase):
    def test_resolves_with_cell_size(self):
        item = KeyItem(KeyVisualState(pitch=61, tonic=60), QRectF(10, 20, 40, 160))
        self.assertEqual(item.state.cell_width, 40)
        self.assertEqual(item.state.cell_height, 160)
        self.assertEqual(item.pos().x(), 10)
        self.assertAlmostEqual(item.attrs.symbol_offsets[0], -48.0)

    def test_activation_re_resolves(self):
        item = KeyItem(KeyVisualState(pitch=60, tonic=60), QRectF(0, 0, 40, 160))
        idle = item.attrs.key_color.name()
        item.set_activated(True, externally=True)
        self.assertTrue(item.state.is_activated_externally)
        self.assertNotEqual(item.attrs.key_color.name(), idle)
        item.set_activated(False, externally=True)
        self.assertEqual(item.attrs.key_color.name(), idle)

    def test_tritone_rotation(self):
        item = KeyItem(KeyVisualState(pitch=66, tonic=60, form_factor=FormFactor.SYMMETRIC),
                       QRectF(0, 0, 50, 50), z=1, frame_radius=6.0)
        self.assertEqual(item.rotation(), 45.0)
        self.assertEqual(item.zValue(), 1)

    def test_paints_every_branch(self):
        img = QImage(120, 200, QImage.Format.Format_ARGB32)
        painter = QPainter(img)
        try:
            for s in (KeyVisualState(pitch=60, tonic=60, viewpoint=Viewpoint.INTERVALLIC,
                                     form_factor=FormFactor.SYMMETRIC),
                      KeyVisualState(pitch=61, tonic=60, is_activated=True)):
                KeyItem(s, QRectF(0, 0, 120, 200), frame_radius=4.0).paint(painter, None)
        finally:
            painter.end()

class TestKeyboards(unittest.TestCase):
    def test_symmetric_scene(self):
        scene = QGraphicsScene()
        template = KeyVisualState(pitch=0, tonic=60, viewpoint=Viewpoint.INTERVALLIC)
        items = build_symmetric_keyboard(scene, template, 60, octaves=2, octave_width=400, height=200)
        self.assertEqual(len(items), 26)
        self.assertEqual(len(scene.items()), 26)
        self.assertTrue(all(i.state.form_factor == FormFactor.SYMMETRIC for i in items))
        self.assertEqual([i.pitch for i in items if i.rotation() == 45.0], [66, 78])

    def test_row_scene_and_toggle_callback(self):
        scene = QGraphicsScene()
        events = []
        items = build_row_keyboard(scene, KeyVisualState(pitch=0), 60, 12,
                                   on_toggle=lambda p, down: events.append((p, down)))
        self.assertEqual([i.pitch for i in items], list(range(60, 72)))
        self.assertEqual([i.attrs.geometry.is_small for i in items[:3]], [False, True, False])
        guitar = build_row_keyboard(QGraphicsScene(), KeyVisualState(pitch=0), 40, 5,
                                    form_factor=FormFactor.GUITAR)
        self.assertTrue(all(i.attrs.geometry.corner_radius == 0.0 for i in guitar))
        self.assertIsNotNone(items[0].on_toggle)

if __name__ == "__main__":
    unittest.main()
