import unittest
from PyQt6.QtGui import QColor
from model.theme import Theme, Symbol, HOMEY, PASTEL, MONO, get_theme
from model.errors import InvalidThemeError, InvalidIndexError

def make(n_colors=12, n_symbols=12, n_sizes=12, **kw):
    return Theme(["#112233"] * n_colors, ["#445566"] * 12,
                 [Symbol.CIRCLE] * n_symbols, [0.5] * n_sizes, **kw)

class TestThemeValidation(unittest.TestCase):
    def test_valid_theme(self):
        t = make()
        self.assertEqual(len(t.key_colors), 12)
        self.assertIsInstance(t.key_colors[0], QColor)
        self.assertIsInstance(t.symbols, tuple)

    def test_wrong_lengths_raise(self):
        for n in (11, 13):
            with self.assertRaises(InvalidThemeError):
                make(n_colors=n)
            with self.assertRaises(InvalidThemeError):
                make(n_symbols=n)
            with self.assertRaises(InvalidThemeError):
                make(n_sizes=n)

    def test_bad_sizes_raise(self):
        with self.assertRaises(InvalidThemeError):
            Theme(["#000000"] * 12, ["#000000"] * 12, [Symbol.CIRCLE] * 12, [0.0] + [0.5] * 11)
        with self.assertRaises(InvalidThemeError):
            Theme(["#000000"] * 12, ["#000000"] * 12, [Symbol.CIRCLE] * 12, [1.5] + [0.5] * 11)

    def test_bad_color_and_symbol_raise(self):
        with self.assertRaises(InvalidThemeError):
            Theme(["nope"] * 12, ["#000000"] * 12, [Symbol.CIRCLE] * 12, [0.5] * 12)
        with self.assertRaises(InvalidThemeError):
            Theme(["#000000"] * 12, ["#000000"] * 12, ["circle"] * 12, [0.5] * 12)

    def test_index_guard(self):
        with self.assertRaises(InvalidIndexError):
            HOMEY.key_color(12)
        with self.assertRaises(InvalidIndexError):
            HOMEY.symbol(-1)

    def test_outline_color_defaults_to_fourth_slot(self):
        self.assertEqual(HOMEY.outline_color().name(), HOMEY.symbol_colors[5].name())
        self.assertEqual(MONO.outline_color().name(), "#000000")

    def test_accessors_return_copies(self):
        c = HOMEY.key_color(3)
        c.setRed(0)
        self.assertNotEqual(HOMEY.key_colors[3], c)

    def test_presets(self):
        self.assertIs(get_theme("Pastel"), PASTEL)
        with self.assertRaises(KeyError):
            get_theme("neon")

if __name__ == "__main__":
    unittest.main()
