import unittest
from model.pitch_relation import (
    interval_class, is_tonic, is_tritone, is_perfect_fourth_or_fifth,
    is_natural_note, note_label,
)

class TestIntervalClass(unittest.TestCase):
    def test_octave_invariance_and_range(self):
        for t in (0, 48, 60, 61, 127):
            for p in range(-30, 140):
                ic = interval_class(p, t)
                self.assertTrue(0 <= ic <= 11)
                self.assertEqual(ic, interval_class(p + 12, t))
                self.assertEqual(ic, interval_class(p - 24, t))

    def test_tonic_maps_to_zero(self):
        for t in range(0, 128):
            self.assertEqual(interval_class(t, t), 0)

    def test_below_tonic_is_never_negative(self):
        self.assertEqual(interval_class(59, 60), 11)
        self.assertEqual(interval_class(54, 60), 6)

    def test_predicates(self):
        self.assertTrue(is_tonic(72, 60))
        self.assertFalse(is_tonic(61, 60))
        self.assertTrue(is_tritone(66, 60))
        self.assertTrue(is_tritone(54, 60))
        self.assertTrue(is_perfect_fourth_or_fifth(65, 60))
        self.assertTrue(is_perfect_fourth_or_fifth(67, 60))
        self.assertFalse(is_perfect_fourth_or_fifth(66, 60))

class TestSpelling(unittest.TestCase):
    def test_natural_notes(self):
        naturals = {60, 62, 64, 65, 67, 69, 71}
        for p in range(60, 72):
            self.assertEqual(is_natural_note(p), p in naturals, p)

    def test_note_label_only_on_c(self):
        self.assertEqual(note_label(60), "C4")
        self.assertEqual(note_label(72), "C5")
        self.assertEqual(note_label(61), "")
        self.assertEqual(note_label(67), "")

if __name__ == "__main__":
    unittest.main()
