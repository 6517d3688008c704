import unittest
from fretwheel.circle import (
    QualityArc,
    circle_index,
    circle_notes,
    circle_positions,
    find_arc_span,
    is_in_scale,
    quality_arcs,
)
from fretwheel.constants import ARC_COLORS
from fretwheel.degrees import scale_degrees
from fretwheel.pitch import pitch_class_of

class TestCircleLayout(unittest.TestCase):
    def test_orderings_step_by_fifths(self):
        for accidentals in ("flats", "sharps"):
            notes = circle_notes(accidentals)
            self.assertEqual(len(notes), 12)
            self.assertEqual(pitch_class_of(notes[0]), 0)
            for a, b in zip(notes, notes[1:] + notes[:1]):
                self.assertEqual((pitch_class_of(b) - pitch_class_of(a)) % 12, 7)

    def test_spelling_preference(self):
        self.assertEqual(circle_notes("flats")[7], "Db")
        self.assertEqual(circle_notes("sharps")[7], "C#")
        self.assertEqual(circle_notes("sharps")[6], "F#")
        self.assertEqual(circle_notes("flats")[6], "F#")

    def test_circle_index(self):
        self.assertEqual(circle_index("C"), 0)
        self.assertEqual(circle_index("C#"), 7)
        self.assertEqual(circle_index("Db", "sharps"), 7)
        self.assertEqual(circle_index("Gb"), 6)
        self.assertEqual(circle_index("H"), -1)

    def test_is_in_scale(self):
        self.assertTrue(is_in_scale("Db", ["C#", "E"]))
        self.assertFalse(is_in_scale("D", ["C#", "E"]))

class TestArcSpan(unittest.TestCase):
    def test_wrapping_span(self):
        self.assertEqual(find_arc_span([10, 11, 0, 1]), (10, 1))
        self.assertEqual(find_arc_span([0, 1, 11]), (11, 1))

    def test_plain_span(self):
        self.assertEqual(find_arc_span([2, 3, 4]), (2, 4))
        self.assertEqual(find_arc_span([4, 2, 3]), (2, 4))

    def test_degenerate(self):
        self.assertEqual(find_arc_span([]), (0, 0))
        self.assertEqual(find_arc_span([5]), (5, 5))

    def test_tie_takes_first_gap(self):
        # Three equal gaps of 4: the first one (0 → 4) is the one left open.
        self.assertEqual(find_arc_span([0, 4, 8]), (4, 0))
        self.assertEqual(find_arc_span([3, 9]), (9, 3))

class TestCircleBinding(unittest.TestCase):
    def setUp(self):
        self.degrees = scale_degrees("C", "major")
        self.positions = circle_positions("C", ["C", "E", "G"], self.degrees)

    def test_positions(self):
        self.assertEqual(len(self.positions), 12)
        c = self.positions[0]
        self.assertTrue(c.is_tonic)
        self.assertTrue(c.is_active)
        self.assertEqual(c.degree.roman, "I")
        self.assertEqual(c.triad, ["C", "E", "G"])
        b = self.positions[5]
        self.assertEqual(b.degree.roman, "vii°")
        self.assertEqual(b.triad, ["B", "D", "F"])
        self.assertFalse(b.is_active)
        f_sharp = self.positions[6]
        self.assertIsNone(f_sharp.degree)
        self.assertIsNone(f_sharp.triad)
        self.assertFalse(f_sharp.is_tonic)

    def test_c_major_arcs(self):
        self.assertEqual(quality_arcs(self.positions), [
            QualityArc("MAJOR", 11, 1, ARC_COLORS["MAJOR"]),
            QualityArc("MINOR", 2, 4, ARC_COLORS["MINOR"]),
            QualityArc("DIM", 5, 5, ARC_COLORS["DIM"]),
        ])

    def test_harmonic_minor_arcs(self):
        degrees = scale_degrees("A", "harmonic minor")
        arcs = quality_arcs(circle_positions("A", [], degrees))
        # C is augmented and gets no arc; B and G# (Ab slot) each get one.
        self.assertEqual([(a.quality, a.start, a.end) for a in arcs], [
            ("MAJOR", 11, 4),
            ("MINOR", 2, 3),
            ("DIM", 5, 5),
            ("DIM", 8, 8),
        ])

if __name__ == "__main__":
    unittest.main()
