import unittest
import numpy as np
from fretwheel.detect import (
    detect_chords,
    detect_scales,
    get_templates,
    toggle_selected_note,
)
from fretwheel.patterns import ChordType, ScaleMode

class TestTemplates(unittest.TestCase):
    def test_chord_template_structure(self):
        labels, matrix = get_templates(ChordType)
        self.assertEqual(len(labels), 12 * 22)
        self.assertEqual(matrix.shape, (12 * 22, 12))
        self.assertEqual(matrix.dtype, np.float32)

    def test_chord_template_values(self):
        labels, matrix = get_templates(ChordType)
        # Minor chord on D: D (2), F (5), A (9)
        row = next(i for i, (root, _, chord) in enumerate(labels)
                   if root == 2 and chord is ChordType.MINOR)
        expected = np.zeros(12, dtype=np.float32)
        expected[[2, 5, 9]] = 1.0
        np.testing.assert_array_equal(matrix[row], expected)

    def test_scale_template_values(self):
        labels, matrix = get_templates(ScaleMode)
        row = next(i for i, (root, _, mode) in enumerate(labels)
                   if root == 7 and mode is ScaleMode.MIXOLYDIAN)
        # G mixolydian has the same notes as C major
        expected = np.zeros(12, dtype=np.float32)
        expected[[0, 2, 4, 5, 7, 9, 11]] = 1.0
        np.testing.assert_array_equal(matrix[row], expected)

class TestDetectChords(unittest.TestCase):
    def test_major_triad(self):
        self.assertEqual(detect_chords(["C", "E", "G"])[0], "CM")

    def test_minor_triad(self):
        self.assertEqual(detect_chords(["C", "Eb", "G"])[0], "Cm")

    def test_dominant_seventh(self):
        self.assertEqual(detect_chords(["G", "B", "D", "F"])[0], "G7")

    def test_order_and_duplicates_ignored(self):
        self.assertEqual(detect_chords(["G", "E", "C", "C"])[:1], ["CM"])
        self.assertEqual(detect_chords(["C", "E", "G"]), detect_chords(["C", "G", "E", "C"]))

    def test_two_notes_rank_by_extra_tones(self):
        # Every candidate adds one tone; the picked root C goes first.
        self.assertEqual(detect_chords(["C", "E"])[:3], ["CM", "Caug", "Am"])

    def test_every_result_contains_input(self):
        from fretwheel.patterns import chord_notes
        from fretwheel.pitch import pitch_class_set
        picked = {0, 4, 10}
        for name in detect_chords(["C", "E", "Bb"]):
            root = name[:2] if len(name) > 1 and name[1] in "#b" else name[:1]
            pcs = set(pitch_class_set(chord_notes(root, name[len(root):])))
            self.assertTrue(picked <= pcs, name)

    def test_enharmonic_input(self):
        self.assertEqual(detect_chords(["Db", "F", "Ab"])[0], "DbM")
        self.assertEqual(detect_chords(["C#", "E#", "G#"])[0], "C#M")

    def test_below_threshold(self):
        self.assertEqual(detect_chords([]), [])
        self.assertEqual(detect_chords(["C"]), [])
        self.assertEqual(detect_chords(["C", "B#"]), [])  # one pitch class
        self.assertEqual(detect_chords(["C", "bogus"]), [])

class TestDetectScales(unittest.TestCase):
    WHITE_KEYS = ["C", "D", "E", "F", "G", "A", "B"]

    def test_c_major(self):
        scales = detect_scales(self.WHITE_KEYS)
        self.assertEqual(scales[0], "C major")
        self.assertEqual(scales, [
            "C major", "D dorian", "E phrygian", "F lydian",
            "G mixolydian", "A minor", "B locrian",
        ])

    def test_limit(self):
        self.assertEqual(detect_scales(self.WHITE_KEYS, limit=3),
                         ["C major", "D dorian", "E phrygian"])
        self.assertLessEqual(len(detect_scales(["C", "E", "G"], limit=8)), 8)

    def test_pentatonic(self):
        scales = detect_scales(["C", "D", "E", "G", "A"])
        self.assertEqual(scales[:2], ["C major pentatonic", "A minor pentatonic"])
        self.assertIn("C major", scales)

    def test_below_threshold(self):
        self.assertEqual(detect_scales([]), [])
        self.assertEqual(detect_scales(["C", "E"]), [])
        self.assertEqual(detect_scales(["C", "E", "Fb"]), [])

class TestToggle(unittest.TestCase):
    def test_toggle(self):
        selected = ["C"]
        self.assertEqual(toggle_selected_note(selected, "E"), ["C", "E"])
        self.assertEqual(selected, ["C"])
        self.assertEqual(toggle_selected_note(["C", "E"], "Fb"), ["C"])
        self.assertEqual(toggle_selected_note([], "G"), ["G"])

if __name__ == "__main__":
    unittest.main()
