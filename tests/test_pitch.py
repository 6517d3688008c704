import unittest
import music21
from fretwheel.constants import ALL_NOTES, FLAT_NAMES
from fretwheel.pitch import (
    InvalidNote,
    is_root_note,
    midi_to_note_name,
    music21_note_name,
    note_is_active,
    note_to_midi,
    parse_note,
    pitch_class_name,
    pitch_class_of,
    pitch_class_set,
    same_note,
    to_music21_pitch,
)

class TestPitch(unittest.TestCase):
    def test_parse_note(self):
        self.assertEqual(parse_note("C"), ("C", 0, None))
        self.assertEqual(parse_note("F#3"), ("F", 1, 3))
        self.assertEqual(parse_note("Bbb"), ("B", -2, None))
        self.assertEqual(parse_note("e##-1"), ("E", 2, -1))

    def test_pitch_class_in_range(self):
        for name in list(ALL_NOTES) + list(FLAT_NAMES) + ["B#", "Cb", "E##", "Fbb"]:
            pc = pitch_class_of(name)
            self.assertTrue(0 <= pc <= 11, name)
            self.assertTrue(same_note(name, name))

    def test_pitch_class_values(self):
        self.assertEqual(pitch_class_of("C"), 0)
        self.assertEqual(pitch_class_of("B#"), 0)   # wraps past the octave
        self.assertEqual(pitch_class_of("Cb"), 11)
        self.assertEqual(pitch_class_of("E##"), 6)
        self.assertEqual(pitch_class_of("Fbb"), 3)
        self.assertEqual(pitch_class_of("A7"), 9)   # octave is irrelevant

    def test_invalid_notes(self):
        for bad in ["H", "", "C###", "Cx", "#", "C#b", None, 4]:
            with self.assertRaises(InvalidNote):
                pitch_class_of(bad)

    def test_same_note(self):
        self.assertTrue(same_note("C#", "Db"))
        self.assertFalse(same_note("C", "C#"))
        # Symmetric and transitive across spellings of the same class
        self.assertTrue(same_note("Db", "C#"))
        self.assertTrue(same_note("B##", "C#"))
        self.assertTrue(same_note("Db", "B##"))

    def test_note_is_active(self):
        active = ["C", "Eb", "G"]
        self.assertTrue(note_is_active("D#", active))
        self.assertTrue(note_is_active("G", active))
        self.assertFalse(note_is_active("E", active))
        # Bad entries in the active set are ignored
        self.assertTrue(note_is_active("G", ["nope", "G"]))
        self.assertFalse(note_is_active("G", []))
        self.assertTrue(is_root_note("B#", "C"))

    def test_midi_round_trip_values(self):
        self.assertEqual(note_to_midi("C4"), 60)
        self.assertEqual(note_to_midi("A4"), 69)
        self.assertEqual(note_to_midi("C-1"), 0)
        self.assertEqual(note_to_midi("E"), 64)     # reference octave 4
        self.assertEqual(note_to_midi("E", default_octave=2), 40)
        self.assertEqual(midi_to_note_name(61), "C#4")
        self.assertEqual(midi_to_note_name(61, sharps=False), "Db4")
        self.assertEqual(midi_to_note_name(40, pitch_class=True), "E")
        self.assertEqual(pitch_class_name(10, sharps=False), "Bb")

    def test_music21_spelling(self):
        self.assertEqual(midi_to_note_name(70), "A#4")
        self.assertEqual(midi_to_note_name(70, sharps=False), "Bb4")
        self.assertEqual(midi_to_note_name(63, sharps=False, pitch_class=True), "Eb")
        self.assertEqual(midi_to_note_name(0), "C-1")
        self.assertEqual(music21_note_name(music21.pitch.Pitch("E-2")), "Eb2")
        self.assertEqual(music21_note_name(music21.pitch.Pitch("F##3"), with_octave=False), "F##")

    def test_to_music21_pitch(self):
        p = to_music21_pitch("Bb3")
        self.assertEqual(p.nameWithOctave, "B-3")
        self.assertEqual(p.midi, 58)
        low = to_music21_pitch("Cb-1")
        self.assertEqual((low.name, low.octave), ("C-", -1))
        self.assertEqual(to_music21_pitch("E").octave, 4)
        with self.assertRaises(InvalidNote):
            to_music21_pitch("H")

    def test_pitch_class_set(self):
        self.assertEqual(pitch_class_set(["E", "C", "Fb", "bad", "G"]), [4, 0, 7])

if __name__ == "__main__":
    unittest.main()
