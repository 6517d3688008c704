# ── Pitch-class lookup tables ─────────────────────────────────────────────────

# Natural letters → semitone offset above C.
LETTER_TO_PC: dict[str, int] = {
    "C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11,
}

ACCIDENTAL_TO_ALTERATION: dict[str, int] = {
    "": 0, "#": 1, "##": 2, "b": -1, "bb": -2,
}
ALTERATION_TO_ACCIDENTAL: dict[int, str] = {
    v: k for k, v in ACCIDENTAL_TO_ALTERATION.items()
}

# Spelling for reconstructing a note name from a pitch class.
SHARP_NAMES: tuple[str, ...] = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
)
FLAT_NAMES: tuple[str, ...] = (
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B",
)
# All chromatic notes for selectors
ALL_NOTES = SHARP_NAMES

# Reference octave used when a bare note name is turned into a MIDI number.
REFERENCE_OCTAVE = 4

# Open strings must fall inside the MIDI note range.
MIDI_MIN = 0
MIDI_MAX = 127

# ── Circle of fifths ──────────────────────────────────────────────────────────
# Clockwise from C. F# stays F# in both orderings (Gb is rarely used).

CIRCLE_OF_FIFTHS_FLATS: tuple[str, ...] = (
    "C", "G", "D", "A", "E", "B", "F#", "Db", "Ab", "Eb", "Bb", "F",
)
CIRCLE_OF_FIFTHS_SHARPS: tuple[str, ...] = (
    "C", "G", "D", "A", "E", "B", "F#", "C#", "G#", "D#", "A#", "F",
)
ACCIDENTAL_MODES = ("flats", "sharps")

# Colour tokens handed to the renderer, one per arc label.
ARC_COLORS: dict[str, str] = {
    "MAJOR": "var(--color-major)",
    "MINOR": "var(--color-minor)",
    "DIM":   "var(--color-diminished)",
}

# ── Catalogs ──────────────────────────────────────────────────────────────────
# (value, label) pairs in display order. Values are the identifiers accepted by
# ScaleMode / ChordType in fretwheel.patterns.

SCALE_MODES: tuple[tuple[str, str], ...] = (
    ("major",            "Ionian (Major)"),
    ("dorian",           "Dorian"),
    ("phrygian",         "Phrygian"),
    ("lydian",           "Lydian"),
    ("mixolydian",       "Mixolydian"),
    ("minor",            "Aeolian (Minor)"),
    ("locrian",          "Locrian"),
    ("harmonic minor",   "Harmonic Minor"),
    ("melodic minor",    "Melodic Minor"),
    ("major pentatonic", "Major Pentatonic"),
    ("minor pentatonic", "Minor Pentatonic"),
)

CHORD_TYPES: tuple[tuple[str, str], ...] = (
    # Triads
    ("M",     "Major"),
    ("m",     "Minor"),
    ("dim",   "Diminished"),
    ("aug",   "Augmented"),
    ("sus2",  "Sus2"),
    ("sus4",  "Sus4"),
    # 6th chords
    ("6",     "Major 6"),
    ("m6",    "Minor 6"),
    # 7th chords
    ("M7",    "Major 7"),
    ("m7",    "Minor 7"),
    ("7",     "Dominant 7"),
    ("dim7",  "Diminished 7"),
    ("m7b5",  "Half-Dim 7 (m7b5)"),
    # 9th chords
    ("9",     "Dominant 9"),
    ("M9",    "Major 9"),
    ("m9",    "Minor 9"),
    ("add9",  "Add 9"),
    ("madd9", "Minor Add 9"),
    # 11th chords
    ("11",    "Dominant 11"),
    ("M11",   "Major 11"),
    ("m11",   "Minor 11"),
    ("add11", "Add 11"),
)

MAX_INVERSION = 3

# ── Fretboard ─────────────────────────────────────────────────────────────────

# Highest fret drawn; frets run 0 (open string) .. FRET_COUNT inclusive.
FRET_COUNT = 15

INSTRUMENTS = ("guitar", "bass")
CUSTOM_TUNING = "custom"

# Tunings are (note, octave) pairs, low string first.
GUITAR_TUNING_PRESETS: dict[str, tuple[str, tuple[tuple[str, int], ...]]] = {
    "standard":       ("Standard (E-A-D-G-B-E)",
                       (("E", 2), ("A", 2), ("D", 3), ("G", 3), ("B", 3), ("E", 4))),
    "drop_d":         ("Drop D (D-A-D-G-B-E)",
                       (("D", 2), ("A", 2), ("D", 3), ("G", 3), ("B", 3), ("E", 4))),
    "drop_c":         ("Drop C (C-G-C-F-A-D)",
                       (("C", 2), ("G", 2), ("C", 3), ("F", 3), ("A", 3), ("D", 4))),
    "open_g":         ("Open G (D-G-D-G-B-D)",
                       (("D", 2), ("G", 2), ("D", 3), ("G", 3), ("B", 3), ("D", 4))),
    "open_d":         ("Open D (D-A-D-F#-A-D)",
                       (("D", 2), ("A", 2), ("D", 3), ("F#", 3), ("A", 3), ("D", 4))),
    "open_e":         ("Open E (E-B-E-G#-B-E)",
                       (("E", 2), ("B", 2), ("E", 3), ("G#", 3), ("B", 3), ("E", 4))),
    "dadgad":         ("DADGAD (D-A-D-G-A-D)",
                       (("D", 2), ("A", 2), ("D", 3), ("G", 3), ("A", 3), ("D", 4))),
    "half_step_down": ("Half Step Down (Eb-Ab-Db-Gb-Bb-Eb)",
                       (("Eb", 2), ("Ab", 2), ("Db", 3), ("Gb", 3), ("Bb", 3), ("Eb", 4))),
    "full_step_down": ("Full Step Down (D-G-C-F-A-D)",
                       (("D", 2), ("G", 2), ("C", 3), ("F", 3), ("A", 3), ("D", 4))),
}

BASS_TUNING_PRESETS: dict[str, tuple[str, tuple[tuple[str, int], ...]]] = {
    "standard4":       ("Standard 4-String (E-A-D-G)",
                        (("E", 1), ("A", 1), ("D", 2), ("G", 2))),
    "drop_d4":         ("Drop D 4-String (D-A-D-G)",
                        (("D", 1), ("A", 1), ("D", 2), ("G", 2))),
    "standard5":       ("Standard 5-String (B-E-A-D-G)",
                        (("B", 0), ("E", 1), ("A", 1), ("D", 2), ("G", 2))),
    "half_step_down4": ("Half Step Down 4-String (Eb-Ab-Db-Gb)",
                        (("Eb", 1), ("Ab", 1), ("Db", 2), ("Gb", 2))),
}

DEFAULT_PRESET: dict[str, str] = {"guitar": "standard", "bass": "standard4"}

# ── Finder ────────────────────────────────────────────────────────────────────

MIN_CHORD_NOTES = 2
MIN_SCALE_NOTES = 3
# How many ranked names the finder panel shows.
CHORD_RESULT_LIMIT = 6
SCALE_RESULT_LIMIT = 8
FINDER_MODES = ("off", "chord", "scale")
