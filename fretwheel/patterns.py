"""
Scale and chord catalogs, and the notes they produce from a tonic or root.

Patterns are interval formulas in the usual shorthand ("1P 3M 5P"): a number
for the letter distance and a quality (P, M, m, A, d). Keeping the letter
distance lets us spell F major with a Bb rather than an A#.
"""
import logging
import re
from enum import Enum

import music21
import music21.interval

from .pitch import InvalidNote, music21_note_name, parse_note, to_music21_pitch

logger = logging.getLogger(__name__)


class UnknownPattern(LookupError):
    """Raised when a scale mode or chord type is not in the catalog."""


class ScaleMode(str, Enum):
    MAJOR = "major"
    DORIAN = "dorian"
    PHRYGIAN = "phrygian"
    LYDIAN = "lydian"
    MIXOLYDIAN = "mixolydian"
    MINOR = "minor"
    LOCRIAN = "locrian"
    HARMONIC_MINOR = "harmonic minor"
    MELODIC_MINOR = "melodic minor"
    MAJOR_PENTATONIC = "major pentatonic"
    MINOR_PENTATONIC = "minor pentatonic"

    @classmethod
    def parse(cls, name):
        """Resolve a mode identifier, accepting legacy aliases such as 'ionian'."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        key = _MODE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise UnknownPattern(f"unknown scale mode {name!r}") from None

    @property
    def formula(self) -> str:
        return SCALE_FORMULAS[self]


class ChordType(str, Enum):
    MAJOR = "M"
    MINOR = "m"
    DIMINISHED = "dim"
    AUGMENTED = "aug"
    SUS2 = "sus2"
    SUS4 = "sus4"
    SIXTH = "6"
    MINOR_SIXTH = "m6"
    MAJOR_SEVENTH = "M7"
    MINOR_SEVENTH = "m7"
    DOMINANT_SEVENTH = "7"
    DIMINISHED_SEVENTH = "dim7"
    HALF_DIMINISHED = "m7b5"
    DOMINANT_NINTH = "9"
    MAJOR_NINTH = "M9"
    MINOR_NINTH = "m9"
    ADD_NINE = "add9"
    MINOR_ADD_NINE = "madd9"
    DOMINANT_ELEVENTH = "11"
    MAJOR_ELEVENTH = "M11"
    MINOR_ELEVENTH = "m11"
    ADD_ELEVEN = "add11"

    @classmethod
    def parse(cls, name):
        """Resolve a chord symbol suffix, accepting legacy aliases such as 'maj7'."""
        if isinstance(name, cls):
            return name
        key = str(name).strip()
        key = _CHORD_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise UnknownPattern(f"unknown chord type {name!r}") from None

    @property
    def formula(self) -> str:
        return CHORD_FORMULAS[self]


# ── Interval formulas ─────────────────────────────────────────────────────────

SCALE_FORMULAS: dict[ScaleMode, str] = {
    ScaleMode.MAJOR:            "1P 2M 3M 4P 5P 6M 7M",
    ScaleMode.DORIAN:           "1P 2M 3m 4P 5P 6M 7m",
    ScaleMode.PHRYGIAN:         "1P 2m 3m 4P 5P 6m 7m",
    ScaleMode.LYDIAN:           "1P 2M 3M 4A 5P 6M 7M",
    ScaleMode.MIXOLYDIAN:       "1P 2M 3M 4P 5P 6M 7m",
    ScaleMode.MINOR:            "1P 2M 3m 4P 5P 6m 7m",
    ScaleMode.LOCRIAN:          "1P 2m 3m 4P 5d 6m 7m",
    ScaleMode.HARMONIC_MINOR:   "1P 2M 3m 4P 5P 6m 7M",
    ScaleMode.MELODIC_MINOR:    "1P 2M 3m 4P 5P 6M 7M",
    ScaleMode.MAJOR_PENTATONIC: "1P 2M 3M 5P 6M",
    ScaleMode.MINOR_PENTATONIC: "1P 3m 4P 5P 7m",
}

CHORD_FORMULAS: dict[ChordType, str] = {
    ChordType.MAJOR:              "1P 3M 5P",
    ChordType.MINOR:              "1P 3m 5P",
    ChordType.DIMINISHED:         "1P 3m 5d",
    ChordType.AUGMENTED:          "1P 3M 5A",
    ChordType.SUS2:               "1P 2M 5P",
    ChordType.SUS4:               "1P 4P 5P",
    ChordType.SIXTH:              "1P 3M 5P 6M",
    ChordType.MINOR_SIXTH:        "1P 3m 5P 6M",
    ChordType.MAJOR_SEVENTH:      "1P 3M 5P 7M",
    ChordType.MINOR_SEVENTH:      "1P 3m 5P 7m",
    ChordType.DOMINANT_SEVENTH:   "1P 3M 5P 7m",
    ChordType.DIMINISHED_SEVENTH: "1P 3m 5d 7d",
    ChordType.HALF_DIMINISHED:    "1P 3m 5d 7m",
    ChordType.DOMINANT_NINTH:     "1P 3M 5P 7m 9M",
    ChordType.MAJOR_NINTH:        "1P 3M 5P 7M 9M",
    ChordType.MINOR_NINTH:        "1P 3m 5P 7m 9M",
    ChordType.ADD_NINE:           "1P 3M 5P 9M",
    ChordType.MINOR_ADD_NINE:     "1P 3m 5P 9M",
    # Dominant 11 drops the third, which clashes with the 11th.
    ChordType.DOMINANT_ELEVENTH:  "1P 5P 7m 9M 11P",
    ChordType.MAJOR_ELEVENTH:     "1P 3M 5P 7M 9M 11P",
    ChordType.MINOR_ELEVENTH:     "1P 3m 5P 7m 9M 11P",
    ChordType.ADD_ELEVEN:         "1P 3M 5P 11P",
}

# Legacy identifiers that older front ends still send.
_MODE_ALIASES: dict[str, str] = {
    "ionian": "major",
    "aeolian": "minor",
    "natural minor": "minor",
    "pentatonic": "major pentatonic",
}
_CHORD_ALIASES: dict[str, str] = {
    "": "M", "maj": "M", "major": "M",
    "min": "m", "minor": "m",
    "maj7": "M7", "Maj7": "M7",
    "min7": "m7", "dom7": "7",
    "o": "dim", "+": "aug",
    "o7": "dim7", "hdim7": "m7b5", "ø": "m7b5",
    "maj9": "M9", "maj11": "M11",
}

_INTERVAL_RE = re.compile(r"^(\d+)([PMmAd])$")
_INTERVAL_CACHE: dict[str, music21.interval.Interval] = {}


def _music21_interval(token: str) -> music21.interval.Interval:
    """'3M' → music21 Interval('M3'), cached per token."""
    if token in _INTERVAL_CACHE:
        return _INTERVAL_CACHE[token]
    m = _INTERVAL_RE.match(token)
    if not m or int(m.group(1)) < 1:
        raise ValueError(f"bad interval {token!r}")
    number, quality = int(m.group(1)), m.group(2)
    perfectable = music21.interval.GenericInterval(number).perfectable
    if quality not in ("PAd" if perfectable else "MmAd"):
        raise ValueError(f"bad interval {token!r}")
    _INTERVAL_CACHE[token] = music21.interval.Interval(f"{quality}{number}")
    return _INTERVAL_CACHE[token]


def parse_interval(token: str) -> tuple[int, int]:
    """
    Parse an interval token into (letter_steps, semitones).

    '3M' → (2, 4), '5d' → (4, 6), '9M' → (8, 14), '11P' → (10, 17).
    """
    interval = _music21_interval(token)
    return interval.generic.undirected - 1, int(interval.semitones)


def interval_semitones(formula: str) -> list[int]:
    """Semitone offsets of a formula, e.g. '1P 3M 5P' → [0, 4, 7]."""
    return [parse_interval(tok)[1] for tok in formula.split()]


def transpose_note(note: str, interval: str) -> str:
    """
    Spell the note an interval above note, keeping letter names diatonic.

    An octave on the input is carried through to the result.
    """
    _, _, octave = parse_note(note)
    moved = to_music21_pitch(note).transpose(_music21_interval(interval))
    if moved.accidental is not None and abs(moved.accidental.alter) > 2:
        # Past a double accidental
        moved = moved.simplifyEnharmonic(inPlace=False)
    return music21_note_name(moved, with_octave=octave is not None)


def _apply_formula(tonic: str, formula: str) -> list[str]:
    try:
        parse_note(tonic)
    except InvalidNote:
        logger.debug("Ignoring unparseable tonic %r", tonic)
        return []
    return [transpose_note(tonic, tok) for tok in formula.split()]


def scale_notes(tonic: str, mode) -> list[str]:
    """
    Notes of the scale on tonic, in ascending order.

    Raises UnknownPattern for a mode outside the catalog. An unparseable tonic
    contributes nothing and yields [].
    """
    return _apply_formula(tonic, ScaleMode.parse(mode).formula)


def chord_notes(root: str, chord_type, inversion: int = 0) -> list[str]:
    """
    Notes of a chord, root first, rotated left once per inversion step.

    Rotation stops after size-1 steps, so an inversion at or past the last
    one repeats it: chord_notes('C', 'M', 3) == chord_notes('C', 'M', 2).
    """
    notes = _apply_formula(root, ChordType.parse(chord_type).formula)
    i = 0
    while i < inversion and i < len(notes) - 1:
        notes.append(notes.pop(0))
        i += 1
    return notes
