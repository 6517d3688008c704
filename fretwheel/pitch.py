"""
Note names, pitch classes and MIDI numbers.

A note name is a letter A-G, an optional accidental (#, ##, b, bb) and an
optional octave number: "C", "F#", "Bb3", "Cbb-1". Two names are the same note
when they share a pitch class, so "C#" and "Db" compare equal here.
"""
import re

import music21
import music21.pitch

from .constants import (
    ACCIDENTAL_TO_ALTERATION,
    FLAT_NAMES,
    LETTER_TO_PC,
    REFERENCE_OCTAVE,
    SHARP_NAMES,
)

_NOTE_RE = re.compile(r"^([A-Ga-g])(##|bb|#|b)?(-?\d+)?$")


class InvalidNote(ValueError):
    """Raised when a string cannot be read as a note name."""


def parse_note(name: str) -> tuple[str, int, int | None]:
    """
    Split a note name into (letter, alteration, octave).

    alteration is the signed semitone shift of the accidental (-2..2);
    octave is None when the name carries none.
    """
    if not isinstance(name, str):
        raise InvalidNote(f"note name must be a string, got {name!r}")
    m = _NOTE_RE.match(name.strip())
    if not m:
        raise InvalidNote(f"cannot parse note name {name!r}")
    letter, accidental, octave = m.groups()
    alteration = ACCIDENTAL_TO_ALTERATION[accidental or ""]
    return letter.upper(), alteration, int(octave) if octave is not None else None


def note_to_midi(name: str, default_octave: int = REFERENCE_OCTAVE) -> int:
    """MIDI number of a note name; bare names are placed in default_octave (C4 = 60)."""
    letter, alteration, octave = parse_note(name)
    if octave is None:
        octave = default_octave
    return (octave + 1) * 12 + LETTER_TO_PC[letter] + alteration


def pitch_class_of(name: str) -> int:
    """Map a note name (e.g., 'C', 'F#', 'Gb', 'E##') to its pitch class (0-11)."""
    return note_to_midi(name, REFERENCE_OCTAVE) % 12


def same_note(a: str, b: str) -> bool:
    """True when a and b are enharmonically equivalent."""
    return pitch_class_of(a) == pitch_class_of(b)


def is_root_note(note: str, root: str) -> bool:
    return same_note(note, root)


def note_is_active(note: str, active_notes) -> bool:
    """
    True when note shares a pitch class with any member of active_notes.

    Unparseable members of active_notes never match.
    """
    pc = pitch_class_of(note)
    for active in active_notes:
        try:
            if pitch_class_of(active) == pc:
                return True
        except InvalidNote:
            continue
    return False


def pitch_class_name(pc: int, sharps: bool = True) -> str:
    names = SHARP_NAMES if sharps else FLAT_NAMES
    return names[pc % 12]


def to_music21_pitch(name: str, default_octave: int = REFERENCE_OCTAVE) -> music21.pitch.Pitch:
    """music21 Pitch for a note name; bare names are placed in default_octave."""
    letter, alteration, octave = parse_note(name)
    accidental = "#" * alteration if alteration > 0 else "-" * -alteration
    pitch_obj = music21.pitch.Pitch(letter + accidental)
    # Set separately: "C-1" would read as C-flat in octave 1.
    pitch_obj.octave = default_octave if octave is None else octave
    return pitch_obj


def music21_note_name(pitch_obj: music21.pitch.Pitch, with_octave: bool = True) -> str:
    """Our spelling of a music21 Pitch: 'b' for flats instead of '-'."""
    name = pitch_obj.name.replace("-", "b")
    if with_octave:
        return f"{name}{pitch_obj.octave}"
    return name


def midi_to_note_name(midi: int, sharps: bool = True, pitch_class: bool = False) -> str:
    """
    Spell a MIDI number, e.g. 61 → 'C#4' (or 'Db4' with sharps=False).

    With pitch_class=True the octave is left off ('C#').
    """
    pitch_obj = music21.pitch.Pitch()
    pitch_obj.ps = midi
    alter = pitch_obj.accidental.alter if pitch_obj.accidental is not None else 0
    if (sharps and alter < 0) or (not sharps and alter > 0):
        pitch_obj = pitch_obj.getEnharmonic()
    return music21_note_name(pitch_obj, with_octave=not pitch_class)


def pitch_class_set(notes) -> list[int]:
    """
    Distinct pitch classes of notes, in first-seen order.

    Names that do not parse are dropped.
    """
    seen: list[int] = []
    for n in notes:
        try:
            pc = pitch_class_of(n)
        except InvalidNote:
            continue
        if pc not in seen:
            seen.append(pc)
    return seen
