"""
Fretboard note grid for an arbitrary tuning.

Fretboard notes are always spelled with sharps; the flats/sharps preference
only changes the circle of fifths.
"""
import collections
import logging

from .constants import (
    BASS_TUNING_PRESETS,
    CUSTOM_TUNING,
    DEFAULT_PRESET,
    FRET_COUNT,
    GUITAR_TUNING_PRESETS,
    MIDI_MAX,
    MIDI_MIN,
)
from .pitch import InvalidNote, midi_to_note_name, note_is_active, note_to_midi, parse_note

logger = logging.getLogger(__name__)

StringTuning = collections.namedtuple("StringTuning", ["note", "octave"])
FretboardNote = collections.namedtuple(
    "FretboardNote", ["note", "full_note", "octave", "string", "fret", "midi"]
)


class InvalidTuning(ValueError):
    """Raised when an open string's note and octave do not form a pitch."""


def _as_tuning(entries) -> tuple[StringTuning, ...]:
    return tuple(StringTuning(note, octave) for note, octave in entries)


# Standard guitar tuning (low to high: E2, A2, D3, G3, B3, E4)
GUITAR_TUNING = _as_tuning(GUITAR_TUNING_PRESETS["standard"][1])
# Standard bass tuning (low to high: E1, A1, D2, G2)
BASS_TUNING = _as_tuning(BASS_TUNING_PRESETS["standard4"][1])


def resolve_tuning(instrument: str = "guitar", preset: str | None = None, custom=None):
    """
    Tuning for an instrument and preset name.

    preset 'custom' returns the custom tuning as given; an unknown preset
    falls back to the instrument's standard tuning.
    """
    if preset == CUSTOM_TUNING and custom is not None:
        return _as_tuning(custom)
    presets = BASS_TUNING_PRESETS if instrument == "bass" else GUITAR_TUNING_PRESETS
    if preset not in presets:
        fallback = DEFAULT_PRESET.get(instrument, "standard")
        if preset is not None:
            logger.warning("Unknown %s tuning preset %r; using %s",
                           instrument, preset, fallback)
        preset = fallback
    return _as_tuning(presets[preset][1])


def open_string_midi(entry) -> int:
    """MIDI number of an open string given as (note, octave); raises InvalidTuning."""
    try:
        note, octave = entry
    except (TypeError, ValueError):
        raise InvalidTuning(f"expected (note, octave), got {entry!r}") from None
    if not isinstance(octave, int):
        raise InvalidTuning(f"octave must be an integer, got {octave!r}")
    try:
        _, _, own_octave = parse_note(note)
    except InvalidNote as e:
        raise InvalidTuning(f"cannot tune a string to {note!r} octave {octave}") from e
    if own_octave is not None:
        raise InvalidTuning(f"note {note!r} already carries an octave")
    midi = note_to_midi(note, default_octave=octave)
    if not MIDI_MIN <= midi <= MIDI_MAX:
        raise InvalidTuning(f"{note}{octave} is outside the MIDI range")
    return midi


def generate_fretboard_notes(tuning=GUITAR_TUNING) -> list[FretboardNote]:
    """
    Every (string, fret) note for frets 0..FRET_COUNT, low string first.

    A string whose open note cannot be parsed is skipped; the rest still
    produce notes.
    """
    notes = []
    for string, entry in enumerate(tuning):
        try:
            open_midi = open_string_midi(entry)
        except InvalidTuning as e:
            logger.warning("Skipping string %d: %s", string, e)
            continue

        for fret in range(FRET_COUNT + 1):
            midi = open_midi + fret
            notes.append(FretboardNote(
                note=midi_to_note_name(midi, sharps=True, pitch_class=True),
                full_note=midi_to_note_name(midi, sharps=True),
                octave=midi // 12 - 1,
                string=string,
                fret=fret,
                midi=midi,
            ))
    return notes


def note_grid(notes, string_count: int) -> list[list[FretboardNote | None]]:
    """Arrange notes as grid[string][fret]; skipped strings stay all None."""
    grid = [[None] * (FRET_COUNT + 1) for _ in range(string_count)]
    for n in notes:
        grid[n.string][n.fret] = n
    return grid


def classify_fret_note(note: FretboardNote, active_notes, tonic: str, bass_note: str | None = None):
    """
    How a fretboard cell should be highlighted: 'root', 'bass', 'active' or None.

    Inactive notes are never highlighted. The bass only differs from the root
    for inverted chords.
    """
    if not note_is_active(note.note, active_notes):
        return None
    if note_is_active(note.note, [tonic]):
        return "root"
    if bass_note and note_is_active(note.note, [bass_note]):
        return "bass"
    return "active"
