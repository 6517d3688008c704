"""
Diatonic degree analysis: chord quality and roman numeral for each degree of
a mode, as shown around the circle of fifths.
"""
import collections
import logging

from .patterns import ChordType, ScaleMode, UnknownPattern, chord_notes, scale_notes

logger = logging.getLogger(__name__)

ScaleDegreeInfo = collections.namedtuple(
    "ScaleDegreeInfo", ["degree", "roman", "quality", "note"]
)

MAJOR, MINOR, DIMINISHED, AUGMENTED = "major", "minor", "diminished", "augmented"

_BASE_NUMERALS = ("I", "II", "III", "IV", "V", "VI", "VII")
DIMINISHED_MARK = "°"

# Triad quality on each degree. Modes missing here (the pentatonics) use major.
QUALITY_PATTERNS: dict[ScaleMode, tuple[str, ...]] = {
    ScaleMode.MAJOR:          (MAJOR, MINOR, MINOR, MAJOR, MAJOR, MINOR, DIMINISHED),
    ScaleMode.DORIAN:         (MINOR, MINOR, MAJOR, MAJOR, MINOR, DIMINISHED, MAJOR),
    ScaleMode.PHRYGIAN:       (MINOR, MAJOR, MAJOR, MINOR, DIMINISHED, MAJOR, MINOR),
    ScaleMode.LYDIAN:         (MAJOR, MAJOR, MINOR, DIMINISHED, MAJOR, MINOR, MINOR),
    ScaleMode.MIXOLYDIAN:     (MAJOR, MINOR, DIMINISHED, MAJOR, MINOR, MINOR, MAJOR),
    ScaleMode.MINOR:          (MINOR, DIMINISHED, MAJOR, MINOR, MINOR, MAJOR, MAJOR),
    ScaleMode.LOCRIAN:        (DIMINISHED, MAJOR, MINOR, MINOR, MAJOR, MAJOR, MINOR),
    ScaleMode.HARMONIC_MINOR: (MINOR, DIMINISHED, AUGMENTED, MINOR, MAJOR, MAJOR, DIMINISHED),
    ScaleMode.MELODIC_MINOR:  (MINOR, MINOR, AUGMENTED, MAJOR, MAJOR, DIMINISHED, DIMINISHED),
}

_QUALITY_TO_CHORD: dict[str, ChordType] = {
    MAJOR: ChordType.MAJOR,
    MINOR: ChordType.MINOR,
    DIMINISHED: ChordType.DIMINISHED,
    AUGMENTED: ChordType.AUGMENTED,
}


def roman_numeral(index: int, quality: str) -> str:
    """Numeral for degree index 0-6: 'ii' for minor, 'vii°' for diminished."""
    base = _BASE_NUMERALS[index]
    if quality == MINOR:
        return base.lower()
    if quality == DIMINISHED:
        return base.lower() + DIMINISHED_MARK
    return base


def quality_pattern(mode) -> tuple[str, ...]:
    try:
        key = ScaleMode.parse(mode)
    except UnknownPattern:
        return QUALITY_PATTERNS[ScaleMode.MAJOR]
    return QUALITY_PATTERNS.get(key, QUALITY_PATTERNS[ScaleMode.MAJOR])


def scale_degrees(tonic: str, mode) -> list[ScaleDegreeInfo]:
    """
    Degree info for each note of the scale, at most seven.

    Seven-note modes give exactly seven entries numbered 1..7. The
    pentatonics give five, with major-mode qualities. An unknown mode
    falls back to the major scale so the wheel always has something to draw.
    """
    try:
        notes = scale_notes(tonic, mode)
    except UnknownPattern:
        logger.warning("Unknown mode %r; falling back to major", mode)
        notes = scale_notes(tonic, ScaleMode.MAJOR)
    qualities = quality_pattern(mode)

    return [
        ScaleDegreeInfo(
            degree=i + 1,
            roman=roman_numeral(i, qualities[i]),
            quality=qualities[i],
            note=note,
        )
        for i, note in enumerate(notes[:7])
    ]


def triad_for_degree(note: str, quality: str) -> list[str]:
    """The three chord tones built on a degree note for its quality."""
    chord = _QUALITY_TO_CHORD.get(quality, ChordType.MAJOR)
    return chord_notes(note, chord)[:3]
