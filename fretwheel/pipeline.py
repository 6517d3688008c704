"""
One-pass computation of everything the visualizer draws.

The front end keeps a MusicConfig and calls compute_display_data() with it on
every change; the finder panel calls find_in_selection() with the notes the
user has picked. Both are pure functions of their arguments.
"""
import collections
import logging

from .circle import circle_positions, quality_arcs
from .constants import CHORD_RESULT_LIMIT, SCALE_RESULT_LIMIT
from .degrees import scale_degrees
from .detect import detect_chords, detect_scales
from .fretboard import GUITAR_TUNING, generate_fretboard_notes, resolve_tuning
from .patterns import ChordType, ScaleMode, UnknownPattern, chord_notes, scale_notes

logger = logging.getLogger(__name__)

MusicConfig = collections.namedtuple(
    "MusicConfig",
    [
        "instrument",
        "tonic",
        "view_mode",
        "mode",
        "chord_type",
        "inversion",
        "accidental_mode",
        "tuning_preset",
        "custom_tuning",
    ],
    # Default: guitar, C major chord
    defaults=("guitar", "C", "chord", "major", "M", 0, "flats", "standard", GUITAR_TUNING),
)

DisplayData = collections.namedtuple(
    "DisplayData",
    ["active_notes", "bass_note", "scale_degrees", "circle", "arcs", "tuning", "fretboard"],
)


def _active_notes(config: MusicConfig) -> list[str]:
    if config.view_mode == "scale":
        try:
            return scale_notes(config.tonic, config.mode)
        except UnknownPattern:
            logger.warning("Unknown mode %r; showing major", config.mode)
            return scale_notes(config.tonic, ScaleMode.MAJOR)
    try:
        return chord_notes(config.tonic, config.chord_type, config.inversion)
    except UnknownPattern:
        logger.warning("Unknown chord type %r; showing major triad", config.chord_type)
        return chord_notes(config.tonic, ChordType.MAJOR, config.inversion)


def compute_display_data(config: MusicConfig = MusicConfig()) -> DisplayData:
    """
    Derive active notes, circle binding, quality arcs and fretboard grid.

    In chord view the circle shows the major-key degrees of the tonic and the
    bass note is the lowest note of the (possibly inverted) chord.
    """
    active = _active_notes(config)
    if config.view_mode == "chord":
        bass = active[0] if active else config.tonic
        circle_mode = ScaleMode.MAJOR
    else:
        bass = config.tonic
        circle_mode = config.mode

    degrees = scale_degrees(config.tonic, circle_mode)
    positions = circle_positions(config.tonic, active, degrees, config.accidental_mode)
    tuning = resolve_tuning(config.instrument, config.tuning_preset, config.custom_tuning)

    return DisplayData(
        active_notes=active,
        bass_note=bass,
        scale_degrees=degrees,
        circle=positions,
        arcs=quality_arcs(positions),
        tuning=tuning,
        fretboard=generate_fretboard_notes(tuning),
    )


def find_in_selection(finder_mode: str, selected) -> list[str]:
    """Ranked names for the finder panel: chords, scales, or nothing when off."""
    if finder_mode == "chord":
        return detect_chords(selected)[:CHORD_RESULT_LIMIT]
    if finder_mode == "scale":
        return detect_scales(selected, limit=SCALE_RESULT_LIMIT)
    return []
