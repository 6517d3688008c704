"""
Chord and scale detection from a hand-picked set of notes.

Every catalog pattern is laid out on all 12 roots as a binary pitch-class
vector. A candidate must contain every selected pitch class; candidates are
ranked by how many tones they add, then by whether their root is the first
note picked, then by catalog order.
"""
import numpy as np

from .constants import ALTERATION_TO_ACCIDENTAL, MIN_CHORD_NOTES, MIN_SCALE_NOTES
from .patterns import ChordType, ScaleMode, interval_semitones
from .pitch import InvalidNote, parse_note, pitch_class_name, pitch_class_of, pitch_class_set


def _generate_template_vector(pitch_classes):
    """Helper to create a 12-element vector from a list of active pitch classes."""
    v = np.zeros(12, dtype=np.float32)
    for pc in pitch_classes:
        v[pc % 12] = 1.0
    return v


def get_templates(catalog):
    """
    Lay out every pattern of catalog (ScaleMode or ChordType) on all 12 roots.

    Returns:
        (labels, matrix): labels is a list of (root_pc, catalog_index, pattern)
        and matrix an (n, 12) float32 array, one row per label.
    """
    labels = []
    rows = []
    for root_pc in range(12):
        for idx, pattern in enumerate(catalog):
            semis = interval_semitones(pattern.formula)
            labels.append((root_pc, idx, pattern))
            rows.append(_generate_template_vector([root_pc + s for s in semis]))
    return labels, np.stack(rows)


# Cache for templates, keyed by catalog
_TEMPLATES_CACHE = {}


def _get_cached_templates(catalog):
    if catalog not in _TEMPLATES_CACHE:
        _TEMPLATES_CACHE[catalog] = get_templates(catalog)
    return _TEMPLATES_CACHE[catalog]


def _root_spelling(root_pc, notes):
    """Spell the root as the user did when they picked it, else with sharps."""
    for n in notes:
        try:
            if pitch_class_of(n) == root_pc:
                letter, alteration, _ = parse_note(n)
                return letter + ALTERATION_TO_ACCIDENTAL[alteration]
        except InvalidNote:
            continue
    return pitch_class_name(root_pc, sharps=True)


def _rank_matches(notes, catalog):
    """Ranked (root_pc, pattern) pairs whose template covers every input pitch class."""
    pcs = pitch_class_set(notes)
    target = _generate_template_vector(pcs)
    labels, matrix = _get_cached_templates(catalog)

    missing = ((matrix == 0) & (target > 0)).sum(axis=1)
    extra = matrix.sum(axis=1) - target.sum()
    candidates = np.flatnonzero(missing == 0)

    first_pc = pcs[0]
    ranked = sorted(
        candidates,
        key=lambda i: (
            int(extra[i]),
            labels[i][0] != first_pc,
            labels[i][1],
            (labels[i][0] - first_pc) % 12,
        ),
    )
    return [(labels[i][0], labels[i][2]) for i in ranked]


def detect_chords(notes) -> list[str]:
    """
    Chord names containing all of notes, best match first (e.g. ['CM', 'CM7', ...]).

    Fewer than two distinct pitch classes give [].
    """
    if len(pitch_class_set(notes)) < MIN_CHORD_NOTES:
        return []
    return [
        f"{_root_spelling(root_pc, notes)}{chord.value}"
        for root_pc, chord in _rank_matches(notes, ChordType)
    ]


def detect_scales(notes, limit: int | None = None) -> list[str]:
    """
    Scale names containing all of notes, best match first (e.g. ['C major', ...]).

    Fewer than three distinct pitch classes give []. limit truncates the list.
    """
    if len(pitch_class_set(notes)) < MIN_SCALE_NOTES:
        return []
    names = [
        f"{_root_spelling(root_pc, notes)} {mode.value}"
        for root_pc, mode in _rank_matches(notes, ScaleMode)
    ]
    return names if limit is None else names[:limit]


def toggle_selected_note(selected, note: str) -> list[str]:
    """
    Return a new selection with note added, or with its enharmonic twin removed.

    The input list is left untouched.
    """
    pc = pitch_class_of(note)
    kept = []
    removed = False
    for n in selected:
        try:
            same = pitch_class_of(n) == pc
        except InvalidNote:
            same = False
        if same:
            removed = True
        else:
            kept.append(n)
    if not removed:
        kept.append(note)
    return kept
