"""
Circle-of-fifths geometry: which note sits in each of the 12 slots, how the
current scale binds onto those slots, and the coloured quality arcs drawn
around the rim.
"""
import collections

from .constants import ARC_COLORS, CIRCLE_OF_FIFTHS_FLATS, CIRCLE_OF_FIFTHS_SHARPS
from .degrees import DIMINISHED, MAJOR, MINOR, triad_for_degree
from .pitch import InvalidNote, note_is_active, same_note

CirclePosition = collections.namedtuple(
    "CirclePosition", ["index", "note", "is_active", "is_tonic", "degree", "triad"]
)
QualityArc = collections.namedtuple("QualityArc", ["quality", "start", "end", "color"])

_SLOTS = 12


def circle_notes(accidental_mode: str = "flats") -> tuple[str, ...]:
    if accidental_mode == "sharps":
        return CIRCLE_OF_FIFTHS_SHARPS
    return CIRCLE_OF_FIFTHS_FLATS


def circle_index(note: str, accidental_mode: str = "flats") -> int:
    """Slot of note on the circle, or -1 when it cannot be parsed."""
    try:
        for i, slot in enumerate(circle_notes(accidental_mode)):
            if same_note(slot, note):
                return i
    except InvalidNote:
        pass
    return -1


def is_in_scale(circle_note: str, scale_notes) -> bool:
    return note_is_active(circle_note, scale_notes)


def circle_positions(tonic, active_notes, degrees, accidental_mode="flats"):
    """Bind every slot to its active flag, tonic flag, scale degree and triad."""
    positions = []
    for index, note in enumerate(circle_notes(accidental_mode)):
        degree = next((d for d in degrees if same_note(d.note, note)), None)
        positions.append(CirclePosition(
            index=index,
            note=note,
            is_active=is_in_scale(note, active_notes),
            is_tonic=note_is_active(note, [tonic]),
            degree=degree,
            triad=triad_for_degree(degree.note, degree.quality) if degree else None,
        ))
    return positions


def find_arc_span(indices) -> tuple[int, int]:
    """
    Shortest circular span covering every slot in indices, as (start, end).

    The span opens right after the largest gap between neighbouring slots
    (counting the wrap from the last slot back to the first) and closes right
    before it, so {10, 11, 0, 1} gives (10, 1). When several gaps tie for
    largest, the first one met in ascending order wins.
    """
    if not indices:
        return 0, 0
    ordered = sorted(indices)
    if len(ordered) == 1:
        return ordered[0], ordered[0]

    n = len(ordered)
    max_gap = 0
    gap_end = 0
    for i, current in enumerate(ordered):
        nxt = ordered[(i + 1) % n]
        gap = _SLOTS - current + nxt if i == n - 1 else nxt - current
        if gap > max_gap:
            max_gap = gap
            gap_end = (i + 1) % n

    return ordered[gap_end], ordered[(gap_end - 1) % n]


def quality_arcs(positions) -> list[QualityArc]:
    """
    Arcs for the major and minor degrees plus one per diminished degree.

    Augmented degrees get no arc.
    """
    groups: dict[str, list[int]] = {MAJOR: [], MINOR: [], DIMINISHED: []}
    for pos in positions:
        if pos.degree is None or pos.degree.quality not in groups:
            continue
        groups[pos.degree.quality].append(pos.index)

    arcs = []
    for quality, label in ((MAJOR, "MAJOR"), (MINOR, "MINOR")):
        if groups[quality]:
            start, end = find_arc_span(groups[quality])
            arcs.append(QualityArc(label, start, end, ARC_COLORS[label]))
    for idx in groups[DIMINISHED]:
        arcs.append(QualityArc("DIM", idx, idx, ARC_COLORS["DIM"]))
    return arcs
